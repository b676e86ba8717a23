"""Load the lexicon (catalog, overlaps, warnings) from YAML.

Catalog file layout::

    canonical: English
    languages:            # name -> locale, order is the catalog order
      English: en
      French: fr
    concepts:
      - key: psychic
        terms: {English: Psychic, French: Psy}
      - key: psychic-move
        terms: {English: Psychic, French: Psyko}
    overlaps:
      - {concept: psychic, language: English, only: Name}
      - {concept: psychic-move, language: English, only: Move}
    warnings:
      - term: Psychic
        language: English
        qualifier: Move     # or "*" for any search type
        source: "shown when the term is read in this language"
        target: "shown when the term is written in this language"

The location may be empty (bundled catalog), an ``http(s)://`` URL or a
local path.
"""

from __future__ import annotations

import time
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

import requests
import yaml

from PogoSearch.config.common import (
    expect_list,
    expect_mapping,
    expect_str,
    get_optional_value,
    get_required_value,
)
from PogoSearch.core.models import SearchType
from PogoSearch.lexicon.catalog import ConceptId, TermCatalog
from PogoSearch.lexicon.resolver import Lexicon
from PogoSearch.lexicon.segment import SEPARATORS, split_segment
from PogoSearch.lexicon.tables import OverlapTable, WarningEntry, WarningTable
from PogoSearch.utils.log import log

BUNDLED_PACKAGE = "PogoSearch.data"
BUNDLED_CATALOG = "catalog.yml"

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 3
BASE_PAUSE = 1.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "pogo-search/0.1",
    "Accept": "application/yaml,text/yaml,text/plain;q=0.9,*/*;q=0.8",
}

_WILDCARD = "*"


def load_lexicon(location: str = "", *, timeout: float | None = None) -> Lexicon:
    """Load a lexicon from the bundled data, a URL or a file.

    Args:
        location: Empty for the bundled catalog, an http(s) URL, or a path.
        timeout: Request timeout in seconds for URL locations.

    Returns:
        Parsed lexicon.

    Raises:
        TypeError: If the catalog shape is invalid.
        ValueError: If the catalog content is inconsistent.
        requests.RequestException: If a remote catalog cannot be fetched.
        OSError: If a local catalog cannot be read.
    """
    location = location.strip()
    if not location:
        log.debug("Loading bundled catalog %s/%s", BUNDLED_PACKAGE, BUNDLED_CATALOG)
        text = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_CATALOG).read_text(encoding="utf-8")
    elif location.startswith(("http://", "https://")):
        text = fetch_catalog_text(location, timeout=timeout)
    else:
        log.debug("Loading catalog file %s", location)
        text = Path(location).read_text(encoding="utf-8")

    lexicon = parse_lexicon(parse_catalog_yaml(text))
    log.debug(
        "Catalog loaded: languages=%d concepts=%d overlaps=%d warnings=%d",
        len(lexicon.languages),
        len(lexicon.catalog),
        len(lexicon.overlaps),
        len(lexicon.warnings),
    )
    return lexicon


def fetch_catalog_text(url: str, *, timeout: float | None = None) -> str:
    """Fetch catalog YAML over HTTP, retrying transient failures.

    Raises:
        requests.RequestException: Last error once all attempts failed.
    """
    timeout = timeout or DEFAULT_TIMEOUT
    last_err: Exception | None = None
    with requests.Session() as session:
        for attempt in range(1, MAX_ATTEMPTS + 1):
            try:
                log.debug("Catalog request attempt %d/%d to %s", attempt, MAX_ATTEMPTS, url)
                resp = session.get(url, headers=HEADERS, timeout=timeout)
                if resp.status_code in RETRYABLE_STATUS:
                    raise requests.exceptions.HTTPError(f"HTTP {resp.status_code}", response=resp)
                resp.raise_for_status()
                return resp.text
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                last_err = e
            except requests.exceptions.HTTPError as e:
                last_err = e
                if getattr(e.response, "status_code", None) not in RETRYABLE_STATUS:
                    break

            if attempt < MAX_ATTEMPTS:
                log.debug("Catalog fetch retrying after attempt %d (error=%s)", attempt, last_err)
                time.sleep(BASE_PAUSE * (2 ** (attempt - 1)))

    assert last_err is not None
    raise last_err


def parse_catalog_yaml(text: str) -> dict[str, Any]:
    """Parse raw catalog YAML into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Catalog root must be a mapping/object")
    return dict(data)


def parse_lexicon(raw: Mapping[str, Any]) -> Lexicon:
    """Build a lexicon from a catalog mapping.

    Raises:
        TypeError: If values have the wrong type.
        ValueError: If required keys are missing or entries reference
            unknown languages or concepts.
    """
    canonical = expect_str(get_required_value(raw, "canonical", "canonical"), "canonical").strip()
    languages = _parse_languages(get_required_value(raw, "languages", "languages"))
    if canonical not in languages:
        raise ValueError(f"canonical must be one of languages: {canonical}")

    keys, terms = _parse_concepts(get_required_value(raw, "concepts", "concepts"), languages)
    catalog = TermCatalog(terms, canonical=canonical, keys=keys, locales=languages)

    overlaps = _parse_overlaps(get_optional_value(raw, "overlaps", []) or [], catalog)
    warnings = _parse_warnings(get_optional_value(raw, "warnings", []) or [], catalog)
    return Lexicon(catalog=catalog, overlaps=overlaps, warnings=warnings)


def _parse_languages(value: Any) -> dict[str, str]:
    section = expect_mapping(value, "languages")
    if not section:
        raise ValueError("languages must include at least one language")
    out: dict[str, str] = {}
    for name, locale in section.items():
        language = expect_str(name, "languages keys").strip()
        out[language] = expect_str(locale, f"languages.{language}").strip()
    return out


def _parse_concepts(value: Any, languages: Mapping[str, str]) -> tuple[list[str], dict[str, list[str]]]:
    keys: list[str] = []
    terms: dict[str, list[str]] = {language: [] for language in languages}
    seen: set[str] = set()
    for idx, item in enumerate(expect_list(value, "concepts")):
        config_key = f"concepts[{idx}]"
        entry = expect_mapping(item, config_key)
        key = expect_str(get_required_value(entry, "key", f"{config_key}.key"), f"{config_key}.key").strip()
        if not key:
            raise ValueError(f"{config_key}.key must not be empty")
        if key in seen:
            raise ValueError(f"{config_key}.key is duplicated: {key}")
        seen.add(key)

        forms = expect_mapping(get_required_value(entry, "terms", f"{config_key}.terms"), f"{config_key}.terms")
        unknown = set(forms) - set(languages)
        if unknown:
            raise ValueError(f"{config_key}.terms has unknown languages: {sorted(unknown)}")
        for language in languages:
            form = expect_str(
                get_required_value(forms, language, f"{config_key}.terms.{language}"),
                f"{config_key}.terms.{language}",
            )
            _check_form(form, f"{config_key}.terms.{language}")
            terms[language].append(form)
        keys.append(key)
    return keys, terms


def _check_form(form: str, config_key: str) -> None:
    """Reject surface forms that segmentation would not read back whole.

    A form starting with digits or markers, ending with digits, stars or
    dashes, or containing a separator could be written but never matched.
    """
    if not form:
        raise ValueError(f"{config_key} must not be empty")
    if any(char in SEPARATORS for char in form):
        raise ValueError(f"{config_key} must not contain separators (, | & ; :): {form!r}")
    segment = split_segment(form)
    if segment.core != form:
        raise ValueError(
            f"{config_key} must be a bare term, but reads as prefix={segment.prefix!r} "
            f"core={segment.core!r} postfix={segment.postfix!r}: {form!r}"
        )


def _parse_overlaps(value: Any, catalog: TermCatalog) -> OverlapTable:
    entries: dict[tuple[ConceptId, str], SearchType] = {}
    for idx, item in enumerate(expect_list(value, "overlaps")):
        config_key = f"overlaps[{idx}]"
        entry = expect_mapping(item, config_key)
        concept = _lookup_concept(entry, catalog, config_key)
        language = _expect_language(entry, catalog, config_key)
        only = expect_str(get_required_value(entry, "only", f"{config_key}.only"), f"{config_key}.only")
        entries[(concept, language)] = _parse_search_type(only, f"{config_key}.only")
    return OverlapTable(entries)


def _parse_warnings(value: Any, catalog: TermCatalog) -> WarningTable:
    entries: list[tuple[str, str, WarningEntry]] = []
    for idx, item in enumerate(expect_list(value, "warnings")):
        config_key = f"warnings[{idx}]"
        entry = expect_mapping(item, config_key)
        term = expect_str(get_required_value(entry, "term", f"{config_key}.term"), f"{config_key}.term")
        language = _expect_language(entry, catalog, config_key)
        qualifier_raw = expect_str(
            get_optional_value(entry, "qualifier", _WILDCARD), f"{config_key}.qualifier"
        ).strip()
        qualifier = None if qualifier_raw == _WILDCARD else _parse_search_type(qualifier_raw, f"{config_key}.qualifier")
        warning = WarningEntry(
            qualifier=qualifier,
            source_message=expect_str(
                get_required_value(entry, "source", f"{config_key}.source"), f"{config_key}.source"
            ),
            target_message=expect_str(
                get_required_value(entry, "target", f"{config_key}.target"), f"{config_key}.target"
            ),
        )
        entries.append((term, language, warning))
    return WarningTable(entries)


def _lookup_concept(entry: Mapping[str, Any], catalog: TermCatalog, config_key: str) -> ConceptId:
    key = expect_str(get_required_value(entry, "concept", f"{config_key}.concept"), f"{config_key}.concept")
    try:
        return catalog.concept_for_key(key.strip())
    except KeyError:
        raise ValueError(f"{config_key}.concept references unknown concept: {key}") from None


def _expect_language(entry: Mapping[str, Any], catalog: TermCatalog, config_key: str) -> str:
    language = expect_str(
        get_required_value(entry, "language", f"{config_key}.language"), f"{config_key}.language"
    ).strip()
    if not catalog.has_language(language):
        raise ValueError(f"{config_key}.language is not a catalog language: {language}")
    return language


def _parse_search_type(value: str, config_key: str) -> SearchType:
    try:
        return SearchType.parse(value)
    except ValueError:
        raise ValueError(f"{config_key} must be one of Move/Search/Name (M/S/N): {value}") from None
