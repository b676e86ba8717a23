"""Segmentation shared by the translator and the language detector.

A search string is cut at its separators (``, | & ; :``); each remaining
piece is split into a prefix, a translatable core and a postfix:

- prefix: whitespace, ``!``, ``+``, ``@``, ``#``, digits, ``-``
- core: the term itself
- postfix: whitespace, digits, ``-``, ``*``

Examples: ``!@psychic`` -> (``!@``, ``psychic``, ``""``),
``cp10-`` -> (``""``, ``cp``, ``10-``), ``4*`` -> (``4``, ``""``, ``*``).
"""

from __future__ import annotations

import re
import unicodedata

from PogoSearch.core.models import SearchType, Segment

SEPARATORS = frozenset(",|&;:")

_SEPARATOR_RE = re.compile(r"([,|&;:])")
_PREFIX_RE = re.compile(r"^[ \n!+@#0-9-]*")
_POSTFIX_RE = re.compile(r"[ \n0-9*-]*\Z")
_SEARCH_MARK_RE = re.compile(r"[0-9*-]")

# Only Latin combining diacritics are dropped; kana voicing marks and
# Indic/Thai vowel signs change the word.
_LATIN_MARKS_RE = re.compile("[\u0300-\u036f]")

_DOTTED_I_LOCALES = frozenset({"tr", "az"})


def split_separators(text: str) -> list[str]:
    """Split text on separators, keeping each separator as its own item."""
    return _SEPARATOR_RE.split(text)


def is_separator(piece: str) -> bool:
    return piece in SEPARATORS


def split_segment(text: str) -> Segment:
    """Split one separator-free piece into prefix, core and postfix."""
    prefix = _PREFIX_RE.match(text).group(0)
    rest = text[len(prefix):]
    postfix_match = _POSTFIX_RE.search(rest)
    core = rest[: postfix_match.start()]
    return Segment(prefix=prefix, core=core, postfix=postfix_match.group(0))


def classify_search_type(segment: Segment) -> SearchType:
    if "@" in segment.prefix:
        return SearchType.MOVE
    if _SEARCH_MARK_RE.search(segment.postfix):
        return SearchType.SEARCH
    return SearchType.NAME


def fold_term(term: str) -> str:
    """Return the comparison key: case-insensitive, ignoring Latin accents."""
    decomposed = unicodedata.normalize("NFKD", term)
    return _LATIN_MARKS_RE.sub("", decomposed).casefold()


def lower_for_locale(text: str, locale: str) -> str:
    """Lower-case text, honouring the dotted/dotless I of Turkish and Azerbaijani."""
    if locale.split("-")[0].lower() in _DOTTED_I_LOCALES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()
