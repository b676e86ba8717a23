"""Translation domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PogoSearch.config.common import (
    expect_bool,
    expect_str,
    get_optional_value,
    get_section,
)

AUTO_SOURCE = "auto"


@dataclass(frozen=True, slots=True)
class TranslationConfig:
    """Store validated translation defaults.

    Attributes:
        source: Source language name, or ``auto`` to detect it per string.
        target: Target language name.
        lowercase: Lower-case translated output with the target locale.
        skip_unknown_terms: Let detection ignore terms found in no language.
    """

    source: str
    target: str
    lowercase: bool
    skip_unknown_terms: bool

    @property
    def auto_detect(self) -> bool:
        return self.source == AUTO_SOURCE


def load_translation(raw: Mapping[str, Any]) -> TranslationConfig:
    """Load the optional ``translation`` section."""
    section = get_section(raw, "translation", required=False)
    source = expect_str(get_optional_value(section, "source", AUTO_SOURCE), "translation.source").strip()
    if source.lower() == AUTO_SOURCE:
        source = AUTO_SOURCE
    return TranslationConfig(
        source=source,
        target=expect_str(get_optional_value(section, "target", "English"), "translation.target").strip(),
        lowercase=expect_bool(get_optional_value(section, "lowercase", False), "translation.lowercase"),
        skip_unknown_terms=expect_bool(
            get_optional_value(section, "skip_unknown_terms", False), "translation.skip_unknown_terms"
        ),
    )


def check_translation(config: TranslationConfig) -> None:
    """Validate translation domain constraints.

    Language names are checked against the catalog when the service is
    created, since the catalog is not known at config time.

    Raises:
        ValueError: If a language name is empty.
    """
    if not config.source:
        raise ValueError("translation.source must not be empty")
    if not config.target:
        raise ValueError("translation.target must not be empty")
    if config.target == AUTO_SOURCE:
        raise ValueError("translation.target cannot be 'auto'")
