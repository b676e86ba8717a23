"""Service layer for PogoSearch.

Provides the search-string service and the factory that wires it from
configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PogoSearch.services.search_string import CanonicalText, SearchAnalysis, SearchStringService

if TYPE_CHECKING:
    from PogoSearch.config import AppConfig
    from PogoSearch.lexicon import Lexicon


def create_search_string_service(config: AppConfig, lexicon: Lexicon | None = None) -> SearchStringService:
    """Create a search-string service from configuration.

    Args:
        config: Application configuration.
        lexicon: Pre-loaded lexicon; loaded from ``config.catalog`` when None.

    Returns:
        Configured SearchStringService instance.

    Raises:
        ValueError: If a configured default language is not in the catalog.
    """
    from PogoSearch.lexicon import create_lexicon
    from PogoSearch.query import create_conflict_rules
    from PogoSearch.translation import LanguageDetector, Translator

    if lexicon is None:
        lexicon = create_lexicon(config)

    translation = config.translation
    if not translation.auto_detect and not lexicon.catalog.has_language(translation.source):
        raise ValueError(f"translation.source is not a catalog language: {translation.source}")
    if not lexicon.catalog.has_language(translation.target):
        raise ValueError(f"translation.target is not a catalog language: {translation.target}")

    return SearchStringService(
        lexicon=lexicon,
        rules=create_conflict_rules(config),
        translator=Translator(lexicon),
        detector=LanguageDetector(lexicon, skip_unknown=translation.skip_unknown_terms),
    )


__all__ = [
    "CanonicalText",
    "SearchAnalysis",
    "SearchStringService",
    "create_search_string_service",
]
