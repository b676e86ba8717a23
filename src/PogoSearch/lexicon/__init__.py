"""Lexicon layer: cross-language term catalog, overlap and warning tables."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from PogoSearch.lexicon.catalog import ConceptId, TermCatalog
from PogoSearch.lexicon.loader import load_lexicon, parse_lexicon
from PogoSearch.lexicon.resolver import Lexicon
from PogoSearch.lexicon.tables import OverlapTable, WarningEntry, WarningTable
from PogoSearch.utils.log import log

if TYPE_CHECKING:
    from PogoSearch.config import AppConfig

__all__ = [
    "ConceptId",
    "Lexicon",
    "OverlapTable",
    "TermCatalog",
    "WarningEntry",
    "WarningTable",
    "create_lexicon",
    "load_lexicon",
    "parse_lexicon",
]


def create_lexicon(config: AppConfig) -> Lexicon:
    """Load the lexicon selected by configuration.

    The environment variable named by ``catalog.path_env`` (when set and
    non-empty) takes precedence over ``catalog.path``.

    Args:
        config: Application configuration.

    Returns:
        Loaded lexicon.
    """
    location = config.catalog.path
    if config.catalog.path_env:
        override = os.getenv(config.catalog.path_env, "").strip()
        if override:
            log.debug("Catalog location taken from %s", config.catalog.path_env)
            location = override

    lexicon = load_lexicon(location, timeout=config.catalog.timeout)
    log.debug("Using catalog %s (canonical=%s)", location or "<bundled>", lexicon.canonical)
    return lexicon
