"""Search-string query language: tokenizer, parser, validators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PogoSearch.query.builder import build_search_string
from PogoSearch.query.conflicts import (
    DEFAULT_RULES,
    ConflictGroup,
    ConflictRules,
    detect_conflicts,
    extract_filters,
)
from PogoSearch.query.parser import Parser, QueryParseError
from PogoSearch.query.syntax import validate_syntax
from PogoSearch.query.tokenizer import QueryTokenizer, tokenize
from PogoSearch.query.validation import parse_search_string, validate_search_string

if TYPE_CHECKING:
    from PogoSearch.config import AppConfig

__all__ = [
    "DEFAULT_RULES",
    "ConflictGroup",
    "ConflictRules",
    "Parser",
    "QueryParseError",
    "QueryTokenizer",
    "build_search_string",
    "create_conflict_rules",
    "detect_conflicts",
    "extract_filters",
    "parse_search_string",
    "tokenize",
    "validate_search_string",
    "validate_syntax",
]


def create_conflict_rules(config: AppConfig) -> ConflictRules:
    """Build conflict rules from the ``query`` config section."""
    return ConflictRules(
        global_exclusive=config.query.global_exclusive,
        and_exclusive=config.query.and_exclusive,
    )
