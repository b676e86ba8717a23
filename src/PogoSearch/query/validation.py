"""Parse and validate whole search strings, returning results as values."""

from __future__ import annotations

from PogoSearch.core.query import Conflict, ConflictKind, ParseResult, ValidationReport
from PogoSearch.query.conflicts import DEFAULT_RULES, ConflictRules, detect_conflicts, extract_filters
from PogoSearch.query.parser import Parser, QueryParseError
from PogoSearch.query.syntax import validate_syntax
from PogoSearch.query.tokenizer import QueryTokenizer
from PogoSearch.utils.log import log


def parse_search_string(text: str | None, rules: ConflictRules | None = None) -> ParseResult:
    """Parse a search string and analyse its filters.

    Parse failures do not raise: they come back as a single PARSE_ERROR
    conflict with no AST.

    Args:
        text: Search string (any case).
        rules: Exclusive groups for conflict detection; None uses the defaults.

    Returns:
        Parse result.
    """
    if not text or not text.strip():
        return ParseResult(ast=None)

    try:
        ast = Parser(QueryTokenizer(text)).parse()
    except QueryParseError as e:
        log.debug("Parse failed for %r: %s", text, e)
        return ParseResult(
            ast=None,
            conflicts=(Conflict(kind=ConflictKind.PARSE_ERROR, message=f"Invalid search syntax: {e}"),),
        )

    included, excluded = extract_filters(ast)
    return ParseResult(
        ast=ast,
        included=included,
        excluded=excluded,
        conflicts=tuple(detect_conflicts(ast, rules or DEFAULT_RULES)),
    )


def validate_search_string(text: str | None, rules: ConflictRules | None = None) -> ValidationReport:
    """Run the syntax pre-checks, then parse when they pass."""
    syntax = validate_syntax(text or "")
    if not syntax.valid:
        return ValidationReport(syntax=syntax, parse=None)
    return ValidationReport(syntax=syntax, parse=parse_search_string(text, rules))
