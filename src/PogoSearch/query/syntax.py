"""Regex-level checks run on raw search strings before parsing."""

from __future__ import annotations

import re

from PogoSearch.core.query import SyntaxIssue, SyntaxIssueCode, SyntaxValidation

_WHITESPACE_RE = re.compile(r"\s")
# A Pokedex number group (comma-joined, or a single number of 2+ digits)
# at the start of the string or of an AND part, directly followed by a letter.
_NUMBERS_THEN_LETTER_RE = re.compile(r"(?:^|&)(?:\d+(?:,\d+)+|\d{2,})[^\W\d_]")
_NUMBER_GROUP_RE = re.compile(r"^[\d,]+$")

WHITESPACE_MESSAGE = "Search strings cannot contain spaces"
MISSING_AND_MESSAGE = "Missing & between Pokedex numbers and filter terms"
NUMBERS_JOINED_MESSAGE = "Use commas (,) not ampersands (&) between Pokedex numbers"


def validate_syntax(text: str) -> SyntaxValidation:
    """Check a raw search string for errors the parser cannot see.

    Args:
        text: Raw search string.

    Returns:
        Validation result listing every rule that failed, in rule order.
    """
    if not text:
        return SyntaxValidation()

    errors: list[SyntaxIssue] = []

    if _WHITESPACE_RE.search(text):
        errors.append(SyntaxIssue(SyntaxIssueCode.WHITESPACE, WHITESPACE_MESSAGE))

    if _NUMBERS_THEN_LETTER_RE.search(text):
        errors.append(SyntaxIssue(SyntaxIssueCode.MISSING_AND, MISSING_AND_MESSAGE))

    parts = [part.strip() for part in text.split("&")]
    for left, right in zip(parts, parts[1:]):
        if _NUMBER_GROUP_RE.match(left) and _NUMBER_GROUP_RE.match(right):
            errors.append(SyntaxIssue(SyntaxIssueCode.NUMBERS_JOINED_WITH_AND, NUMBERS_JOINED_MESSAGE))
            break

    return SyntaxValidation(tuple(errors))
