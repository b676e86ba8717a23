"""Query-language tokens, syntax tree and validation results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


class TokenType(str, Enum):
    FILTER = "FILTER"
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    EOF = "EOF"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of a search string.

    Attributes:
        type: Token kind.
        value: Filter text or the operator character; None for EOF.
        position: Offset in the normalized (lower-cased, stripped) input.
    """

    type: TokenType
    value: str | None
    position: int


@dataclass(frozen=True, slots=True)
class Filter:
    term: str


@dataclass(frozen=True, slots=True)
class Not:
    """Negated filter. The grammar only allows negating a single filter."""

    filter: Filter


@dataclass(frozen=True, slots=True)
class And:
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class Or:
    left: Node
    right: Node


Node = Union[Filter, Not, And, Or]


class ConflictKind(str, Enum):
    MUTUALLY_EXCLUSIVE = "MUTUALLY_EXCLUSIVE"
    PARSE_ERROR = "PARSE_ERROR"


@dataclass(frozen=True, slots=True)
class Conflict:
    """A structurally valid but unsatisfiable combination, or a parse failure."""

    kind: ConflictKind
    message: str
    filters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Parsed search string.

    Attributes:
        ast: Root node, or None for an empty string or a parse failure.
        included: Positive filter terms, duplicate-free, first-seen order.
        excluded: Negated filter terms, duplicate-free, first-seen order.
        conflicts: Mutually exclusive combinations and parse errors.
    """

    ast: Node | None
    included: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()
    conflicts: Sequence[Conflict] = ()

    @property
    def valid(self) -> bool:
        return not self.conflicts


class SyntaxIssueCode(str, Enum):
    WHITESPACE = "WHITESPACE"
    MISSING_AND = "MISSING_AND"
    NUMBERS_JOINED_WITH_AND = "NUMBERS_JOINED_WITH_AND"


@dataclass(frozen=True, slots=True)
class SyntaxIssue:
    code: SyntaxIssueCode
    message: str


@dataclass(frozen=True, slots=True)
class SyntaxValidation:
    errors: tuple[SyntaxIssue, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def reason(self) -> str | None:
        return self.errors[0].message if self.errors else None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Syntax pre-check plus parse result; ``parse`` is None when syntax failed."""

    syntax: SyntaxValidation
    parse: ParseResult | None

    @property
    def valid(self) -> bool:
        return self.syntax.valid and self.parse is not None and self.parse.valid

    @property
    def messages(self) -> list[str]:
        out = [issue.message for issue in self.syntax.errors]
        if self.parse is not None:
            out.extend(conflict.message for conflict in self.parse.conflicts)
        return out
