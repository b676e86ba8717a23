"""Recursive-descent parser for search strings.

Grammar (NOT binds tightest, OR loosest)::

    or_expr  := and_expr ( OR  and_expr )*      # left-associative
    and_expr := not_expr ( AND not_expr )*      # left-associative
    not_expr := NOT filter | filter
    filter   := FILTER

``a&b,c`` parses as ``Or(And(a, b), c)``: the comma does not distribute over
the AND group on its left.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from PogoSearch.core.query import And, Filter, Node, Not, Or, Token, TokenType


class QueryParseError(ValueError):
    """Token sequence does not match the grammar.

    Attributes:
        token: The offending token.
        expected: Token type the grammar required at that point.
    """

    def __init__(self, token: Token, expected: TokenType) -> None:
        self.token = token
        self.expected = expected
        where = f" at position {token.position}"
        got = token.type.value if token.value is None else f"{token.type.value} {token.value!r}"
        super().__init__(f"Expected {expected.value} but got {got}{where}")


class Parser:
    """Build an AST from a token stream (e.g. a ``QueryTokenizer``)."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._current = self._next_token()

    def parse(self) -> Node | None:
        """Parse the whole stream.

        Returns:
            Root node, or None for an empty stream.

        Raises:
            QueryParseError: On any grammar violation, including tokens left
                over after a complete expression.
        """
        if self._current.type is TokenType.EOF:
            return None
        node = self._or_expr()
        if self._current.type is not TokenType.EOF:
            raise QueryParseError(self._current, TokenType.EOF)
        return node

    def _next_token(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return Token(TokenType.EOF, None, -1)
        return token

    def _eat(self, token_type: TokenType) -> Token:
        token = self._current
        if token.type is not token_type:
            raise QueryParseError(token, token_type)
        if token.type is not TokenType.EOF:
            self._current = self._next_token()
        return token

    def _or_expr(self) -> Node:
        node = self._and_expr()
        while self._current.type is TokenType.OR:
            self._eat(TokenType.OR)
            node = Or(node, self._and_expr())
        return node

    def _and_expr(self) -> Node:
        node = self._not_expr()
        while self._current.type is TokenType.AND:
            self._eat(TokenType.AND)
            node = And(node, self._not_expr())
        return node

    def _not_expr(self) -> Node:
        if self._current.type is TokenType.NOT:
            self._eat(TokenType.NOT)
            return Not(self._filter())
        return self._filter()

    def _filter(self) -> Filter:
        token = self._eat(TokenType.FILTER)
        return Filter(token.value or "")
