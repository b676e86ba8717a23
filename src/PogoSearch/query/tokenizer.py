"""Search-string tokenizer.

Operator characters:

- ``!``            NOT
- ``&`` ``|``      AND
- ``,`` ``;`` ``:`` OR

Everything else is filter text.
"""

from __future__ import annotations

from typing import Iterator

from PogoSearch.core.query import Token, TokenType

_OPERATORS: dict[str, TokenType] = {
    "!": TokenType.NOT,
    "&": TokenType.AND,
    "|": TokenType.AND,
    ",": TokenType.OR,
    ";": TokenType.OR,
    ":": TokenType.OR,
}


class QueryTokenizer:
    """Lazy, restartable token stream over a search string.

    The input is lower-cased and stripped once; every ``iter()`` call starts
    a fresh pass and ends with a single EOF token.
    """

    def __init__(self, text: str) -> None:
        self.text = text.lower().strip()

    def __iter__(self) -> Iterator[Token]:
        text = self.text
        pos = 0
        while pos < len(text):
            char = text[pos]
            if char.isspace():
                pos += 1
                continue

            op_type = _OPERATORS.get(char)
            if op_type is not None:
                yield Token(op_type, char, pos)
                pos += 1
                continue

            start = pos
            while pos < len(text) and text[pos] not in _OPERATORS:
                pos += 1
            yield Token(TokenType.FILTER, text[start:pos].strip(), start)

        yield Token(TokenType.EOF, None, len(text))


def tokenize(text: str) -> list[Token]:
    """Return all tokens of ``text``, EOF included."""
    return list(QueryTokenizer(text))
