"""Tokenizer for dice notation.

Turns a string such as ``3x4d6*5+1s2`` into a stream of tokens, one per
call to ``Lexer.next``. Whitespace between tokens is ignored.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from dicer.errors import InvalidTokenError, NumberTooLargeError


class TokenKind(str, enum.Enum):
    NUMBER = "Number"
    TIMES = "Times"
    DICE = "Dice"
    DROP = "Drop"
    MUL = "Mul"
    DIV = "Div"
    ADD = "Add"
    SUB = "Sub"
    EOF = "Eof"


_OPERATORS: dict[str, TokenKind] = {
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "x": TokenKind.TIMES,
    "d": TokenKind.DICE,
    "s": TokenKind.DROP,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: int | None = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"Number({self.value})"
        return self.kind.value


EOF = Token(TokenKind.EOF)


class Lexer:
    """Produces tokens from a notation string, one at a time."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0

    def _peek(self) -> str | None:
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def next(self) -> Token:
        """Return the next token, or EOF once the input is exhausted.

        Raises:
            InvalidTokenError: If the next non-space character starts no token.
            NumberTooLargeError: If a digit run exceeds the interpreter's
                integer conversion limit.
        """
        char = self._peek()
        while char is not None and char.isspace():
            self.position += 1
            char = self._peek()

        if char is None:
            return EOF

        if char in _OPERATORS:
            self.position += 1
            return Token(_OPERATORS[char])

        if char.isdecimal():
            start = self.position
            while self.position < len(self.source) and self.source[self.position].isdecimal():
                self.position += 1
            digits = self.source[start : self.position]
            try:
                value = int(digits)
            except ValueError as exc:
                raise NumberTooLargeError(len(digits), start) from exc
            return Token(TokenKind.NUMBER, value)

        raise InvalidTokenError(char, self.position)

    def __iter__(self) -> Iterator[Token]:
        token = self.next()
        while token != EOF:
            yield token
            token = self.next()
