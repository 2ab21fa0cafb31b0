"""Recursive-descent parser for dice notation.

Grammar::

    roll            := count_or_repeat "d" NUMBER multiplier? modifier? drop?
    count_or_repeat := NUMBER ("x" NUMBER)?
    multiplier      := ("*" | "/") NUMBER
    modifier        := ("+" | "-") NUMBER
    drop            := "s" NUMBER

Examples: 1d6, 2d20+2, 4d6s1, 3x4d6*5+1s2.
"""

from __future__ import annotations

import logging
import random

from dicer.dice import Bounds, Dice, DiceRoller
from dicer.errors import DivisionByZeroError, UnexpectedTokenError
from dicer.lexer import Lexer, Token, TokenKind

logger = logging.getLogger(__name__)

_NUMBER_EXPECTED = "Number(n)"


class Parser:
    """Single-token-lookahead parser over a ``Lexer``.

    The first token is read on construction, so an invalid leading
    character raises from ``Parser(...)`` itself.
    """

    def __init__(self, source: str) -> None:
        self.lexer = Lexer(source)
        self.current: Token = self.lexer.next()

    def parse(self) -> tuple[int, Dice]:
        """Parse the whole notation.

        Returns:
            Tuple of (number of times to roll, the dice to roll).

        Raises:
            ParseError: On the first token that does not fit the grammar.
        """
        n = self._number()
        if self.current.kind is TokenKind.TIMES:
            self._advance()
            times, count = n, self._number()
        else:
            times, count = 1, n
        self._expect(TokenKind.DICE)

        sides = self._number()

        multiplier = self._multiplier()
        modifier = self._modifier()
        drop = self._drop()
        self._expect(TokenKind.EOF)

        dice = Dice(
            count=count,
            range=Bounds.closed(1, sides),
            multiplier=1 if multiplier is None else multiplier,
            modifier=0 if modifier is None else modifier,
            drop=0 if drop is None else drop,
        )
        return times, dice

    def _advance(self) -> None:
        self.current = self.lexer.next()

    def _number(self) -> int:
        token = self.current
        if token.kind is not TokenKind.NUMBER:
            raise UnexpectedTokenError(_NUMBER_EXPECTED, str(token))
        self._advance()
        return token.value

    def _expect(self, kind: TokenKind) -> None:
        if self.current.kind is not kind:
            raise UnexpectedTokenError(kind.value, str(self.current))
        self._advance()

    def _multiplier(self) -> int | None:
        if self.current.kind is TokenKind.MUL:
            self._advance()
            return self._number()
        if self.current.kind is TokenKind.DIV:
            self._advance()
            divisor = self._number()
            if divisor == 0:
                raise DivisionByZeroError()
            # Numbers are never negative, so floor division truncates here.
            return 1 // divisor
        return None

    def _modifier(self) -> int | None:
        if self.current.kind is TokenKind.ADD:
            self._advance()
            return self._number()
        if self.current.kind is TokenKind.SUB:
            self._advance()
            return -self._number()
        return None

    def _drop(self) -> int | None:
        if self.current.kind is TokenKind.DROP:
            self._advance()
            return self._number()
        return None


def parse(notation: str) -> tuple[int, Dice]:
    """Parse dice notation into (times, dice).

    Args:
        notation: Dice notation string, e.g. "3x4d6*5+1s2".

    Returns:
        Tuple of (number of times to roll, the dice to roll).

    Raises:
        DiceError: If the notation is invalid.
    """
    times, dice = Parser(notation).parse()
    logger.debug("Parsed %r as %d x %r", notation, times, dice)
    return times, dice


def roll(notation: str, rng: random.Random | None = None) -> list[int]:
    """Parse notation and roll it, returning one total per repetition.

    Args:
        notation: Dice notation string, e.g. "2d6+3".
        rng: Random source for a fresh roller; a private one when omitted.

    Raises:
        DiceError: If the notation is invalid.
    """
    times, dice = parse(notation)
    return DiceRoller(rng).roll_times(dice, times)
