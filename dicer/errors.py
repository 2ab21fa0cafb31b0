"""Exception hierarchy for dice notation and rolling.

Every error the engine raises is a DiceError, so callers (the HTTP layer,
tests) can catch the whole family with one except clause.
"""

from __future__ import annotations


class DiceError(ValueError):
    """Raised when a dice notation or roll specification is invalid."""


class ParseError(DiceError):
    """Raised when a notation string cannot be parsed."""


class InvalidTokenError(ParseError):
    """Raised by the lexer on a character that starts no token."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Encountered invalid token: `{character}`")


class NumberTooLargeError(ParseError):
    """Raised by the lexer on a digit run too long to convert to an integer."""

    def __init__(self, digits: int, position: int) -> None:
        self.digits = digits
        self.position = position
        super().__init__(f"Number too large: {digits} digits at position {position}")


class UnexpectedTokenError(ParseError):
    """Raised by the parser when the current token does not fit the grammar."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected `{expected}`, got `{found}`")


class DivisionByZeroError(ParseError):
    """Raised for a `/0` multiplier clause."""

    def __init__(self) -> None:
        super().__init__("Division by zero in multiplier")


class EmptyRangeError(DiceError):
    """Raised when a die's range contains no values, e.g. `1d0`."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Empty die range: {low}..={high}")


class LimitExceededError(DiceError):
    """Raised when a roll exceeds the service's configured bounds."""
