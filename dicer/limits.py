"""Caller-side bounds for rolls built from untrusted input."""

from __future__ import annotations

from dicer.config import Settings
from dicer.dice import Dice
from dicer.errors import LimitExceededError


def check_limits(times: int, dice: Dice, settings: Settings) -> None:
    """Reject rolls too large to evaluate on behalf of a client.

    Args:
        times: How many times the dice will be rolled.
        dice: The parsed dice.
        settings: Source of the configured maximums.

    Raises:
        LimitExceededError: If any bound is exceeded.
    """
    if times > settings.max_times:
        raise LimitExceededError(f"Too many rolls: {times} (max {settings.max_times})")
    if dice.count > settings.max_dice:
        raise LimitExceededError(f"Too many dice: {dice.count} (max {settings.max_dice})")
    sides = dice.uniform.high - dice.uniform.low + 1
    if sides > settings.max_sides:
        raise LimitExceededError(f"Too many sides: {sides} (max {settings.max_sides})")
