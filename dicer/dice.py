"""Server-side dice rolling engine.

A ``Dice`` value describes one compound roll: how many dice, which faces,
a multiplier, a flat modifier, and how many of the lowest dice to drop.
A ``DiceRoller`` evaluates it against the ``random.Random`` it owns.

Rolling ``3d6s1`` (drop the lowest of three d6) with a fixed seed::

    roller = DiceRoller.seeded(42)
    roller.roll(Dice(count=3, range=Bounds.closed(1, 6), drop=1))

A roller is not thread-safe: each sample advances the generator's state.
Give every thread (or request) its own roller.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from dicer.errors import EmptyRangeError


@dataclass(frozen=True)
class Bounds:
    """A range of die faces with optional, inclusive or exclusive ends.

    ``start=None`` or ``end=None`` means unbounded on that side; see
    ``to_uniform`` for how those are resolved.
    """

    start: int | None
    end: int | None
    start_inclusive: bool = True
    end_inclusive: bool = True

    @classmethod
    def closed(cls, start: int, end: int) -> Bounds:
        """Return ``start..=end``."""
        return cls(start, end)

    @classmethod
    def half_open(cls, start: int, end: int) -> Bounds:
        """Return ``start..end``."""
        return cls(start, end, end_inclusive=False)


DieRange = Bounds | range


@dataclass(frozen=True)
class Uniform:
    """Uniform distribution over the integers ``low..=high``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise EmptyRangeError(self.low, self.high)

    def sample(self, rng: random.Random) -> int:
        return rng.randint(self.low, self.high)


def to_uniform(bounds: DieRange) -> Uniform:
    """Build a uniform distribution over a die range.

    The start value is always included, even when the range marks it
    exclusive. A missing start resolves to 0. A missing end also resolves
    to 0 and is treated as inclusive, so ``Bounds(None, None)`` always
    samples 0.

    Args:
        bounds: A ``Bounds`` or a step-1 ``range``.

    Returns:
        The distribution to sample die faces from.

    Raises:
        EmptyRangeError: If the resolved interval holds no integers.
        ValueError: If a ``range`` with a step other than 1 is given.
    """
    if isinstance(bounds, range):
        if bounds.step != 1:
            raise ValueError(f"Die ranges must have step 1, got {bounds!r}")
        return Uniform(bounds.start, bounds.stop - 1)

    low = bounds.start if bounds.start is not None else 0
    if bounds.end is None:
        high = 0
    elif bounds.end_inclusive:
        high = bounds.end
    else:
        high = bounds.end - 1
    return Uniform(low, high)


@dataclass(frozen=True)
class Dice:
    """An immutable description of a compound dice roll.

    ``drop`` is clamped to ``count`` (and to zero from below) on
    construction. Dropping every die makes the kept sum zero, so such a
    roll always evaluates to ``modifier``.
    """

    count: int = 1
    range: DieRange = Bounds.closed(1, 6)
    multiplier: int = 1
    modifier: int = 0
    drop: int = 0
    uniform: Uniform = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "drop", max(0, min(self.drop, self.count)))
        object.__setattr__(self, "uniform", to_uniform(self.range))

    @classmethod
    def default(cls) -> Dice:
        """Return a single six-sided die."""
        return cls()

    def roll_with_rng(self, rng: random.Random) -> int:
        """Evaluate this roll once against ``rng``."""
        rolls = sorted(self.uniform.sample(rng) for _ in range(self.count))
        kept = rolls[self.drop :]
        return self.multiplier * sum(kept) + self.modifier


class DiceRoller:
    """Rolls ``Dice`` using the random number generator it owns."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int) -> DiceRoller:
        """Return a roller whose results are reproducible for ``seed``."""
        return cls(random.Random(seed))

    def roll(self, dice: Dice) -> int:
        return dice.roll_with_rng(self.rng)

    def roll_times(self, dice: Dice, times: int) -> list[int]:
        """Roll ``dice`` ``times`` independent times, in order."""
        return [self.roll(dice) for _ in range(times)]

    def roll_with(
        self,
        count: int,
        range: DieRange,
        multiplier: int = 1,
        modifier: int = 0,
        drop: int = 0,
    ) -> int:
        return self.roll(Dice(count, range, multiplier, modifier, drop))

    def roll_with_times(
        self,
        count: int,
        range: DieRange,
        multiplier: int = 1,
        modifier: int = 0,
        drop: int = 0,
        times: int = 1,
    ) -> list[int]:
        return self.roll_times(Dice(count, range, multiplier, modifier, drop), times)
