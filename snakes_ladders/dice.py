"""Six-sided dice, seedable or scripted for tests and replays."""

from __future__ import annotations

import random
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class DiceLike(Protocol):
    """Anything the turn engine can roll."""

    def roll(self) -> int: ...


class DiceExhausted(IndexError):
    """A scripted dice ran out of values."""


class Dice:
    """Fair d6 drawing from an explicit generator handle."""

    SIDES = 6

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def roll(self) -> int:
        return self.rng.randint(1, self.SIDES)

    @staticmethod
    def is_six(value: int) -> bool:
        return value == 6


class ScriptedDice:
    """Replays a fixed sequence of rolls."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        for v in self.values:
            if not 1 <= v <= Dice.SIDES:
                raise ValueError(f"Scripted roll out of range: {v}")
        self._idx = 0

    @property
    def remaining(self) -> int:
        return len(self.values) - self._idx

    def roll(self) -> int:
        if self._idx >= len(self.values):
            raise DiceExhausted(f"No scripted rolls left after {len(self.values)}")
        value = self.values[self._idx]
        self._idx += 1
        return value
