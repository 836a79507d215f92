"""Snakes and ladders, the entities that teleport a pawn."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class EntityKind(enum.Enum):
    SNAKE = "snake"
    LADDER = "ladder"


@dataclass(frozen=True)
class Snake:
    """Landing on *head* slides the pawn down to *tail*."""

    head: int
    tail: int

    def __post_init__(self) -> None:
        if self.head <= self.tail:
            raise ValueError(
                f"Snake head must be greater than tail (head={self.head}, tail={self.tail})"
            )

    @property
    def kind(self) -> EntityKind:
        return EntityKind.SNAKE

    @property
    def start(self) -> int:
        return self.head

    @property
    def end(self) -> int:
        return self.tail

    def transform(self, position: int) -> int:
        return self.tail if position == self.head else position


@dataclass(frozen=True)
class Ladder:
    """Landing on *bottom* climbs the pawn up to *top*."""

    bottom: int
    top: int

    def __post_init__(self) -> None:
        if self.bottom >= self.top:
            raise ValueError(
                f"Ladder bottom must be less than top (bottom={self.bottom}, top={self.top})"
            )

    @property
    def kind(self) -> EntityKind:
        return EntityKind.LADDER

    @property
    def start(self) -> int:
        return self.bottom

    @property
    def end(self) -> int:
        return self.top

    def transform(self, position: int) -> int:
        return self.top if position == self.bottom else position


Entity = Union[Snake, Ladder]
