"""Board geometry and entity lookup."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from snakes_ladders.config import BoardConfig, ConfigurationError
from snakes_ladders.entities import Entity, Ladder, Snake
from snakes_ladders.placement import PlacementMode, generate


@dataclass(frozen=True)
class Coordinate:
    """Grid location of a cell; row 0 is the bottom row."""

    row: int
    column: int
    cell: int


class Board:
    """Square serpentine board with snakes and ladders keyed by anchor.

    Immutable once built. Anchors must lie strictly between cell 0 and
    the final cell, and no two entities may share one.
    """

    def __init__(
        self,
        size: int,
        entities: Iterable[Entity] = (),
        mode: PlacementMode = PlacementMode.BALANCED,
    ):
        if size < 1:
            raise ConfigurationError(f"Board size must be positive, got {size}")
        self.size = size
        self.total_cells = size * size
        self.mode = mode
        self._entities: dict[int, Entity] = {}
        for entity in entities:
            self._add(entity)

    @classmethod
    def from_config(cls, config: BoardConfig, rng: random.Random | None = None) -> Board:
        """Generate a board; *rng* defaults to the config's seeded handle."""
        total_cells = config.total_cells
        entities = generate(
            total_cells,
            config.level.snake_ratio,
            config.level.ladder_ratio,
            config.mode,
            rng=rng or config.make_rng(),
        )
        return cls(config.size, entities, config.mode)

    def _add(self, entity: Entity) -> None:
        if not 0 < entity.start < self.total_cells:
            raise ConfigurationError(
                f"{entity} anchor must lie strictly between 0 and {self.total_cells}"
            )
        if not 1 <= entity.end <= self.total_cells:
            raise ConfigurationError(f"{entity} ends outside the board")
        if entity.start in self._entities:
            raise ConfigurationError(
                f"{entity} shares anchor {entity.start} with {self._entities[entity.start]}"
            )
        self._entities[entity.start] = entity

    # ── Geometry ─────────────────────────────────────────────────────

    def cell_to_coordinate(self, cell: int) -> Coordinate:
        if not 1 <= cell <= self.total_cells:
            raise ValueError(f"Invalid cell number: {cell} (board has 1–{self.total_cells})")
        row, offset = divmod(cell - 1, self.size)
        column = offset if row % 2 == 0 else self.size - 1 - offset
        return Coordinate(row=row, column=column, cell=cell)

    def coordinate_to_cell(self, row: int, column: int) -> int:
        """Inverse of :meth:`cell_to_coordinate`."""
        if not (0 <= row < self.size and 0 <= column < self.size):
            raise ValueError(f"Invalid coordinate: ({row}, {column})")
        offset = column if row % 2 == 0 else self.size - 1 - column
        return row * self.size + offset + 1

    def is_valid_position(self, position: int) -> bool:
        return 0 <= position <= self.total_cells

    # ── Entities ─────────────────────────────────────────────────────

    def entity_at(self, position: int) -> Entity | None:
        return self._entities.get(position)

    def transform(self, position: int) -> int:
        """Apply at most one snake/ladder hop to *position*."""
        entity = self._entities.get(position)
        if entity is None:
            return position
        return entity.transform(position)

    @property
    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    @property
    def snakes(self) -> list[Snake]:
        return [e for e in self._entities.values() if isinstance(e, Snake)]

    @property
    def ladders(self) -> list[Ladder]:
        return [e for e in self._entities.values() if isinstance(e, Ladder)]
