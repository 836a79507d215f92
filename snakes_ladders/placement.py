"""Procedural placement of snakes and ladders.

Two strategies share the same bounded-retry and occupancy helpers:

* ``UNIFORM``: every entity is sampled over the whole board.
* ``BALANCED``: the board is cut into zones and each zone gets its
  share, followed by an anti-clustering pass on the anchors.

Both are pure functions of ``(total_cells, ratios, rng)``: reusing a seed
reproduces the same entity list. Neither ever fails on under-generation;
an entity whose attempt budget runs out is simply skipped.
"""

from __future__ import annotations

import enum
import logging
import math
import random
from typing import Callable

from snakes_ladders.entities import Entity, Ladder, Snake

logger = logging.getLogger(__name__)

UNIFORM_ATTEMPTS = 100
BALANCED_ATTEMPTS = 50
MAX_ZONES = 4
ANCHOR_SPACING = 3  # anchors closer than this are dropped in balanced mode


class PlacementMode(enum.Enum):
    UNIFORM = "uniform"
    BALANCED = "balanced"

    @property
    def description(self) -> str:
        return {
            PlacementMode.UNIFORM: "Random placement",
            PlacementMode.BALANCED: "Balanced distribution",
        }[self]

    @classmethod
    def from_name(cls, name: str) -> PlacementMode:
        key = name.strip().lower()
        if key == "random":
            return cls.UNIFORM
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown placement mode: {name!r}") from None


def entity_counts(total_cells: int, snake_ratio: float, ladder_ratio: float) -> tuple[int, int]:
    """Target (snakes, ladders) for a board of *total_cells*."""
    return math.floor(total_cells * snake_ratio), math.floor(total_cells * ladder_ratio)


def generate(
    total_cells: int,
    snake_ratio: float,
    ladder_ratio: float,
    mode: PlacementMode = PlacementMode.BALANCED,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> list[Entity]:
    """Generate snakes and ladders for a board of *total_cells* cells.

    *rng* takes precedence over *seed*. With neither, a freshly seeded
    generator is used. The result may hold fewer entities than the ratios
    ask for, never more.
    """
    if total_cells < 2:
        raise ValueError(f"Board needs at least 2 cells, got {total_cells}")
    if snake_ratio < 0 or ladder_ratio < 0:
        raise ValueError("Entity ratios must not be negative")
    if rng is None:
        rng = random.Random(seed)

    snake_count, ladder_count = entity_counts(total_cells, snake_ratio, ladder_ratio)

    if mode is PlacementMode.UNIFORM:
        entities = generate_uniform(total_cells, snake_count, ladder_count, rng)
    elif mode is PlacementMode.BALANCED:
        entities = generate_balanced(total_cells, snake_count, ladder_count, rng)
    else:
        raise ValueError(f"Unknown placement mode: {mode!r}")

    placed_snakes = sum(isinstance(e, Snake) for e in entities)
    logger.debug(
        "%s placement on %d cells: %d/%d snakes, %d/%d ladders",
        mode.value, total_cells,
        placed_snakes, snake_count,
        len(entities) - placed_snakes, ladder_count,
    )
    return entities


# ── Shared helpers ───────────────────────────────────────────────────

def _is_free(position: int, total_cells: int, occupied: set[int]) -> bool:
    """Strictly inside the board and not an endpoint of a placed entity."""
    return 0 < position < total_cells and position not in occupied


def _sample(draw: Callable[[], Entity | None], attempts: int) -> Entity | None:
    """Call *draw* until it yields an entity or the budget is spent."""
    for _ in range(attempts):
        entity = draw()
        if entity is not None:
            return entity
    return None


def _place(entities: list[Entity], occupied: set[int], entity: Entity | None) -> bool:
    if entity is None:
        return False
    entities.append(entity)
    occupied.update((entity.start, entity.end))
    return True


# ── Uniform ──────────────────────────────────────────────────────────

def generate_uniform(
    total_cells: int,
    snake_count: int,
    ladder_count: int,
    rng: random.Random,
) -> list[Entity]:
    entities: list[Entity] = []
    occupied: set[int] = set()
    min_distance = max(3, total_cells // 20)

    def draw_snake() -> Snake | None:
        min_head = max(10, total_cells // 4)
        if min_head >= total_cells:
            return None
        head = rng.randrange(min_head, total_cells)
        max_tail = head - min_distance
        if max_tail <= 1:
            return None
        tail = rng.randrange(1, max_tail)
        if _is_free(head, total_cells, occupied) and _is_free(tail, total_cells, occupied):
            return Snake(head, tail)
        return None

    def draw_ladder() -> Ladder | None:
        max_bottom = max(total_cells * 3 // 4, total_cells - 10)
        if max_bottom <= 1:
            return None
        bottom = rng.randrange(1, max_bottom)
        min_top = bottom + min_distance
        if min_top >= total_cells:
            return None
        top = rng.randrange(min_top, total_cells)
        if _is_free(bottom, total_cells, occupied) and _is_free(top, total_cells, occupied):
            return Ladder(bottom, top)
        return None

    for _ in range(snake_count):
        if not _place(entities, occupied, _sample(draw_snake, UNIFORM_ATTEMPTS)):
            logger.debug("Skipped a snake after %d attempts", UNIFORM_ATTEMPTS)
    for _ in range(ladder_count):
        if not _place(entities, occupied, _sample(draw_ladder, UNIFORM_ATTEMPTS)):
            logger.debug("Skipped a ladder after %d attempts", UNIFORM_ATTEMPTS)
    return entities


# ── Balanced ─────────────────────────────────────────────────────────

def zone_count(total_cells: int) -> int:
    return max(1, min(MAX_ZONES, math.isqrt(total_cells // 10)))


def zone_bounds(total_cells: int, zones: int) -> list[tuple[int, int]]:
    """``(start, end)`` cell ranges that together cover ``[1, total_cells]``."""
    return [
        (total_cells * z // zones + 1, total_cells * (z + 1) // zones)
        for z in range(zones)
    ]


def generate_balanced(
    total_cells: int,
    snake_count: int,
    ladder_count: int,
    rng: random.Random,
) -> list[Entity]:
    entities: list[Entity] = []
    occupied: set[int] = set()
    zones = zone_bounds(total_cells, zone_count(total_cells))

    def draw_snake(zone_start: int, zone_end: int) -> Snake | None:
        width = zone_end - zone_start
        min_distance = max(2, width // 8)
        head_start = max(zone_start + min_distance, zone_start + width // 2)
        if head_start >= zone_end:
            return None
        head = rng.randrange(head_start, zone_end)
        max_tail = head - min_distance
        if max_tail <= zone_start:
            return None
        tail = rng.randrange(zone_start, min(max_tail, zone_end))
        if (
            head != tail
            and _is_free(head, total_cells, occupied)
            and _is_free(tail, total_cells, occupied)
        ):
            return Snake(head, tail)
        return None

    def draw_ladder(zone_start: int, zone_end: int) -> Ladder | None:
        width = zone_end - zone_start
        min_distance = max(3, width // 10)
        bottom_end = zone_start + width // 2
        if bottom_end <= zone_start:
            return None
        bottom = rng.randrange(zone_start, bottom_end)
        min_top = bottom + min_distance
        if min_top >= total_cells:
            return None
        top = min(rng.randrange(min_top, total_cells), total_cells - 1)
        if _is_free(bottom, total_cells, occupied) and _is_free(top, total_cells, occupied):
            return Ladder(bottom, top)
        return None

    for draw, count in ((draw_snake, snake_count), (draw_ladder, ladder_count)):
        per_zone = max(1, count // len(zones))
        placed = 0
        for zone_start, zone_end in zones:
            if placed >= count:
                break
            for _ in range(per_zone):
                if placed >= count:
                    break
                entity = _sample(lambda: draw(zone_start, zone_end), BALANCED_ATTEMPTS)
                if _place(entities, occupied, entity):
                    placed += 1

    return _spread_anchors(entities)


def _spread_anchors(entities: list[Entity]) -> list[Entity]:
    """Drop every entity whose anchor sits too close to another anchor.

    Both members of a close pair go; the comparison is against the full
    pre-pass list, so the result does not depend on iteration order.
    """
    anchors = [e.start for e in entities]
    kept = [
        e for i, e in enumerate(entities)
        if not any(
            j != i and abs(e.start - other) < ANCHOR_SPACING
            for j, other in enumerate(anchors)
        )
    ]
    if len(kept) < len(entities):
        logger.debug("Anti-clustering dropped %d entities", len(entities) - len(kept))
    return kept
