"""Board configuration: difficulty levels, presets and validation."""

from __future__ import annotations

import random
from dataclasses import dataclass

from snakes_ladders.placement import PlacementMode

MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 15
MAX_RATIO = 0.5
MIN_PLAYERS = 2
MAX_PLAYERS = 6


class ConfigurationError(ValueError):
    """Invalid game or board configuration."""


@dataclass(frozen=True)
class DifficultyLevel:
    """Fraction of cells that become snakes / ladders."""

    name: str
    snake_ratio: float
    ladder_ratio: float

    def __post_init__(self) -> None:
        for label, ratio in (("Snake", self.snake_ratio), ("Ladder", self.ladder_ratio)):
            if not 0 < ratio <= MAX_RATIO:
                raise ConfigurationError(
                    f"{label} ratio must be in (0, {MAX_RATIO}], got {ratio}"
                )

    def customized(
        self,
        snake_ratio: float | None = None,
        ladder_ratio: float | None = None,
    ) -> DifficultyLevel:
        """Copy of this level with one or both ratios overridden."""
        return DifficultyLevel(
            name=f"{self.name} (Custom)",
            snake_ratio=self.snake_ratio if snake_ratio is None else snake_ratio,
            ladder_ratio=self.ladder_ratio if ladder_ratio is None else ladder_ratio,
        )


EASY = DifficultyLevel("Easy", snake_ratio=0.10, ladder_ratio=0.15)
MEDIUM = DifficultyLevel("Medium", snake_ratio=0.15, ladder_ratio=0.12)
HARD = DifficultyLevel("Hard", snake_ratio=0.20, ladder_ratio=0.10)

LEVELS: dict[str, DifficultyLevel] = {lvl.name.lower(): lvl for lvl in (EASY, MEDIUM, HARD)}


def level_by_name(name: str) -> DifficultyLevel:
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown difficulty {name!r}; choose from {', '.join(LEVELS)}"
        ) from None


@dataclass(frozen=True)
class BoardConfig:
    """Everything needed to build a board."""

    size: int = 7
    level: DifficultyLevel = MEDIUM
    mode: PlacementMode = PlacementMode.BALANCED
    seed: int | None = None

    def __post_init__(self) -> None:
        if not MIN_BOARD_SIZE <= self.size <= MAX_BOARD_SIZE:
            raise ConfigurationError(
                f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {self.size}"
            )

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    def make_rng(self) -> random.Random:
        """Generator handle for entity placement, seeded when a seed is set."""
        return random.Random(self.seed)

    def summary(self) -> str:
        lines = [
            "Board Configuration:",
            f"- Size: {self.size}x{self.size}",
            f"- Level: {self.level.name}",
            f"- Generator: {self.mode.description}",
            f"- Snake ratio: {self.level.snake_ratio:.1%}",
            f"- Ladder ratio: {self.level.ladder_ratio:.1%}",
        ]
        if self.seed is not None:
            lines.append(f"- Seed: {self.seed}")
        return "\n".join(lines)


# ── Presets ──────────────────────────────────────────────────────────

def beginner_config(seed: int | None = None) -> BoardConfig:
    """Small board, few snakes, plenty of ladders."""
    return BoardConfig(
        size=7,
        level=EASY.customized(snake_ratio=0.08, ladder_ratio=0.18),
        mode=PlacementMode.BALANCED,
        seed=seed,
    )


def expert_config(seed: int | None = None) -> BoardConfig:
    """Full 10×10 board crowded with snakes, uniformly scattered."""
    return BoardConfig(
        size=10,
        level=HARD.customized(snake_ratio=0.25, ladder_ratio=0.08),
        mode=PlacementMode.UNIFORM,
        seed=seed,
    )


def aesthetic_config(seed: int | None = None) -> BoardConfig:
    return BoardConfig(size=8, level=MEDIUM, mode=PlacementMode.BALANCED, seed=seed)


PRESETS = {
    "beginner": beginner_config,
    "expert": expert_config,
    "aesthetic": aesthetic_config,
}


# ── Players ──────────────────────────────────────────────────────────

def validate_player_names(names: list[str]) -> list[str]:
    """Return stripped names, or raise if the roster is unusable."""
    if not MIN_PLAYERS <= len(names) <= MAX_PLAYERS:
        raise ConfigurationError(
            f"Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {len(names)}"
        )
    cleaned: list[str] = []
    seen: set[str] = set()
    for raw in names:
        name = raw.strip()
        if not name:
            raise ConfigurationError("Player name cannot be empty")
        if name.lower() in seen:
            raise ConfigurationError(f"Duplicate player name: {name!r}")
        seen.add(name.lower())
        cleaned.append(name)
    return cleaned
