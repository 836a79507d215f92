"""Batch simulation: how long do games last on a given configuration?"""

from __future__ import annotations

import random
import statistics
from dataclasses import dataclass, replace

from snakes_ladders.config import BoardConfig
from snakes_ladders.dice import Dice
from snakes_ladders.game import new_game, play_until_done


@dataclass
class GameSummary:
    """Result of a single simulated game."""

    winner: str | None  # None = hit max_turns
    turns: int
    finished: bool


def simulate(
    config: BoardConfig,
    player_names: list[str],
    games: int,
    seed: int | None = None,
    max_turns: int = 1000,
) -> list[GameSummary]:
    """Play *games* full games, each on a freshly generated board.

    Board seeds and dice generators are all derived from one master
    generator, so the whole batch is reproducible from *seed*.
    """
    master = random.Random(seed)
    summaries: list[GameSummary] = []
    for _ in range(games):
        board_config = replace(config, seed=master.randrange(2**32))
        dice = Dice(random.Random(master.randrange(2**32)))
        game = new_game(board_config, player_names, dice=dice)
        results = play_until_done(game, max_turns=max_turns)
        summaries.append(GameSummary(
            winner=game.winner.name if game.winner else None,
            turns=len(results),
            finished=game.is_ended,
        ))
    return summaries


def summarize(summaries: list[GameSummary]) -> dict:
    """Aggregate turn counts and wins per player."""
    turns = [s.turns for s in summaries if s.finished]
    wins: dict[str, int] = {}
    for s in summaries:
        if s.winner is not None:
            wins[s.winner] = wins.get(s.winner, 0) + 1
    return {
        "games": len(summaries),
        "finished": len(turns),
        "mean_turns": statistics.fmean(turns) if turns else None,
        "median_turns": statistics.median(turns) if turns else None,
        "max_turns": max(turns) if turns else None,
        "wins": wins,
    }
