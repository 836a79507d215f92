"""Tests for snakes_ladders.stats."""

from snakes_ladders.config import BoardConfig
from snakes_ladders.stats import GameSummary, simulate, summarize


def test_simulate_is_reproducible():
    config = BoardConfig(size=5)
    a = simulate(config, ["Ann", "Ben"], games=4, seed=3)
    b = simulate(config, ["Ann", "Ben"], games=4, seed=3)
    assert a == b
    assert len(a) == 4


def test_simulated_games_report_winners():
    summaries = simulate(BoardConfig(size=5), ["Ann", "Ben"], games=5, seed=8)
    for s in summaries:
        if s.finished:
            assert s.winner in ("Ann", "Ben")
            assert s.turns > 0
        else:
            assert s.winner is None


def test_max_turns_caps_games():
    summaries = simulate(BoardConfig(size=15), ["Ann", "Ben"], games=2, seed=1, max_turns=1)
    assert all(not s.finished and s.turns == 1 for s in summaries)


def test_summarize():
    stats = summarize([
        GameSummary(winner="A", turns=10, finished=True),
        GameSummary(winner="B", turns=20, finished=True),
        GameSummary(winner="A", turns=30, finished=True),
        GameSummary(winner=None, turns=1000, finished=False),
    ])
    assert stats["games"] == 4
    assert stats["finished"] == 3
    assert stats["mean_turns"] == 20
    assert stats["median_turns"] == 20
    assert stats["max_turns"] == 30
    assert stats["wins"] == {"A": 2, "B": 1}


def test_summarize_nothing_finished():
    stats = summarize([GameSummary(winner=None, turns=5, finished=False)])
    assert stats["finished"] == 0
    assert stats["mean_turns"] is None
    assert stats["wins"] == {}
