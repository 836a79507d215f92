"""Tests for the python -m snakes_ladders entry point."""

import pytest

from snakes_ladders.__main__ import _play_dice, build_parser, main
from snakes_ladders.config import BoardConfig


def test_board_command(capsys):
    main(["board", "--size", "6", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Board Configuration:" in out
    assert "6x6" in out
    assert "Seed: 1" in out


def test_board_preset(capsys):
    main(["board", "--preset", "expert", "--seed", "2"])
    out = capsys.readouterr().out
    assert "10x10" in out
    assert "Random placement" in out


def test_play_command(capsys):
    main(["play", "--size", "5", "--seed", "4", "--players", "Ann", "Ben", "Cat"])
    out = capsys.readouterr().out
    assert "Players: Ann, Ben, Cat" in out
    assert "   1. " in out
    assert ("won after" in out) or ("No winner after" in out)


def test_play_is_reproducible(capsys):
    main(["play", "--size", "6", "--seed", "9"])
    first = capsys.readouterr().out
    main(["play", "--size", "6", "--seed", "9"])
    assert capsys.readouterr().out == first


def test_simulate_command(capsys, tmp_path):
    chart = tmp_path / "chart.png"
    main(["simulate", "--size", "5", "--games", "3", "--seed", "1", "--chart", str(chart)])
    out = capsys.readouterr().out
    assert "Simulated 3 games" in out
    assert "Alice wins" in out
    assert chart.exists()


def test_invalid_size_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["board", "--size", "20"])
    assert exc.value.code == 2
    assert "Board size" in capsys.readouterr().err


def test_duplicate_players_exit_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["play", "--players", "Ann", "ann"])
    assert exc.value.code == 2


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args(["play"])
    assert args.size == 7
    assert args.level == "medium"
    assert args.mode == "balanced"
    assert args.max_turns == 1000


def test_play_dice_use_their_own_stream():
    board_rng = BoardConfig(seed=9).make_rng()
    dice = _play_dice(9)
    assert [dice.roll() for _ in range(30)] != [board_rng.randint(1, 6) for _ in range(30)]
    assert _play_dice(9).rng.getstate() == _play_dice(9).rng.getstate()
