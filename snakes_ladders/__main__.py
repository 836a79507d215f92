"""CLI entry point: python -m snakes_ladders {board,play,simulate}."""

from __future__ import annotations

import argparse
import random
import sys

from snakes_ladders.board import Board
from snakes_ladders.chart import make_length_chart
from snakes_ladders.config import (
    LEVELS,
    PRESETS,
    BoardConfig,
    ConfigurationError,
    level_by_name,
)
from snakes_ladders.dice import Dice
from snakes_ladders.game import TurnOutcome, new_game, play_until_done
from snakes_ladders.logging_config import configure_logging
from snakes_ladders.placement import PlacementMode
from snakes_ladders.render import render_board, render_entities, render_players
from snakes_ladders.stats import simulate, summarize


DEFAULT_PLAYERS = ["Alice", "Bob"]


def _play_dice(seed: int | None) -> Dice:
    """Dice for one game. A seeded run draws from a stream derived from
    *seed*, distinct from the board generator seeded with *seed* itself.
    """
    if seed is None:
        return Dice()
    master = random.Random(seed)
    return Dice(random.Random(master.randrange(2**32)))


def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    if args.preset:
        return PRESETS[args.preset](seed=args.seed)
    return BoardConfig(
        size=args.size,
        level=level_by_name(args.level),
        mode=PlacementMode.from_name(args.mode),
        seed=args.seed,
    )


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    """Generate a board and print it."""
    config = _config_from_args(args)
    board = Board.from_config(config)
    print(config.summary())
    print()
    print(render_entities(board))
    print()
    print(render_board(board))


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Autoplay a single game, printing every turn."""
    config = _config_from_args(args)
    game = new_game(config, args.players or DEFAULT_PLAYERS, dice=_play_dice(args.seed))

    print(config.summary())
    print(f"Players: {', '.join(p.name for p in game.players)}")
    print()
    print(render_entities(game.board))
    print()

    results = play_until_done(game, max_turns=args.max_turns)
    for i, result in enumerate(results, start=1):
        tag = "" if result.outcome is TurnOutcome.TURN_COMPLETED else f" [{result.outcome.name}]"
        print(f"{i:4d}. {result.description}{tag}")

    print()
    print(render_board(game.board, game.players))
    print()
    print(render_players(game.players, current=game.current_player))
    if game.winner is not None:
        print(f"\n{game.winner.name} won after {len(results)} turns.")
    else:
        print(f"\nNo winner after {len(results)} turns.")


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Run many games and report game-length statistics."""
    config = _config_from_args(args)
    names = args.players or DEFAULT_PLAYERS
    summaries = simulate(
        config, names, games=args.games, seed=args.seed, max_turns=args.max_turns,
    )
    stats = summarize(summaries)

    print(f"\nSimulated {stats['games']} games ({stats['finished']} finished)")
    print("=" * 40)
    if stats["finished"]:
        print(f"  {'mean turns':20s} {stats['mean_turns']:7.1f}")
        print(f"  {'median turns':20s} {stats['median_turns']:7.1f}")
        print(f"  {'longest game':20s} {stats['max_turns']:7d}")
    for name in names:
        print(f"  {name + ' wins':20s} {stats['wins'].get(name, 0):7d}")

    if args.chart:
        turns = [s.turns for s in summaries if s.finished]
        if not turns:
            print("No finished games to chart.", file=sys.stderr)
            sys.exit(1)
        out = make_length_chart(turns, output_path=args.chart)
        print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--size", type=int, default=7, help="Board side length 5-15 (default 7)")
    common.add_argument("--level", default="medium", choices=sorted(LEVELS), help="Difficulty (default medium)")
    common.add_argument("--mode", default="balanced", choices=["balanced", "random", "uniform"], help="Placement mode (default balanced)")
    common.add_argument("--preset", choices=sorted(PRESETS), help="Use a preset board configuration")
    common.add_argument("--seed", type=int, help="Seed for reproducible boards and rolls")
    common.add_argument("--players", nargs="*", help="Player names (2-6)")
    common.add_argument("--max-turns", type=int, default=1000, help="Max turns per game")
    common.add_argument("--verbose", "-v", action="store_true", help="Log turn details")

    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Procedural Snakes & Ladders",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("board", parents=[common], help="Generate and print a board")
    sub.add_parser("play", parents=[common], help="Autoplay one game")

    p_sim = sub.add_parser("simulate", parents=[common], help="Simulate many games")
    p_sim.add_argument("--games", type=int, default=100, help="Number of games (default 100)")
    p_sim.add_argument("--chart", "-o", help="Write a game-length histogram to this PNG path")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {"board": cmd_board, "play": cmd_play, "simulate": cmd_simulate}
    if args.command not in commands:
        parser.print_help()
        return

    configure_logging("DEBUG" if args.verbose else "WARNING")
    try:
        commands[args.command](args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
