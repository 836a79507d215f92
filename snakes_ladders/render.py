"""Plain-text display of a board and its players."""

from __future__ import annotations

from typing import Iterable

from snakes_ladders.board import Board
from snakes_ladders.entities import EntityKind
from snakes_ladders.game import Player

CELL_WIDTH = 7
MARKERS = {EntityKind.SNAKE: "S", EntityKind.LADDER: "L"}


def _label(board: Board, cell: int) -> str:
    entity = board.entity_at(cell)
    marker = f"{MARKERS[entity.kind]}{entity.end}" if entity else ""
    return f"{cell:>3}{marker:<4}"[:CELL_WIDTH]


def render_board(board: Board, players: Iterable[Player] = ()) -> str:
    """Grid of the board, top row first.

    Each cell shows its number and, for an anchor, ``S<tail>`` or
    ``L<top>``. Player symbols go on a second line under their cell.
    """
    players = list(players)
    rule = "+" + ("-" * CELL_WIDTH + "+") * board.size
    lines = [rule]
    for row in reversed(range(board.size)):
        cells = [board.coordinate_to_cell(row, col) for col in range(board.size)]
        lines.append("|" + "|".join(_label(board, cell) for cell in cells) + "|")
        pawns = [
            "".join(p.symbol for p in players if p.position == cell)
            for cell in cells
        ]
        if any(pawns):
            lines.append("|" + "|".join(f"{p:<{CELL_WIDTH}}" for p in pawns) + "|")
        lines.append(rule)
    off_board = [p.symbol for p in players if p.position == 0]
    if off_board:
        lines.append("Start: " + " ".join(off_board))
    return "\n".join(lines)


def render_entities(board: Board) -> str:
    lines = []
    for label, group in (("SNAKES", board.snakes), ("LADDERS", board.ladders)):
        if not group:
            continue
        lines.append(f"{label}:")
        for entity in sorted(group, key=lambda e: e.start):
            lines.append(f"  {entity.start:>3} → {entity.end}")
    return "\n".join(lines) if lines else "No snakes or ladders."


def render_players(players: Iterable[Player], current: Player | None = None) -> str:
    lines = []
    for p in players:
        status = "Active" if p.active else "Inactive"
        streak = f" (6x{p.consecutive_sixes})" if p.consecutive_sixes else ""
        marker = " <- current turn" if current is not None and p.name == current.name else ""
        lines.append(f"{p.symbol} {p.name} - Position: {p.position} - {status}{streak}{marker}")
    return "\n".join(lines)
