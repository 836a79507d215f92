"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import Board, Coordinate
from snakes_ladders.config import BoardConfig, ConfigurationError, EASY
from snakes_ladders.entities import Ladder, Snake
from snakes_ladders.placement import PlacementMode


@pytest.fixture
def board() -> Board:
    return Board(10, [Ladder(20, 55), Snake(55, 30), Snake(98, 78), Ladder(4, 14)])


# ── geometry ─────────────────────────────────────────────────────────

def test_total_cells():
    assert Board(7).total_cells == 49


@pytest.mark.parametrize("cell, row, column", [
    (1, 0, 0),
    (10, 0, 9),
    (11, 1, 9),   # second row runs right-to-left
    (20, 1, 0),
    (21, 2, 0),
    (100, 9, 0),
])
def test_serpentine_mapping(board, cell, row, column):
    assert board.cell_to_coordinate(cell) == Coordinate(row=row, column=column, cell=cell)


@pytest.mark.parametrize("cell", [0, -3, 101])
def test_cell_out_of_range(board, cell):
    with pytest.raises(ValueError, match="Invalid cell number"):
        board.cell_to_coordinate(cell)


def test_coordinate_round_trip_on_odd_board():
    b = Board(7)
    for cell in range(1, b.total_cells + 1):
        c = b.cell_to_coordinate(cell)
        assert b.coordinate_to_cell(c.row, c.column) == cell


def test_coordinate_out_of_range(board):
    with pytest.raises(ValueError):
        board.coordinate_to_cell(10, 0)


def test_is_valid_position(board):
    assert board.is_valid_position(0)
    assert board.is_valid_position(100)
    assert not board.is_valid_position(101)
    assert not board.is_valid_position(-1)


# ── transform / lookup ───────────────────────────────────────────────

def test_transform_anchor(board):
    assert board.transform(4) == 14
    assert board.transform(98) == 78


def test_transform_fixed_point_off_anchor(board):
    anchors = {e.start for e in board.entities}
    for cell in range(0, 101):
        if cell not in anchors:
            assert board.transform(cell) == cell


def test_transform_does_not_chain(board):
    """Ladder 20→55 lands on snake head 55, but only one hop applies."""
    assert board.transform(20) == 55


def test_entity_at(board):
    assert board.entity_at(98) == Snake(98, 78)
    assert board.entity_at(50) is None


def test_snakes_and_ladders(board):
    assert sorted(s.head for s in board.snakes) == [55, 98]
    assert sorted(lad.bottom for lad in board.ladders) == [4, 20]
    assert len(board.entities) == 4


# ── construction invariants ──────────────────────────────────────────

def test_duplicate_anchor_rejected():
    with pytest.raises(ConfigurationError, match="shares anchor"):
        Board(10, [Snake(50, 10), Ladder(50, 70)])


@pytest.mark.parametrize("entity", [
    Ladder(100, 101),   # anchor on the final cell
    Snake(0, -1),       # anchor on the start square
    Ladder(90, 120),    # top off the board
])
def test_out_of_bounds_entity_rejected(entity):
    with pytest.raises(ConfigurationError):
        Board(10, [entity])


def test_from_config_is_reproducible():
    config = BoardConfig(size=9, level=EASY, mode=PlacementMode.UNIFORM, seed=77)
    a = Board.from_config(config)
    b = Board.from_config(config)
    assert a.entities == b.entities
    assert a.mode is PlacementMode.UNIFORM
    assert a.size == 9
