from __future__ import annotations

import numpy as np
import pytest

from karpas.board import Board, OverlapError

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_land_marks_cells_with_colour() -> None:
    board = Board()
    board.land([(0, 0), (1, 0)], RED)
    assert board.is_landed((0, 0))
    assert board.is_landed((1, 0))
    assert not board.is_landed((2, 0))
    assert board.color_at((1, 0)) == RED
    assert len(board) == 2


def test_land_overlap_raises_and_keeps_board_unchanged() -> None:
    board = Board()
    board.land([(3, 2)], RED)
    with pytest.raises(OverlapError) as excinfo:
        board.land([(4, 2), (3, 2)], BLUE)
    assert excinfo.value.cells == [(3, 2)]
    assert board.cells() == {(3, 2): RED}


def test_land_rejects_duplicate_coordinates() -> None:
    board = Board()
    with pytest.raises(OverlapError):
        board.land([(1, 1), (1, 1)], RED)
    assert len(board) == 0


def test_cells_above_visible_board_are_kept() -> None:
    board = Board()
    board.land([(5, Board.height + 1)], RED)
    assert board.is_landed((5, Board.height + 1))
    assert not board.occupancy().any()


def test_occupancy_is_indexed_row_then_column() -> None:
    board = Board()
    board.land([(2, 0), (9, 15)], RED)
    grid = board.occupancy()
    assert grid.shape == (Board.height, Board.width)
    assert grid.dtype == np.uint8
    assert grid[0, 2] == 1
    assert grid[15, 9] == 1
    assert int(grid.sum()) == 2


def test_clear_empties_board() -> None:
    board = Board()
    board.land([(0, 0), (0, 1)], RED)
    board.clear()
    assert len(board) == 0
    assert board.cells() == {}


def test_cells_returns_a_copy() -> None:
    board = Board()
    board.land([(0, 0)], RED)
    snapshot = board.cells()
    snapshot[(1, 1)] = BLUE
    assert not board.is_landed((1, 1))
