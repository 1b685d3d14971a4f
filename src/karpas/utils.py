"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

from .board import Board, Coord, Grid
from .config import BLOCK_SIZE
from .tetromino import Tetromino


EMPTY = 0
LANDED = 1
FALLING = 2


def can_place(board: Board, cells: Iterable[Coord]) -> bool:
    """Return ``True`` if every cell in ``cells`` is free and inside the walls.

    Cells left of column ``0``, right of the last column or below row ``0``
    are rejected, as are landed cells.  There is no ceiling: pieces may sit
    anywhere above the visible board.
    """

    for col, row in cells:
        if col < 0 or col >= board.width or row < 0:
            return False
        if board.is_landed((col, row)):
            return False
    return True


def render_grid(board: Board, active: Optional[Tetromino] = None) -> Grid:
    """Return the visible board with the active piece overlaid.

    The result is indexed ``[row, col]`` with row ``0`` at the bottom.  Landed
    cells hold ``LANDED`` and cells of ``active`` hold ``FALLING``; parts of
    the piece outside the visible rows are dropped.
    """

    grid = board.occupancy() * np.uint8(LANDED)
    if active is not None:
        for col, row in active.occupied():
            if 0 <= row < board.height and 0 <= col < board.width:
                grid[row, col] = FALLING
    return grid


def to_pixel(col: float, row: float) -> Tuple[float, float]:
    """Map a grid coordinate to render units centred on the board."""

    return (
        col * BLOCK_SIZE - BLOCK_SIZE * Board.width / 2,
        row * BLOCK_SIZE - BLOCK_SIZE * Board.height / 2,
    )
