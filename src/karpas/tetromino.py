"""Tetromino catalogue and the falling piece.

Shapes are stored as four ``(col, row)`` offsets around a pivot at
``(0, 0)``.  Rotations are computed exactly on the integer offsets, one
quarter turn mapping ``(x, y)`` to ``(-y, x)``, so no rounding is ever
involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple
import random

from .board import Color, Coord

Offsets = Tuple[Coord, ...]

# One byte of randomness reduced modulo 7.  Bytes at or above this bound are
# what make the plain reduction uneven.
_BYTE_RANGE = 256
_UNBIASED_LIMIT = _BYTE_RANGE - _BYTE_RANGE % 7


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    Z = "Z"
    T = "T"


# Spawn orientation offsets, pivot at (0, 0), rows growing upward.
SHAPE_OFFSETS: Dict[TetrominoType, Offsets] = {
    TetrominoType.I: ((-1, 0), (0, 0), (1, 0), (2, 0)),
    TetrominoType.J: ((-1, 1), (-1, 0), (0, 0), (1, 0)),
    TetrominoType.L: ((-1, 0), (0, 0), (1, 0), (1, 1)),
    TetrominoType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    TetrominoType.S: ((-1, 0), (0, 0), (0, 1), (1, 1)),
    TetrominoType.Z: ((-1, 1), (0, 1), (0, 0), (1, 0)),
    TetrominoType.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
}

SHAPE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.T: (128, 0, 128),
}

_SHAPE_ORDER: List[TetrominoType] = list(TetrominoType)


def rotate_offset(offset: Coord, quarter_turns: int) -> Coord:
    """Rotate ``offset`` by ``quarter_turns`` * 90 degrees about the pivot.

    Any integer is accepted; the count is wrapped modulo 4.
    """

    x, y = offset
    for _ in range(quarter_turns % 4):
        x, y = -y, x
    return (x, y)


def shape_blocks(shape: TetrominoType, rotation: int) -> Offsets:
    """Return the offsets for ``shape`` rotated ``rotation`` quarter turns."""

    return tuple(rotate_offset(offset, rotation) for offset in SHAPE_OFFSETS[shape])


def random_shape(rng: random.Random, *, unbiased: bool = False) -> TetrominoType:
    """Pick a shape from one random byte reduced modulo 7.

    By default the plain reduction is used, which favours the first four
    shapes with 37/256 against 36/256.  Passing ``unbiased=True`` redraws any
    byte of 252 or more so every shape is equally likely.
    """

    value = rng.getrandbits(8)
    if unbiased:
        while value >= _UNBIASED_LIMIT:
            value = rng.getrandbits(8)
    return _SHAPE_ORDER[value % len(_SHAPE_ORDER)]


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    shape: TetrominoType
    rotation: int = 0
    origin: Coord = (0, 0)  # (col, row)

    @property
    def color(self) -> Color:
        return SHAPE_COLORS[self.shape]

    def set_rotation(self, quarter_turns: int) -> None:
        """Set the rotation state.

        Rotation is never checked against the board: the piece may end up
        outside the walls or on top of landed cells.
        """

        self.rotation = quarter_turns % 4

    def rotate(self, direction: int = 1) -> None:
        """Rotate by ``direction`` quarter turns (negative for the other way)."""

        self.set_rotation(self.rotation + direction)

    def move(self, d_col: int, d_row: int) -> None:
        col, row = self.origin
        self.origin = (col + d_col, row + d_row)

    def occupied(self) -> List[Coord]:
        """Return the absolute board coordinates covered by this piece."""

        return self.moved(0, 0)

    def moved(self, d_col: int, d_row: int) -> List[Coord]:
        """Return the cells the piece would cover after a translation."""

        col, row = self.origin
        col += d_col
        row += d_row
        return [(col + dc, row + dr) for dc, dr in shape_blocks(self.shape, self.rotation)]
