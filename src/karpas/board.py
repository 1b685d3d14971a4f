"""Board representation for the playfield.

The board only stores landed cells.  Coordinates are ``(col, row)`` pairs with
row ``0`` at the bottom of the playfield; rows grow upward.  Landed cells are
kept in a mapping rather than a fixed array because a piece may come to rest
in the spawn buffer above the visible rows.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import BOARD_HEIGHT, BOARD_WIDTH


# Dimensions of the visible board.
WIDTH = BOARD_WIDTH
HEIGHT = BOARD_HEIGHT

Coord = Tuple[int, int]
Color = Tuple[int, int, int]
Grid = NDArray[np.uint8]


class OverlapError(RuntimeError):
    """Raised when landing a cell that is already occupied."""

    def __init__(self, cells: Iterable[Coord]) -> None:
        self.cells = sorted(cells)
        super().__init__(f"Cells already landed: {self.cells}")


def create_empty_grid() -> Grid:
    """Return a new empty occupancy grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Set of landed cells, each carrying the colour of the piece it came from."""

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self._cells: Dict[Coord, Color] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def is_landed(self, coord: Coord) -> bool:
        """Return ``True`` if ``coord`` holds a landed cell."""

        return coord in self._cells

    def color_at(self, coord: Coord) -> Color:
        """Return the colour stored for ``coord``.

        Raises:
            KeyError: If nothing has landed at ``coord``.
        """

        return self._cells[coord]

    def land(self, coords: Iterable[Coord], color: Color) -> None:
        """Add ``coords`` to the landed cells.

        The update is all-or-nothing: if any coordinate is already landed (or
        repeated within ``coords``) nothing is stored.

        Raises:
            OverlapError: If a coordinate is already occupied.
        """

        incoming = [(int(col), int(row)) for col, row in coords]
        clashes = {c for c in incoming if c in self._cells}
        if len(set(incoming)) != len(incoming):
            clashes.update(c for c in incoming if incoming.count(c) > 1)
        if clashes:
            raise OverlapError(clashes)
        for coord in incoming:
            self._cells[coord] = color

    def clear(self) -> None:
        """Remove every landed cell."""

        self._cells.clear()

    def cells(self) -> Dict[Coord, Color]:
        """Return a copy of the landed cells and their colours."""

        return dict(self._cells)

    def occupancy(self) -> Grid:
        """Return the visible rows as a ``(height, width)`` array of 0/1.

        The array is indexed ``[row, col]`` with row ``0`` being the bottom of
        the board.  Cells landed above the visible area are omitted.
        """

        grid = create_empty_grid()
        for col, row in self._cells:
            if 0 <= row < self.height and 0 <= col < self.width:
                grid[row, col] = 1
        return grid
