"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import random

from .board import Board, Coord
from .config import SPAWN_POSITION
from .tetromino import Tetromino, TetrominoType, random_shape
from .utils import can_place


LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for a game session.

    The board and the single falling piece belong to the session.  ``score``
    is displayed by the front-ends but nothing awards points yet.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    rng: random.Random = field(default_factory=random.Random)
    spawn_position: Coord = SPAWN_POSITION
    unbiased_shapes: bool = False
    score: int = 0
    pieces: int = 0

    def spawn_tetromino(self, shape: Optional[TetrominoType] = None) -> Tetromino:
        """Spawn and return a new falling piece at the spawn position.

        The spawn cells are not checked.  If they overlap landed cells the
        piece is still created; the overlap is only reported in the log.
        """

        if shape is None:
            shape = random_shape(self.rng, unbiased=self.unbiased_shapes)
        self.active = Tetromino(shape, rotation=0, origin=self.spawn_position)
        LOGGER.debug("Spawned %s at %s", shape.value, self.spawn_position)
        if not can_place(self.board, self.active.occupied()):
            LOGGER.warning(
                "Spawned %s over landed cells at %s", shape.value, self.spawn_position
            )
        return self.active

    def land_current_piece(self) -> Tetromino:
        """Turn the falling piece into landed cells and spawn the next one.

        Returns the newly spawned piece.

        Raises:
            OverlapError: If the piece covers a landed cell.
        """

        if self.active is None:
            raise RuntimeError("No falling piece to land")
        cells = self.active.occupied()
        self.board.land(cells, self.active.color)
        LOGGER.debug("Landed %s at %s", self.active.shape.value, sorted(cells))
        self.pieces += 1
        self.active = None
        return self.spawn_tetromino()

    def start_session(self) -> None:
        """Reset the board and spawn the first piece."""

        self.board.clear()
        self.score = 0
        self.pieces = 0
        self.active = None
        self.spawn_tetromino()
        LOGGER.info("Session started")

    def end_session(self) -> None:
        """Clear the board and discard the falling piece."""

        self.board.clear()
        self.active = None
        LOGGER.info("Session ended after %d pieces", self.pieces)

    @property
    def running(self) -> bool:
        return self.active is not None
