"""Step-driven simulation loop.

The host calls :meth:`Simulation.tick` once per frame.  Commands submitted
since the previous tick are applied first, in arrival order, and only then is
the gravity clock advanced.  Everything happens synchronously inside the tick.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Tuple
import logging
import random

from .board import Color, Coord
from .commands import Command, apply_command, descend
from .config import GRAVITY_SECONDS
from .game_state import GameState
from .gravity import GravityClock


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """What happened during a single tick."""

    commands: int
    gravity_fired: bool
    landed: int


class Simulation:
    """Own the game state, the gravity clock and the pending command queue."""

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        gravity_seconds: float = GRAVITY_SECONDS,
        unbiased_shapes: bool = False,
    ) -> None:
        self.state = GameState(rng=random.Random(seed), unbiased_shapes=unbiased_shapes)
        self.clock = GravityClock(gravity_seconds)
        self._queue: Deque[Command] = deque()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def start_session(self) -> None:
        self._queue.clear()
        self.clock.reset()
        self.state.start_session()

    def end_session(self) -> None:
        self._queue.clear()
        self.clock.reset()
        self.state.end_session()

    @property
    def running(self) -> bool:
        return self.state.running

    # ------------------------------------------------------------------
    # Input and stepping
    # ------------------------------------------------------------------
    def submit(self, command: Command) -> None:
        """Queue ``command`` for the next tick."""

        self._queue.append(Command(command))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def tick(self, delta: float) -> TickResult:
        """Advance the simulation by ``delta`` seconds."""

        if not self.running:
            raise RuntimeError("Simulation is not running; call start_session()")

        pieces_before = self.state.pieces
        applied = 0
        while self._queue:
            command = self._queue.popleft()
            apply_command(self.state, command)
            applied += 1

        fired = self.clock.advance(delta)
        if fired:
            descend(self.state)

        landed = self.state.pieces - pieces_before
        if landed:
            LOGGER.debug("Tick landed %d piece(s)", landed)
        return TickResult(commands=applied, gravity_fired=fired, landed=landed)

    # ------------------------------------------------------------------
    # Render boundary
    # ------------------------------------------------------------------
    def falling_cells(self) -> Tuple[List[Coord], Color]:
        """Return the falling piece's cells and colour."""

        piece = self.state.active
        if piece is None:
            raise RuntimeError("No falling piece")
        return piece.occupied(), piece.color

    def landed_cells(self) -> Dict[Coord, Color]:
        return self.state.board.cells()
