"""Headless ASCII demo for the game engine.

Run with: `python -m karpas`

Starts a seeded session, hard-drops a few pieces with random sideways moves
and prints the visible board.  Landed cells are drawn as ``#`` and the
falling piece as ``@``.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import Command, OverlapError, Simulation, render_grid
from .board import Grid
from .utils import FALLING, LANDED

LOGGER = logging.getLogger(__name__)

_GLYPHS = {LANDED: "#", FALLING: "@"}


def format_grid(grid: Grid) -> str:
    # Row 0 is the bottom of the board, so print from the top down.
    return "\n".join(
        "".join(_GLYPHS.get(int(cell), ".") for cell in row) for row in grid[::-1]
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=0, help="Seed for piece selection and moves.")
    parser.add_argument("--drops", type=int, default=8, help="Number of pieces to hard-drop.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    moves = random.Random(args.seed)
    sim = Simulation(seed=args.seed)
    sim.start_session()
    for _ in range(args.drops):
        for _ in range(moves.randrange(4)):
            sim.submit(Command.ROTATE_CW)
        shift = moves.randint(-5, 5)
        command = Command.MOVE_LEFT if shift < 0 else Command.MOVE_RIGHT
        for _ in range(abs(shift)):
            sim.submit(command)
        sim.submit(Command.HARD_DROP)
        try:
            sim.tick(0.0)
        except OverlapError:
            LOGGER.warning("Stack reached the spawn area after %d pieces", sim.state.pieces)
            break

    print(format_grid(render_grid(sim.state.board, sim.state.active)))
    print(f"pieces={sim.state.pieces} landed cells={len(sim.state.board)}")


if __name__ == "__main__":
    main()
