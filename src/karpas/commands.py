"""Player commands applied to the falling piece.

Each function takes the :class:`~karpas.game_state.GameState` and resolves the
command completely before returning.  Translations and descents are gated by
:func:`~karpas.utils.can_place`; rotations are not.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict

from .config import GameKeyConfig
from .tetromino import Tetromino
from .utils import can_place

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameState


class Command(str, Enum):
    """Decoded player input."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    HARD_DROP = "hard_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"


def _active(state: "GameState") -> Tetromino:
    if state.active is None:
        raise RuntimeError("No falling piece; start a session first")
    return state.active


def _shift(state: "GameState", d_col: int) -> bool:
    piece = _active(state)
    if not can_place(state.board, piece.moved(d_col, 0)):
        return False
    piece.move(d_col, 0)
    return True


def move_left(state: "GameState") -> bool:
    """Shift the piece one column left; return ``False`` if blocked."""

    return _shift(state, -1)


def move_right(state: "GameState") -> bool:
    """Shift the piece one column right; return ``False`` if blocked."""

    return _shift(state, 1)


def rotate_cw(state: "GameState") -> bool:
    _active(state).rotate(1)
    return True


def rotate_ccw(state: "GameState") -> bool:
    _active(state).rotate(-1)
    return True


def descend(state: "GameState") -> bool:
    """Move the piece down one row, landing it if the row below is blocked.

    Returns ``True`` when the piece moved and ``False`` when it landed.
    """

    piece = _active(state)
    if can_place(state.board, piece.moved(0, -1)):
        piece.move(0, -1)
        return True
    state.land_current_piece()
    return False


def hard_drop(state: "GameState") -> int:
    """Drop the piece as far as it goes, land it and return the rows dropped."""

    piece = _active(state)
    dropped = 0
    while can_place(state.board, piece.moved(0, -1)):
        piece.move(0, -1)
        dropped += 1
    state.land_current_piece()
    return dropped


COMMAND_HANDLERS: Dict[Command, Callable[["GameState"], object]] = {
    Command.MOVE_LEFT: move_left,
    Command.MOVE_RIGHT: move_right,
    Command.HARD_DROP: hard_drop,
    Command.ROTATE_CW: rotate_cw,
    Command.ROTATE_CCW: rotate_ccw,
}


def apply_command(state: "GameState", command: Command) -> None:
    """Apply a single decoded ``command`` to ``state``."""

    COMMAND_HANDLERS[Command(command)](state)


def key_bindings(keys: GameKeyConfig) -> Dict[str, Command]:
    """Return the key name to command mapping for ``keys``.

    When two commands share a key the first one in polling order wins:
    left, right, hard drop, +90 spin, -90 spin.
    """

    pairs = [
        (keys.left, Command.MOVE_LEFT),
        (keys.right, Command.MOVE_RIGHT),
        (keys.hard_drop, Command.HARD_DROP),
        (keys.p90_spin, Command.ROTATE_CW),
        (keys.n90_spin, Command.ROTATE_CCW),
    ]
    mapping: Dict[str, Command] = {}
    for key, command in pairs:
        mapping.setdefault(key, command)
    return mapping
