"""Falling-block puzzle engine with a small application shell."""

from .board import Board, OverlapError
from .tetromino import Tetromino, TetrominoType, random_shape, rotate_offset, shape_blocks
from .commands import Command, apply_command, descend, hard_drop
from .game_state import GameState
from .gravity import GravityClock
from .simulation import Simulation, TickResult
from .stage import EscapeCounter, Stage, StageMachine
from .title import MenuCursor
from .app import App
from .utils import can_place, render_grid, to_pixel

__all__ = [
    "App",
    "Board",
    "Command",
    "EscapeCounter",
    "GameState",
    "GravityClock",
    "MenuCursor",
    "OverlapError",
    "Simulation",
    "Stage",
    "StageMachine",
    "Tetromino",
    "TetrominoType",
    "TickResult",
    "apply_command",
    "can_place",
    "descend",
    "hard_drop",
    "random_shape",
    "render_grid",
    "rotate_offset",
    "shape_blocks",
    "to_pixel",
]
