"""Static configuration for the game and its front-ends.

Board geometry and timings are plain module constants.  Key bindings are
expressed as ``pygame`` key names (``pygame.key.key_code`` understands them)
so the core never needs to import ``pygame`` itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


# Dimensions of the playfield in cells.
BOARD_WIDTH = 10
BOARD_HEIGHT = 16

# Pivot coordinate (col, row) for newly spawned pieces.  Row 16 sits one row
# above the visible board.
SPAWN_POSITION: Tuple[int, int] = (BOARD_WIDTH // 2, BOARD_HEIGHT)

# Seconds between automatic one-row descents
GRAVITY_SECONDS = 1.5

# Size of a single board cell in render units
BLOCK_SIZE = 48
BOARD_PIXEL_SIZE: Tuple[int, int] = (BLOCK_SIZE * BOARD_WIDTH, BLOCK_SIZE * BOARD_HEIGHT)

# Frames per second for the interactive loop
FPS = 60

# Triple-escape exit: presses must follow each other within this window
ESCAPE_WINDOW_MS = 150
ESCAPE_IDLE_SECONDS = 1.0
ESCAPE_PRESSES = 3

FONT_SIZE_TITLE = 64
FONT_SIZE_SCORE = 48


@dataclass(frozen=True)
class TitleKeyConfig:
    up: str = "k"
    down: str = "j"
    submit: str = "return"


@dataclass(frozen=True)
class GameKeyConfig:
    left: str = "h"
    right: str = "l"
    hard_drop: str = "j"
    p90_spin: str = "g"
    n90_spin: str = "s"


@dataclass(frozen=True)
class KeyConfig:
    title: TitleKeyConfig = field(default_factory=TitleKeyConfig)
    game: GameKeyConfig = field(default_factory=GameKeyConfig)
    escape: str = "escape"
