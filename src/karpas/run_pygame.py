"""Simple pygame front-end for the game.

The window shows the board centred on a black field one block larger than
the playfield.  All game logic lives in :class:`karpas.app.App`; this module
only turns pygame events into key names and draws the current state.
"""

from __future__ import annotations

import argparse
import logging

import pygame

from .app import App
from .board import Color, Coord
from .config import BLOCK_SIZE, BOARD_PIXEL_SIZE, FONT_SIZE_SCORE, FONT_SIZE_TITLE, FPS
from .stage import Stage
from .title import MenuCursor
from .utils import to_pixel


LOGGER = logging.getLogger(__name__)

# Window is the board plus half a block of border on every side
WINDOW_SIZE = (BOARD_PIXEL_SIZE[0] + BLOCK_SIZE, BOARD_PIXEL_SIZE[1] + BLOCK_SIZE)

BACKGROUND = (40, 40, 40)
FIELD = (0, 0, 0)
GRID_LINE = (50, 50, 50)
CURSOR_ON = (250, 128, 114)
CURSOR_OFF = (64, 64, 64)
SCORE_COLOR = (250, 235, 215)


def screen_rect(coord: Coord) -> pygame.Rect:
    """Return the on-screen rectangle for a board cell.

    :func:`karpas.utils.to_pixel` is centred with y pointing up; pygame has
    its origin at the top-left with y pointing down.
    """

    x, y = to_pixel(*coord)
    left = WINDOW_SIZE[0] / 2 + x
    top = WINDOW_SIZE[1] / 2 - y - BLOCK_SIZE
    return pygame.Rect(int(left), int(top), BLOCK_SIZE, BLOCK_SIZE)


def draw_cell(screen: pygame.Surface, coord: Coord, color: Color) -> None:
    rect = screen_rect(coord)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_game(screen: pygame.Surface, app: App, font: pygame.font.Font) -> None:
    """Render the landed cells, the falling piece and the score."""

    field = pygame.Rect(0, 0, *WINDOW_SIZE)
    pygame.draw.rect(screen, FIELD, field)
    sim = app.simulation
    for coord, color in sim.landed_cells().items():
        draw_cell(screen, coord, color)
    if sim.running:
        cells, color = sim.falling_cells()
        for coord in cells:
            draw_cell(screen, coord, color)
    score = font.render(str(sim.state.score), True, SCORE_COLOR)
    screen.blit(score, score.get_rect(midtop=(WINDOW_SIZE[0] // 2, 32)))


def draw_title(screen: pygame.Surface, app: App, font: pygame.font.Font) -> None:
    screen.fill(BACKGROUND)
    entries = list(MenuCursor)
    spacing = FONT_SIZE_TITLE + 16
    top = WINDOW_SIZE[1] // 2 - spacing * len(entries) // 2
    for index, entry in enumerate(entries):
        color = CURSOR_ON if entry == app.cursor else CURSOR_OFF
        text = font.render(entry.value, True, color)
        screen.blit(text, text.get_rect(center=(WINDOW_SIZE[0] // 2, top + index * spacing)))


def key_names(events: list[pygame.event.Event]) -> list[str]:
    return [pygame.key.name(event.key) for event in events if event.type == pygame.KEYDOWN]


def run(app: App) -> None:
    """Open the window and run ``app`` until it reaches the end stage."""

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Karpas")
    clock = pygame.time.Clock()
    title_font = pygame.font.Font(None, FONT_SIZE_TITLE)
    score_font = pygame.font.Font(None, FONT_SIZE_SCORE)
    app.loaded()

    try:
        while not app.finished:
            delta = clock.tick(FPS) / 1000.0
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                app.stages.set(Stage.END)
                break
            app.frame(delta, key_names(events))

            screen.fill(BACKGROUND)
            if app.stage == Stage.TITLE:
                draw_title(screen, app, title_font)
            elif app.stage == Stage.GAME:
                draw_game(screen, app, score_font)
                pygame.display.set_caption(f"Karpas - Score: {app.simulation.state.score}")
            pygame.display.flip()
    finally:
        pygame.quit()
        LOGGER.info("Window closed")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Karpas in a pygame window.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO).")
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    run(App(seed=args.seed))


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
