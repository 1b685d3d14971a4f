from __future__ import annotations

import logging

from karpas.app import App
from karpas.config import SPAWN_POSITION
from karpas.stage import Stage
from karpas.title import MenuCursor
from karpas.tetromino import TetrominoType


def start_game(app: App) -> None:
    app.loaded()
    app.frame(0.5, ["return"])


def test_loaded_moves_to_title() -> None:
    app = App(seed=1)
    assert app.stage == Stage.INITIAL
    app.loaded()
    assert app.stage == Stage.TITLE
    assert app.cursor == MenuCursor.START


def test_title_cursor_and_submit_start_the_game() -> None:
    app = App(seed=1)
    app.loaded()
    app.frame(0.5, ["j"])
    assert app.cursor == MenuCursor.SETTINGS
    app.frame(0.5, ["k"])
    assert app.cursor == MenuCursor.START
    app.frame(0.5, ["return"])
    assert app.stage == Stage.GAME
    assert app.simulation.running


def test_settings_is_pushed_and_returns_to_title() -> None:
    app = App(seed=1)
    app.loaded()
    app.frame(0.5, ["j"])
    app.frame(0.5, ["return"])
    assert app.stage == Stage.SETTINGS
    app.frame(0.5, ["return"])
    assert app.stage == Stage.TITLE


def test_exit_entry_ends_the_app() -> None:
    app = App(seed=1)
    app.loaded()
    for _ in range(5):
        app.frame(0.5, ["j"])
    assert app.cursor == MenuCursor.EXIT
    app.frame(0.5, ["return"])
    assert app.finished


def test_game_keys_reach_the_simulation() -> None:
    app = App(seed=1)
    start_game(app)
    app.simulation.state.spawn_tetromino(TetrominoType.O)
    app.frame(0.0, ["h", "h"])
    assert app.simulation.state.active.origin == (SPAWN_POSITION[0] - 2, SPAWN_POSITION[1])
    app.frame(0.0, ["j"])
    assert len(app.simulation.state.board) == 4


def test_triple_escape_ends_game_and_clears_board() -> None:
    app = App(seed=1)
    start_game(app)
    app.frame(0.0, ["j"])
    assert len(app.simulation.state.board) == 4
    app.frame(0.5, [])
    app.frame(0.05, ["escape"])
    app.frame(0.05, ["escape"])
    app.frame(0.05, ["escape"])
    assert app.finished
    assert len(app.simulation.state.board) == 0


def test_overlap_restarts_session(caplog) -> None:
    app = App(seed=1)
    start_game(app)
    state = app.simulation.state
    state.spawn_tetromino(TetrominoType.O)
    state.board.land([(0, 0)], (1, 1, 1))
    state.active.origin = (0, 0)
    with caplog.at_level(logging.ERROR, logger="karpas.app"):
        app.frame(0.0, ["j"])
    assert "restarting session" in caplog.text
    assert app.stage == Stage.GAME
    assert len(state.board) == 0
    assert state.active.origin == SPAWN_POSITION
