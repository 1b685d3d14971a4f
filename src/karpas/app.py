"""Application shell tying stages, the title menu and the simulation together.

:class:`App` works on key *names* and elapsed seconds so front-ends only need
to translate their own events.  Nothing in here touches a window.
"""

from __future__ import annotations

from typing import Iterable, Optional
import logging

from .board import OverlapError
from .commands import key_bindings
from .config import KeyConfig
from .simulation import Simulation
from .stage import EscapeCounter, Stage, StageMachine
from .title import MenuCursor


LOGGER = logging.getLogger(__name__)


class App:
    """Drive one frame at a time through the current stage."""

    def __init__(
        self,
        *,
        keys: Optional[KeyConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.keys = keys or KeyConfig()
        self.stages = StageMachine()
        self.cursor = MenuCursor.START
        self.escape = EscapeCounter()
        self.simulation = Simulation(seed=seed)
        self._bindings = key_bindings(self.keys.game)

        self.stages.on_enter(Stage.TITLE, self._enter_title)
        self.stages.on_enter(Stage.GAME, lambda _stage: self.simulation.start_session())
        self.stages.on_exit(Stage.GAME, lambda _stage: self.simulation.end_session())

    @property
    def stage(self) -> Stage:
        return self.stages.current

    @property
    def finished(self) -> bool:
        return self.stage == Stage.END

    def loaded(self) -> None:
        """Signal that assets are ready; leaves the initial stage."""

        if self.stage == Stage.INITIAL:
            self.stages.set(Stage.TITLE)

    def _enter_title(self, _stage: Stage) -> None:
        self.cursor = MenuCursor.START

    # ------------------------------------------------------------------
    # Frame handling
    # ------------------------------------------------------------------
    def frame(self, delta: float, pressed: Iterable[str] = ()) -> None:
        """Process keys pressed during this frame and advance ``delta`` seconds."""

        pressed = list(pressed)
        if self.escape.update(delta, self.keys.escape in pressed):
            self.stages.set(Stage.END)
            return

        if self.stage == Stage.TITLE:
            self._title_frame(pressed)
        elif self.stage in (Stage.SETTINGS, Stage.INFOS):
            if self.keys.title.submit in pressed:
                self.stages.pop()
        elif self.stage == Stage.GAME:
            self._game_frame(delta, pressed)

    def _title_frame(self, pressed: list[str]) -> None:
        title = self.keys.title
        # Only the first matching key counts.
        for key in pressed:
            if key == title.up:
                self.cursor = self.cursor.prev()
                return
            if key == title.down:
                self.cursor = self.cursor.next()
                return
            if key == title.submit:
                stage, pushed = self.cursor.target()
                if pushed:
                    self.stages.push(stage)
                else:
                    self.stages.set(stage)
                return

    def _game_frame(self, delta: float, pressed: list[str]) -> None:
        for key in pressed:
            command = self._bindings.get(key)
            if command is not None:
                self.simulation.submit(command)
        try:
            self.simulation.tick(delta)
        except OverlapError:
            LOGGER.exception("Landing overlapped existing cells; restarting session")
            self.simulation.start_session()
