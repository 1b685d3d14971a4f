"""Application stages and the triple-escape exit detector."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Callable, DefaultDict, List
import logging

from .config import ESCAPE_IDLE_SECONDS, ESCAPE_PRESSES, ESCAPE_WINDOW_MS


LOGGER = logging.getLogger(__name__)

StageHook = Callable[["Stage"], None]


class Stage(str, Enum):
    INITIAL = "Initial"
    TITLE = "Title"
    SETTINGS = "Settings"
    INFOS = "Infos"
    GAME = "Game"
    END = "End"


class StageMachine:
    """Stack of stages with enter/exit hooks.

    ``set`` replaces the current stage, ``push`` suspends it underneath a new
    one and ``pop`` returns to it.  Hooks registered for a stage run whenever
    that stage becomes (or stops being) the current one.
    """

    def __init__(self, initial: Stage = Stage.INITIAL) -> None:
        self._stack: List[Stage] = [initial]
        self._on_enter: DefaultDict[Stage, List[StageHook]] = defaultdict(list)
        self._on_exit: DefaultDict[Stage, List[StageHook]] = defaultdict(list)
        LOGGER.info('initial stage "%s"', initial.value)

    @property
    def current(self) -> Stage:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def on_enter(self, stage: Stage, hook: StageHook) -> None:
        self._on_enter[stage].append(hook)

    def on_exit(self, stage: Stage, hook: StageHook) -> None:
        self._on_exit[stage].append(hook)

    def set(self, stage: Stage) -> None:
        """Replace the current stage with ``stage``."""

        if stage == self.current:
            return
        before = self.current
        self._leave(before)
        self._stack[-1] = stage
        self._changed(before, stage)

    def push(self, stage: Stage) -> None:
        """Enter ``stage`` keeping the current one underneath."""

        before = self.current
        self._leave(before)
        self._stack.append(stage)
        self._changed(before, stage)

    def pop(self) -> Stage:
        """Leave the current stage and resume the one underneath."""

        if len(self._stack) < 2:
            raise ValueError("No stage to return to")
        before = self._stack.pop()
        self._leave(before)
        self._changed(before, self.current)
        return before

    def _leave(self, stage: Stage) -> None:
        for hook in self._on_exit[stage]:
            hook(stage)

    def _changed(self, before: Stage, after: Stage) -> None:
        LOGGER.info('changed stage "%s" -> "%s"', before.value, after.value)
        for hook in self._on_enter[after]:
            hook(after)


class EscapeCounter:
    """Detect three Escape presses in quick succession.

    A stopwatch measures the time since the previous press.  A press that
    comes within ``window_ms`` of it is counted, a slower one resets the
    count.  Once a full second passes without a press the stopwatch is paused
    and rewound, so the next press after a long pause also counts.
    """

    def __init__(
        self,
        *,
        window_ms: float = ESCAPE_WINDOW_MS,
        idle_seconds: float = ESCAPE_IDLE_SECONDS,
        presses: int = ESCAPE_PRESSES,
    ) -> None:
        self.window_ms = window_ms
        self.idle_seconds = idle_seconds
        self.presses = presses
        self.count = 0
        self.elapsed = 0.0
        self.paused = False

    def update(self, delta: float, pressed: bool) -> bool:
        """Advance by ``delta`` seconds; return ``True`` when the exit fires."""

        if not self.paused:
            self.elapsed += delta

        fired = False
        if pressed:
            self.paused = False
            if self.elapsed * 1000.0 < self.window_ms:
                self.count += 1
            else:
                self.count = 0
            self.elapsed = 0.0
            fired = self.count >= self.presses

        if self.elapsed >= self.idle_seconds:
            self.paused = True
            self.elapsed = 0.0
        return fired

    def reset(self) -> None:
        self.count = 0
        self.elapsed = 0.0
        self.paused = False
