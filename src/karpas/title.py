"""Title menu cursor."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .stage import Stage


class MenuCursor(str, Enum):
    START = "Start"
    SETTINGS = "Settings"
    INFOS = "Infos"
    EXIT = "Exit"

    def next(self) -> "MenuCursor":
        """Move down one entry, stopping at the last one."""

        entries = list(MenuCursor)
        index = entries.index(self)
        return entries[min(index + 1, len(entries) - 1)]

    def prev(self) -> "MenuCursor":
        """Move up one entry, stopping at the first one."""

        entries = list(MenuCursor)
        index = entries.index(self)
        return entries[max(index - 1, 0)]

    def target(self) -> Tuple[Stage, bool]:
        """Return the stage this entry leads to and whether it is pushed.

        Settings and Infos are pushed on top of the title so they can return
        to it; Start and Exit replace it.
        """

        return _TARGETS[self]


_TARGETS = {
    MenuCursor.START: (Stage.GAME, False),
    MenuCursor.SETTINGS: (Stage.SETTINGS, True),
    MenuCursor.INFOS: (Stage.INFOS, True),
    MenuCursor.EXIT: (Stage.END, False),
}
