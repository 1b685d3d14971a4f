from __future__ import annotations

import logging

import pytest

from karpas.stage import EscapeCounter, Stage, StageMachine
from karpas.title import MenuCursor


def test_stage_changes_are_logged(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="karpas.stage"):
        machine = StageMachine()
        machine.set(Stage.TITLE)
        machine.set(Stage.GAME)
    assert caplog.messages == [
        'initial stage "Initial"',
        'changed stage "Initial" -> "Title"',
        'changed stage "Title" -> "Game"',
    ]


def test_setting_current_stage_is_a_no_op(caplog) -> None:
    machine = StageMachine(Stage.TITLE)
    with caplog.at_level(logging.INFO, logger="karpas.stage"):
        machine.set(Stage.TITLE)
    assert caplog.messages == []


def test_push_and_pop_return_to_previous_stage() -> None:
    machine = StageMachine(Stage.TITLE)
    machine.push(Stage.SETTINGS)
    assert machine.current == Stage.SETTINGS
    assert machine.depth == 2
    assert machine.pop() == Stage.SETTINGS
    assert machine.current == Stage.TITLE
    with pytest.raises(ValueError):
        machine.pop()


def test_hooks_run_on_enter_and_exit() -> None:
    machine = StageMachine(Stage.TITLE)
    calls: list[str] = []
    machine.on_enter(Stage.GAME, lambda stage: calls.append(f"enter {stage.value}"))
    machine.on_exit(Stage.GAME, lambda stage: calls.append(f"exit {stage.value}"))
    machine.set(Stage.GAME)
    machine.set(Stage.END)
    assert calls == ["enter Game", "exit Game"]


def test_three_quick_escapes_fire() -> None:
    counter = EscapeCounter()
    assert counter.update(0.05, True) is False
    assert counter.update(0.05, True) is False
    assert counter.update(0.05, True) is True


def test_slow_escape_resets_count() -> None:
    counter = EscapeCounter()
    counter.update(0.05, True)
    counter.update(0.05, True)
    assert counter.update(0.5, True) is False
    assert counter.count == 0


def test_idle_stopwatch_pauses_after_one_second() -> None:
    counter = EscapeCounter()
    counter.update(0.05, True)
    counter.update(1.2, False)
    assert counter.paused
    assert counter.elapsed == 0
    # Time does not accumulate while paused, so the next press still counts.
    counter.update(5.0, False)
    counter.update(0.0, True)
    assert counter.count == 2


def test_menu_cursor_clamps_at_ends() -> None:
    assert MenuCursor.START.prev() == MenuCursor.START
    assert MenuCursor.START.next() == MenuCursor.SETTINGS
    assert MenuCursor.INFOS.next() == MenuCursor.EXIT
    assert MenuCursor.EXIT.next() == MenuCursor.EXIT
    assert MenuCursor.EXIT.prev() == MenuCursor.INFOS


def test_menu_targets() -> None:
    assert MenuCursor.START.target() == (Stage.GAME, False)
    assert MenuCursor.SETTINGS.target() == (Stage.SETTINGS, True)
    assert MenuCursor.INFOS.target() == (Stage.INFOS, True)
    assert MenuCursor.EXIT.target() == (Stage.END, False)
