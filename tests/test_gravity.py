import pytest

from karpas.config import GRAVITY_SECONDS
from karpas.gravity import GravityClock


def test_default_threshold_is_one_and_a_half_seconds():
    assert GravityClock().threshold == GRAVITY_SECONDS == 1.5


def test_fires_when_threshold_reached():
    clock = GravityClock(1.5)
    assert clock.advance(1.0) is False
    assert clock.advance(0.5) is True
    assert clock.elapsed == 0


def test_overshoot_fires_once_without_catch_up():
    clock = GravityClock(1.5)
    assert clock.advance(10.0) is True
    assert clock.elapsed == 0
    assert clock.advance(0.1) is False


def test_reset_discards_accumulated_time():
    clock = GravityClock(1.5)
    clock.advance(1.4)
    clock.reset()
    assert clock.advance(0.2) is False


def test_negative_delta_rejected():
    clock = GravityClock()
    with pytest.raises(ValueError):
        clock.advance(-0.1)
    with pytest.raises(ValueError):
        GravityClock(0)
