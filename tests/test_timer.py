import math
from unittest import mock

import pytest

from islandgame.timer import Timer

MS = 1_000_000


class FakeClock:
    def __init__(self, start_ns=0):
        self.now = start_ns

    def advance_ms(self, ms):
        self.now += int(ms * MS)

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    fake = FakeClock(5 * MS)
    with mock.patch("time.monotonic_ns", new=fake):
        yield fake


def test_not_finished_before_duration(clock):
    timer = Timer(100)
    clock.advance_ms(99)
    assert timer.is_finished() is False
    assert timer.elapsed_ms() == 99


def test_finished_at_duration(clock):
    timer = Timer(100)
    clock.advance_ms(100)
    assert timer.is_finished() is True
    assert timer.elapsed_ms() == 100


def test_elapsed_truncates_partial_milliseconds(clock):
    timer = Timer(10)
    clock.advance_ms(1.9)
    assert timer.elapsed_ms() == 1


def test_progress_is_fraction_of_duration(clock):
    timer = Timer(200)
    clock.advance_ms(50)
    assert timer.progress() == pytest.approx(50 / 200)


def test_reset_restarts_elapsed(clock):
    timer = Timer(30)
    clock.advance_ms(40)
    assert timer.is_finished()
    timer.reset()
    assert timer.elapsed_ms() == 0
    assert timer.is_finished() is False


def test_changing_duration_keeps_start(clock):
    timer = Timer(1000)
    clock.advance_ms(300)
    assert timer.is_finished() is False
    timer.duration = 250
    assert timer.is_finished() is True
    assert timer.elapsed_ms() == 300


def test_zero_duration_is_finished_immediately(clock):
    timer = Timer(0)
    assert timer.is_finished() is True
    assert math.isnan(timer.progress())
    clock.advance_ms(5)
    assert math.isinf(timer.progress())


def test_float_duration_is_truncated(clock):
    timer = Timer(0.0)
    assert timer.duration == 0