"""Millisecond countdown timer backed by a monotonic clock."""

from __future__ import annotations

import math
import time


def _now_ns() -> int:
    return time.monotonic_ns()


class Timer:
    """Reports when a number of milliseconds has passed since the last reset.

    ``duration`` may be reassigned at any time; the start point is kept, so
    only the moment the timer counts as finished moves.
    """

    def __init__(self, duration_ms: int) -> None:
        self.duration = int(duration_ms)
        self._start = _now_ns()

    def reset(self) -> None:
        """Restart the timer from the current moment."""
        self._start = _now_ns()

    def elapsed_ms(self) -> int:
        """Whole milliseconds elapsed since the last reset."""
        return (_now_ns() - self._start) // 1_000_000

    def is_finished(self) -> bool:
        """True once the elapsed time has reached the duration."""
        return self.elapsed_ms() >= self.duration

    def progress(self) -> float:
        """Elapsed time as a fraction of the duration."""
        elapsed = self.elapsed_ms()
        if self.duration == 0:
            return math.inf if elapsed > 0 else math.nan
        return elapsed / self.duration