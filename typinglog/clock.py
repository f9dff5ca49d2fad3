"""
Time sources for typing sessions.

The input model only ever asks a clock how many milliseconds have passed
since timing started, so tests and replays can substitute a manual clock.
"""

from abc import ABC, abstractmethod
import time


class Clock(ABC):
    """Source of elapsed time in milliseconds."""

    @abstractmethod
    def elapsed_since_start(self) -> int:
        """Milliseconds elapsed since the clock started."""


class MonotonicClock(Clock):
    """Wall clock based on time.monotonic(), started on construction."""

    def __init__(self):
        self._start = time.monotonic()

    def restart(self):
        self._start = time.monotonic()

    def elapsed_since_start(self) -> int:
        return int((time.monotonic() - self._start) * 1000)


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"Clock cannot start at negative time {start}")
        self._now = start

    def advance(self, millis: int) -> int:
        if millis < 0:
            raise ValueError(f"Cannot move clock backwards by {-millis} ms")
        self._now += millis
        return self._now

    def set(self, millis: int) -> int:
        if millis < self._now:
            raise ValueError(f"Cannot move clock back from {self._now} to {millis} ms")
        self._now = millis
        return self._now

    def elapsed_since_start(self) -> int:
        return self._now
