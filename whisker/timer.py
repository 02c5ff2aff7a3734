"""A pausable stopwatch measuring seconds."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable


class TimerStatus(Enum):
    PAUSED = 0
    ACTIVE = 1


class Timer:
    """Stopwatch that starts running on creation."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._begin = clock()
        self._pause_begin = self._begin
        self._pause_time = 0.0
        self._elapsed = 0.0
        self._status = TimerStatus.ACTIVE

    def reset(self) -> None:
        """Restart from zero and run."""
        self._elapsed = 0.0
        self._pause_time = 0.0
        self._begin = self._clock()
        self._status = TimerStatus.ACTIVE

    def pause(self) -> None:
        if self._status is not TimerStatus.ACTIVE:
            return
        self._elapsed = self._clock() - self._begin
        self._status = TimerStatus.PAUSED
        self._pause_begin = self._clock()

    def resume(self) -> None:
        if self._status is TimerStatus.ACTIVE:
            return
        self._status = TimerStatus.ACTIVE
        self._pause_time += self._clock() - self._pause_begin

    def elapsed(self) -> float:
        """Seconds run so far, excluding paused time."""
        if self._status is TimerStatus.ACTIVE:
            self._elapsed = self._clock() - self._begin - self._pause_time
        return self._elapsed

    def status(self) -> TimerStatus:
        return self._status