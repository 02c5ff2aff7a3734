"""Repeated timing of a callable with summary statistics."""

from __future__ import annotations

import math
import time
from typing import Callable

from whisker.logger import Logger
from whisker.timer import Timer


class Benchmark:
    """Collects call durations in milliseconds and logs statistics."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._times: list[float] = []
        self._timer = Timer(clock)

    @property
    def times(self) -> tuple[float, ...]:
        """Recorded durations in milliseconds."""
        return tuple(self._times)

    def add(self, func: Callable[[], object], count: int = 1) -> None:
        """Call ``func`` ``count`` times, recording each duration."""
        for _ in range(count):
            self._timer.reset()
            func()
            self._times.append(self._timer.elapsed() * 1000)

    def show(self) -> None:
        """Log the collected statistics; sorts the recorded times."""
        if not self._times:
            return
        if len(self._times) < 2:
            Logger().hide_context().info("Time: %fms", self._times[0])
            return
        total = math.fsum(self._times)
        self._times.sort()
        count = len(self._times)
        median = self._times[count // 2]
        if count % 2 == 0:
            median = (median + self._times[count // 2 - 1]) * 0.5
        average = total / count
        variance = sum((average - x) * (average - x) / count for x in self._times)
        Logger().hide_context().info(
            "Call count: %d, Avr: %fms, med: %fms, min: %fms,"
            " max: %fms, variance: %fms, sigma: %fms\n",
            count, average, median, self._times[0], self._times[-1],
            variance, math.sqrt(variance),
        )

    def reset(self) -> None:
        self._times.clear()