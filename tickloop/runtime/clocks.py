"""Concrete clock adapters satisfying the ``Clock`` capability."""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter

from tickloop.runtime.duration import Duration


class MonotonicClock:
    """Process clock measured from the moment the adapter is created."""

    def __init__(self, *, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or perf_counter
        self._origin = float(self._time_source())

    def now(self) -> float:
        return float(self._time_source()) - self._origin


class FunctionClock:
    """Wrap an external zero-argument time source, e.g. a windowing library clock."""

    def __init__(self, time_source: Callable[[], float]) -> None:
        self._time_source = time_source

    def now(self) -> float:
        return float(self._time_source())


class ManualClock:
    """Simulated clock advanced explicitly by tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._now_seconds = float(start)

    def now(self) -> float:
        return self._now_seconds

    def advance(self, amount: float | Duration) -> float:
        """Move time forward and return the new reading."""
        seconds = float(amount)
        if seconds < 0.0:
            raise ValueError("advance amount must be >= 0")
        self._now_seconds += seconds
        return self._now_seconds

    def set(self, now_seconds: float) -> None:
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = float(now_seconds)
