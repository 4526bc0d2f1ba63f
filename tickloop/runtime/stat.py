"""Running statistics for a repeatedly measured subroutine."""

from __future__ import annotations

from tickloop.runtime.duration import Duration


class Stat:
    """Count, total duration and per-cycle rate of recorded samples.

    A cycle ends with ``refresh()``. Refreshing once per second turns the
    cycle count into a per-second rate, e.g. ticks or frames per second.
    """

    __slots__ = ("_count", "_cycle", "_total", "_rate", "__weakref__")

    def __init__(self) -> None:
        self._count = 0
        self._cycle = 0
        self._total = Duration.ZERO
        self._rate = 0

    def record(self, duration: Duration) -> None:
        self._count += 1
        self._cycle += 1
        self._total = self._total + duration

    def __iadd__(self, duration: Duration) -> Stat:
        if not isinstance(duration, Duration):
            return NotImplemented
        self.record(duration)
        return self

    def refresh(self) -> None:
        """Close the current cycle; its sample count becomes the rate."""
        self._rate = self._cycle
        self._cycle = 0

    def get_count(self) -> int:
        return self._count

    def get_rate(self) -> int:
        """Samples recorded in the cycle closed by the last ``refresh()``."""
        return self._rate

    def find_average(self) -> Duration:
        if self._count == 0:
            return Duration.ZERO
        return self._total / self._count

    @property
    def total(self) -> Duration:
        return self._total

    @property
    def cycle_count(self) -> int:
        """Samples recorded since the last ``refresh()``."""
        return self._cycle

    def __repr__(self) -> str:
        return (
            f"Stat(count={self._count}, cycle={self._cycle}, "
            f"total={self._total.seconds!r}, rate={self._rate})"
        )
