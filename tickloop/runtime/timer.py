"""Elapsed-time measurement against a borrowed clock."""

from __future__ import annotations

from tickloop.api.loop import Clock
from tickloop.runtime.duration import Duration


class Timer:
    """Measures time relative to the moment it was created.

    ``timer += d`` moves the reference point forward by ``d``, so later
    ``elapsed()`` readings are smaller by ``d``. The main loop uses this to
    consume time it has already accounted for without creating a new timer.
    """

    __slots__ = ("_clock", "_start")

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._start = Duration(clock.now())

    @property
    def start(self) -> Duration:
        return self._start

    @property
    def clock(self) -> Clock:
        return self._clock

    def elapsed(self) -> Duration:
        """Return time since the reference point, sampled from the live clock."""
        return Duration(self._clock.now()) - self._start

    def __iadd__(self, shift: Duration) -> Timer:
        if not isinstance(shift, Duration):
            return NotImplemented
        self._start = self._start + shift
        return self

    def __add__(self, shift: Duration) -> Timer:
        if not isinstance(shift, Duration):
            return NotImplemented
        shifted = Timer.__new__(Timer)
        shifted._clock = self._clock
        shifted._start = self._start + shift
        return shifted

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() - other

    def __rsub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return other - self.elapsed()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() == other

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() < other

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() <= other

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() > other

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.elapsed() >= other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.elapsed())

    def __repr__(self) -> str:
        return f"Timer(start={self._start.seconds!r})"
