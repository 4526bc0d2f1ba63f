"""Signed floating-point seconds value used by every timing primitive."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """Span of time in seconds.

    Negative values are valid and mean deficit or remaining time. Adding or
    subtracting a bare number is rejected so that seconds never mix with
    dimensionless factors by accident.
    """

    seconds: float = 0.0

    GIGA: ClassVar[Duration]
    DAY: ClassVar[Duration]
    MEGA: ClassVar[Duration]
    HOUR: ClassVar[Duration]
    KILO: ClassVar[Duration]
    MINUTE: ClassVar[Duration]
    ONE: ClassVar[Duration]
    MILLI: ClassVar[Duration]
    MICRO: ClassVar[Duration]
    NANO: ClassVar[Duration]
    ZERO: ClassVar[Duration]

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", float(self.seconds))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        return cls(value.total_seconds())

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        whole, rest = divmod(int(nanoseconds), _NANOS_PER_SECOND)
        return cls(whole + rest / _NANOS_PER_SECOND)

    def as_nanoseconds(self) -> int:
        return round(self.seconds * _NANOS_PER_SECOND)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse ``"1.5"`` or ``"1.5 s"`` into a duration."""
        value = str(text).strip()
        if value.endswith("s"):
            value = value[:-1].rstrip()
        try:
            return cls(float(value))
        except ValueError:
            raise ValueError(f"invalid duration literal: {text!r}") from None

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds - other.seconds)

    def __mul__(self, factor: object) -> Duration:
        if isinstance(factor, Duration) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Duration(self.seconds * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Duration | float:
        if isinstance(other, Duration):
            return self.seconds / other.seconds
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(self.seconds / other)

    def __neg__(self) -> Duration:
        return Duration(-self.seconds)

    def __float__(self) -> float:
        return self.seconds

    def __str__(self) -> str:
        return f"{self.seconds} s"


Duration.MINUTE = Duration(60.0)
Duration.HOUR = Duration(60.0 * Duration.MINUTE.seconds)
Duration.DAY = Duration(24.0 * Duration.HOUR.seconds)
Duration.GIGA = Duration(1e9)
Duration.MEGA = Duration(1e6)
Duration.KILO = Duration(1e3)
Duration.ONE = Duration(1.0)
Duration.MILLI = Duration(1e-3)
Duration.MICRO = Duration(1e-6)
Duration.NANO = Duration(1e-9)
Duration.ZERO = Duration(0.0)
