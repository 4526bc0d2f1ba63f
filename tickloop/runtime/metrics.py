"""Read-only loop metrics snapshots built from tick and frame stats."""

from __future__ import annotations

from dataclasses import dataclass

from tickloop.runtime.duration import Duration
from tickloop.runtime.stat import Stat


@dataclass(frozen=True, slots=True)
class LoopMetricsSnapshot:
    """Rates and costs as of the last reporting boundary."""

    tick_rate: int
    frame_rate: int
    tick_count: int
    frame_count: int
    average_tick: Duration
    average_frame: Duration

    def as_log_fields(self) -> dict[str, float | int]:
        return {
            "tick_rate": self.tick_rate,
            "frame_rate": self.frame_rate,
            "tick_count": self.tick_count,
            "frame_count": self.frame_count,
            "average_tick_ms": self.average_tick.seconds * 1000.0,
            "average_frame_ms": self.average_frame.seconds * 1000.0,
        }


def snapshot_stats(ticks: Stat, frames: Stat) -> LoopMetricsSnapshot:
    return LoopMetricsSnapshot(
        tick_rate=ticks.get_rate(),
        frame_rate=frames.get_rate(),
        tick_count=ticks.get_count(),
        frame_count=frames.get_count(),
        average_tick=ticks.find_average(),
        average_frame=frames.find_average(),
    )
