"""Fixed-timestep main loop with interpolated rendering."""

from __future__ import annotations

import copy
import math
from collections.abc import Callable
from enum import Enum
from typing import Generic

from tickloop.api.loop import Clock, Render, StateT
from tickloop.runtime.config import LoopConfig, get_loop_config
from tickloop.runtime.duration import Duration
from tickloop.runtime.errors import LoopStateError
from tickloop.runtime.logging import get_tickloop_logger
from tickloop.runtime.metrics import LoopMetricsSnapshot, snapshot_stats
from tickloop.runtime.profiling import ProfileScope
from tickloop.runtime.stat import Stat
from tickloop.runtime.timer import Timer

_LOG = get_tickloop_logger("tickloop.loop")


class LoopPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class RenderLimit(str, Enum):
    """How often frames may be rendered."""

    NEVER = "never"
    ONCE = "once"
    ALWAYS = "always"

    def allows(self, frames: Stat) -> bool:
        if self is RenderLimit.NEVER:
            return False
        if self is RenderLimit.ONCE:
            return frames.cycle_count == 0
        return True


class MainLoop(Generic[StateT]):
    """Drives fixed simulation ticks and decoupled, interpolated renders.

    Each ``frame()`` measures the time since the previous frame, drains the
    owed time in ticks of exactly ``tick_duration``, then renders a blend of
    the previous and current state weighted by the leftover fraction of a
    tick. Once per second ``State.sec`` runs and both stats are refreshed, so
    ``ticks.get_rate()`` and ``frames.get_rate()`` read as per-second rates.

    The loop is single-threaded. ``stop()`` only raises a flag that is honoured
    between ticks and at the end of the frame.
    """

    def __init__(
        self,
        tick_rate: float,
        clock: Clock,
        *,
        render_limit: RenderLimit = RenderLimit.ALWAYS,
        max_catch_up_ticks: int | None = None,
    ) -> None:
        if tick_rate <= 0.0:
            raise ValueError("tick_rate must be > 0")
        if max_catch_up_ticks is not None and max_catch_up_ticks <= 0:
            raise ValueError("max_catch_up_ticks must be > 0")
        self._clock = clock
        self._tick_duration = Duration(1.0 / float(tick_rate))
        self._render_limit = RenderLimit(render_limit)
        self._max_catch_up_ticks = max_catch_up_ticks
        self._phase = LoopPhase.IDLE
        self._stop_requested = False
        self._accumulator = Duration.ZERO
        self._alpha = 0.0
        self._setup_timer = Timer(clock)
        self._tick_timer: Timer | None = None
        self._second_timer: Timer | None = None
        self._ticks = Stat()
        self._frames = Stat()
        self._previous: StateT | None = None
        self._current: StateT | None = None
        self._renderer: Render[StateT] | None = None

    @classmethod
    def from_config(cls, clock: Clock, config: LoopConfig | None = None) -> MainLoop:
        resolved = config or get_loop_config()
        return cls(
            resolved.tick_rate,
            clock,
            render_limit=RenderLimit(resolved.render_limit),
            max_catch_up_ticks=resolved.max_catch_up_ticks,
        )

    @property
    def phase(self) -> LoopPhase:
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase is LoopPhase.RUNNING

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    @property
    def tick_duration(self) -> Duration:
        return self._tick_duration

    @property
    def accumulator(self) -> Duration:
        """Simulation time owed but not yet ticked."""
        return self._accumulator

    @property
    def alpha(self) -> float:
        """Interpolation factor used by the most recent frame."""
        return self._alpha

    @property
    def render_limit(self) -> RenderLimit:
        return self._render_limit

    @property
    def ticks(self) -> Stat:
        return self._ticks

    @property
    def frames(self) -> Stat:
        return self._frames

    @property
    def state(self) -> StateT | None:
        return self._current

    def set_render_limit(self, limit: RenderLimit) -> None:
        """Limit rendering, e.g. while a long task is split across ticks."""
        self._render_limit = RenderLimit(limit)

    def metrics_snapshot(self) -> LoopMetricsSnapshot:
        return snapshot_stats(self._ticks, self._frames)

    def stop(self) -> None:
        """Request termination at the next tick or frame boundary."""
        if self._stop_requested or self._phase is LoopPhase.STOPPED:
            return
        self._stop_requested = True
        _LOG.debug("main_loop_stop_requested phase=%s", self._phase.value)

    def start(
        self,
        state_factory: Callable[[], StateT],
        render_factory: Callable[[], Render[StateT]],
    ) -> StateT:
        """Run until stopped and return the final simulation state."""
        self.prime(state_factory, render_factory)
        while self.frame():
            pass
        assert self._current is not None
        return self._current

    def prime(
        self,
        state_factory: Callable[[], StateT],
        render_factory: Callable[[], Render[StateT]],
    ) -> None:
        """Initialize state and renderer and enter the running phase."""
        if self._phase is not LoopPhase.IDLE:
            raise LoopStateError(f"main loop cannot start from phase {self._phase.value}")
        self._phase = LoopPhase.RUNNING
        self._renderer = render_factory()
        current = state_factory()
        self._current = current
        current.init(self, self._setup_timer)
        self._previous = state_factory()
        self._tick_timer = Timer(self._clock)
        self._second_timer = Timer(self._clock)
        _LOG.info(
            "main_loop_started tick_rate=%.3f setup_ms=%.3f render_limit=%s",
            1.0 / self._tick_duration.seconds,
            self._setup_timer.elapsed().seconds * 1000.0,
            self._render_limit.value,
        )

    def frame(self) -> bool:
        """Run one frame; return whether the loop is still running."""
        if self._phase is not LoopPhase.RUNNING:
            raise LoopStateError(f"main loop cannot run a frame in phase {self._phase.value}")
        tick_timer = self._tick_timer
        second_timer = self._second_timer
        renderer = self._renderer
        assert tick_timer is not None and second_timer is not None and renderer is not None

        elapsed = tick_timer.elapsed()
        tick_timer += elapsed
        self._accumulator = self._accumulator + elapsed

        self._drain_ticks()

        # A stop can leave whole ticks owed; never extrapolate past current.
        self._alpha = min(self._accumulator / self._tick_duration, 1.0)
        if self._render_limit.allows(self._frames):
            with ProfileScope(self._clock, self._frames):
                renderer.render(self, self._blend(self._alpha))

        if second_timer >= Duration.ONE:
            self._report_second()
            second_timer += Duration.ONE

        if self._stop_requested:
            self._phase = LoopPhase.STOPPED
            _LOG.info(
                "main_loop_stopped ticks=%d frames=%d",
                self._ticks.get_count(),
                self._frames.get_count(),
            )
            return False
        return True

    def _drain_ticks(self) -> None:
        tick = self._tick_duration
        cap = self._max_catch_up_ticks
        drained = 0
        while self._accumulator >= tick and not self._stop_requested:
            if cap is not None and drained >= cap:
                self._drop_owed_ticks()
                break
            current = self._current
            assert current is not None
            self._previous = copy.deepcopy(current)
            with ProfileScope(self._clock, self._ticks):
                current.update(self)
            self._accumulator = self._accumulator - tick
            drained += 1

    def _drop_owed_ticks(self) -> None:
        tick = self._tick_duration
        remainder = Duration(math.fmod(self._accumulator.seconds, tick.seconds))
        owed = round((self._accumulator - remainder) / tick)
        self._accumulator = remainder
        _LOG.warning(
            "main_loop_dropped_ticks dropped=%d cap=%s owed_ms=%.3f",
            owed,
            self._max_catch_up_ticks,
            (tick * owed).seconds * 1000.0,
        )

    def _blend(self, alpha: float) -> StateT:
        previous = self._previous
        current = self._current
        assert previous is not None and current is not None
        return previous.scale(1.0 - alpha).combine(current.scale(alpha))

    def _report_second(self) -> None:
        current = self._current
        assert current is not None
        current.sec(self)
        self._ticks.refresh()
        self._frames.refresh()
        snapshot = self.metrics_snapshot()
        _LOG.debug(
            "main_loop_second tick_rate=%d frame_rate=%d",
            snapshot.tick_rate,
            snapshot.frame_rate,
            extra=snapshot.as_log_fields(),
        )


__all__ = ["LoopPhase", "MainLoop", "RenderLimit"]
