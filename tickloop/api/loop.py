"""Public capability contracts consumed by the main loop."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from tickloop.runtime.duration import Duration
    from tickloop.runtime.main_loop import LoopPhase, RenderLimit
    from tickloop.runtime.stat import Stat
    from tickloop.runtime.timer import Timer

StateT = TypeVar("StateT", bound="State")


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source returning seconds since an arbitrary epoch."""

    def now(self) -> float: ...


@runtime_checkable
class Recorder(Protocol):
    """Sink accepting one measured duration per profiled scope."""

    def record(self, duration: "Duration") -> None: ...


class LoopHandle(Protocol):
    """Loop surface visible from state and render callbacks."""

    @property
    def ticks(self) -> "Stat": ...

    @property
    def frames(self) -> "Stat": ...

    @property
    def tick_duration(self) -> "Duration": ...

    @property
    def phase(self) -> "LoopPhase": ...

    def stop(self) -> None: ...

    def set_render_limit(self, limit: "RenderLimit") -> None: ...


class State(Protocol):
    """Simulation value advanced by fixed ticks and blended for rendering.

    ``scale`` must distribute over ``combine`` so that
    ``previous.scale(1 - a).combine(current.scale(a))`` is a linear blend.
    """

    def scale(self: StateT, factor: float) -> StateT: ...

    def combine(self: StateT, other: StateT) -> StateT: ...

    def init(self, loop: LoopHandle, timer: "Timer") -> None:
        """Run once before the first frame; ``timer`` measures setup cost."""

    def update(self, loop: LoopHandle) -> None:
        """Advance the simulation by exactly one tick."""

    def sec(self, loop: LoopHandle) -> None:
        """Run once per elapsed reporting second."""


class Render(Protocol[StateT]):
    """Read-only consumer of the interpolated state, called once per frame."""

    def render(self, loop: LoopHandle, state: StateT) -> None: ...
