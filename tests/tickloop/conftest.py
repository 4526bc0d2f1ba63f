from __future__ import annotations

from collections.abc import Callable

import pytest

from tickloop.runtime.duration import Duration
from tickloop.runtime.timer import Timer

LoopHook = Callable[[object], None]


class CallLog:
    """Shared call log for fake states and renders.

    The loop deep-copies state every tick; the log is shared, not copied.
    """

    def __init__(self) -> None:
        self.events: list[str] = []
        self.rendered: list[float] = []
        self.sec_rates: list[tuple[int, int]] = []
        self.init_elapsed: Duration | None = None
        self.on_update: LoopHook | None = None
        self.on_render: LoopHook | None = None
        self.on_sec: LoopHook | None = None

    def __deepcopy__(self, memo: dict[int, object]) -> CallLog:
        return self

    def count(self, name: str) -> int:
        return self.events.count(name)


class ScalarState:
    def __init__(self, calls: CallLog, value: float = 0.0) -> None:
        self.calls = calls
        self.value = value

    def scale(self, factor: float) -> ScalarState:
        return ScalarState(self.calls, self.value * factor)

    def combine(self, other: ScalarState) -> ScalarState:
        return ScalarState(self.calls, self.value + other.value)

    def init(self, loop, timer: Timer) -> None:
        self.calls.events.append("init")
        self.calls.init_elapsed = timer.elapsed()

    def update(self, loop) -> None:
        self.value += 1.0
        self.calls.events.append("update")
        if self.calls.on_update is not None:
            self.calls.on_update(loop)

    def sec(self, loop) -> None:
        self.calls.events.append("sec")
        self.calls.sec_rates.append((loop.ticks.get_rate(), loop.ticks.cycle_count))
        if self.calls.on_sec is not None:
            self.calls.on_sec(loop)


class ScalarRender:
    def __init__(self, calls: CallLog) -> None:
        self.calls = calls

    def render(self, loop, state: ScalarState) -> None:
        self.calls.events.append("render")
        self.calls.rendered.append(state.value)
        if self.calls.on_render is not None:
            self.calls.on_render(loop)


@pytest.fixture
def calls() -> CallLog:
    return CallLog()


@pytest.fixture
def state_factory(calls: CallLog) -> Callable[[], ScalarState]:
    return lambda: ScalarState(calls)


@pytest.fixture
def render_factory(calls: CallLog) -> Callable[[], ScalarRender]:
    return lambda: ScalarRender(calls)
