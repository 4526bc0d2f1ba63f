from __future__ import annotations

import pytest

from tickloop.runtime.clocks import ManualClock
from tickloop.runtime.duration import Duration
from tickloop.runtime.timer import Timer


def test_elapsed_is_sampled_from_live_clock() -> None:
    clock = ManualClock(10.0)
    timer = Timer(clock)

    assert timer.start == Duration(10.0)
    assert timer.elapsed() == Duration.ZERO
    clock.advance(0.25)
    assert timer.elapsed() == Duration(0.25)
    clock.advance(0.5)
    assert timer.elapsed() == Duration(0.75)


def test_shift_consumes_elapsed_time_and_keeps_overshoot() -> None:
    clock = ManualClock()
    timer = Timer(clock)
    clock.advance(1.25)

    timer += Duration.ONE

    assert timer.elapsed() == Duration(0.25)
    assert timer.start == Duration.ONE


def test_negative_shift_rolls_bookkeeping_back() -> None:
    clock = ManualClock()
    timer = Timer(clock)

    timer += Duration(-0.5)

    assert timer.elapsed() == Duration(0.5)


def test_shifted_timer_reaches_target_only_after_enough_time() -> None:
    clock = ManualClock()
    target = Duration(0.5)

    rolled_back = Timer(clock)
    rolled_back += Duration(-0.5)
    assert rolled_back >= Duration(-0.5)

    delayed = Timer(clock)
    delayed += target
    assert not delayed >= target
    clock.advance(0.5)
    assert not delayed >= target
    clock.advance(0.5)
    assert delayed >= target


def test_comparisons_do_not_mutate_timer() -> None:
    clock = ManualClock()
    timer = Timer(clock)
    clock.advance(0.005)

    assert timer < Duration(0.01)
    assert timer <= Duration(0.005)
    assert timer > Duration.ZERO
    assert timer == Duration(0.005)
    assert Duration(0.01) > timer
    assert timer.elapsed() == Duration(0.005)


def test_add_returns_independent_timer() -> None:
    clock = ManualClock()
    timer = Timer(clock)
    clock.advance(2.0)

    shifted = timer + Duration.ONE

    assert shifted.elapsed() == Duration.ONE
    assert timer.elapsed() == Duration(2.0)
    assert shifted.clock is clock


def test_difference_against_duration() -> None:
    clock = ManualClock()
    timer = Timer(clock)
    clock.advance(0.006)

    assert (timer - 5.0 * Duration.MILLI).seconds == pytest.approx(0.001)
    assert (Duration(0.01) - timer).seconds == pytest.approx(0.004)


def test_timer_rejects_bare_numbers() -> None:
    timer = Timer(ManualClock())
    with pytest.raises(TypeError):
        timer += 1.0  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = timer < 1.0  # type: ignore[operator]


def test_str_renders_elapsed() -> None:
    clock = ManualClock()
    timer = Timer(clock)
    clock.advance(1.5)
    assert str(timer) == "1.5 s"
