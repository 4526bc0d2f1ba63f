from __future__ import annotations

import numpy as np
import pytest

from tickloop.runtime.clocks import ManualClock
from tickloop.runtime.main_loop import MainLoop
from tickloop.runtime.state import ArrayState


class Body(ArrayState):
    shape = (2,)

    def __init__(self, values=None) -> None:
        super().__init__(values)
        self.label = "body"

    def update(self, loop) -> None:
        self.values += np.array([1.0, -2.0])


class Capture:
    def __init__(self) -> None:
        self.frames: list[np.ndarray] = []

    def render(self, loop, state: Body) -> None:
        self.frames.append(state.values.copy())


def test_default_values_are_zeros_of_declared_shape() -> None:
    body = Body()
    assert body.values.shape == (2,)
    assert body.values.dtype == np.float64
    np.testing.assert_array_equal(body.values, [0.0, 0.0])


def test_scale_and_combine_return_new_states() -> None:
    a = Body([1.0, 2.0])
    b = Body([3.0, 5.0])

    blended = a.scale(0.25).combine(b.scale(0.75))

    np.testing.assert_allclose(blended.values, [2.5, 4.25])
    assert isinstance(blended, Body)
    assert blended.label == "body"
    np.testing.assert_array_equal(a.values, [1.0, 2.0])


def test_scale_distributes_over_combine() -> None:
    a = Body([1.5, -2.0])
    b = Body([0.5, 4.0])

    left = a.combine(b).scale(0.3)
    right = a.scale(0.3).combine(b.scale(0.3))

    np.testing.assert_allclose(left.values, right.values)


def test_loop_interpolates_array_state() -> None:
    clock = ManualClock()
    capture = Capture()
    loop = MainLoop(4.0, clock)
    loop.prime(Body, lambda: capture)

    clock.advance(0.625)
    loop.frame()

    assert loop.alpha == pytest.approx(0.5)
    np.testing.assert_allclose(capture.frames[-1], [1.5, -3.0])
    assert loop.state is not None
    np.testing.assert_allclose(loop.state.values, [2.0, -4.0])
