"""Numpy-backed base for interpolatable simulation state."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, ClassVar, TypeVar

import numpy as np

if TYPE_CHECKING:
    from tickloop.api.loop import LoopHandle
    from tickloop.runtime.timer import Timer

ArrayStateT = TypeVar("ArrayStateT", bound="ArrayState")


class ArrayState:
    """State whose interpolated quantities live in one float64 array.

    Subclasses set ``shape`` and override the callbacks they need. Attributes
    other than ``values`` are carried over unchanged by ``scale`` and
    ``combine``; the blend only touches the array.
    """

    shape: ClassVar[tuple[int, ...]] = (1,)

    def __init__(self, values: np.ndarray | None = None) -> None:
        if values is None:
            self.values = np.zeros(self.shape, dtype=np.float64)
        else:
            self.values = np.asarray(values, dtype=np.float64).reshape(self.shape)

    def scale(self: ArrayStateT, factor: float) -> ArrayStateT:
        return self._with_values(self.values * float(factor))

    def combine(self: ArrayStateT, other: ArrayStateT) -> ArrayStateT:
        return self._with_values(self.values + other.values)

    def init(self, loop: LoopHandle, timer: Timer) -> None:
        _ = (loop, timer)

    def update(self, loop: LoopHandle) -> None:
        _ = loop

    def sec(self, loop: LoopHandle) -> None:
        _ = loop

    def _with_values(self: ArrayStateT, values: np.ndarray) -> ArrayStateT:
        clone = copy.copy(self)
        clone.values = values
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(values={self.values.tolist()!r})"
