"""Fixed-timestep loop, timers and profiling statistics."""

from tickloop.api import Clock, LoopHandle, Render, State
from tickloop.runtime import (
    ArrayState,
    Duration,
    LoopPhase,
    MainLoop,
    ManualClock,
    MonotonicClock,
    ProfileScope,
    RenderLimit,
    Stat,
    Timer,
    begin_profile,
)

__all__ = [
    "ArrayState",
    "Clock",
    "Duration",
    "LoopHandle",
    "LoopPhase",
    "MainLoop",
    "ManualClock",
    "MonotonicClock",
    "ProfileScope",
    "Render",
    "RenderLimit",
    "Stat",
    "State",
    "Timer",
    "begin_profile",
]
