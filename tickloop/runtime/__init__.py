"""Tickloop runtime modules."""

from tickloop.runtime.clocks import FunctionClock, ManualClock, MonotonicClock
from tickloop.runtime.config import LoopConfig, get_loop_config, load_loop_config
from tickloop.runtime.duration import Duration
from tickloop.runtime.errors import LoopStateError, TickloopError
from tickloop.runtime.logging import setup_tickloop_logging
from tickloop.runtime.main_loop import LoopPhase, MainLoop, RenderLimit
from tickloop.runtime.metrics import LoopMetricsSnapshot, snapshot_stats
from tickloop.runtime.profiling import ProfileScope, begin_profile
from tickloop.runtime.stat import Stat
from tickloop.runtime.state import ArrayState
from tickloop.runtime.timer import Timer

__all__ = [
    "ArrayState",
    "Duration",
    "FunctionClock",
    "LoopConfig",
    "LoopMetricsSnapshot",
    "LoopPhase",
    "LoopStateError",
    "MainLoop",
    "ManualClock",
    "MonotonicClock",
    "ProfileScope",
    "RenderLimit",
    "Stat",
    "TickloopError",
    "Timer",
    "begin_profile",
    "get_loop_config",
    "load_loop_config",
    "setup_tickloop_logging",
    "snapshot_stats",
]
