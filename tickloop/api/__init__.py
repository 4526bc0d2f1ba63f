"""Public tickloop API boundary."""

from tickloop.api.logging import LoggingConfig
from tickloop.api.loop import Clock, LoopHandle, Recorder, Render, State

__all__ = [
    "Clock",
    "LoggingConfig",
    "LoopHandle",
    "Recorder",
    "Render",
    "State",
]
