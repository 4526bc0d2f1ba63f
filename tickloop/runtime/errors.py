"""Package exception types."""

from __future__ import annotations


class TickloopError(RuntimeError):
    """Base class for tickloop failures."""


class LoopStateError(TickloopError):
    """Raised when a loop lifecycle operation is used in the wrong phase."""
