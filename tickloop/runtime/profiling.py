"""Scoped profiling that feeds one sample into a recorder on exit."""

from __future__ import annotations

import weakref
from types import TracebackType

from tickloop.api.loop import Clock, Recorder
from tickloop.runtime.logging import get_tickloop_logger
from tickloop.runtime.timer import Timer

_LOG = get_tickloop_logger("profiling")

# recorder -> its open scope; entries die with either side.
_OPEN_SCOPES: weakref.WeakKeyDictionary[Recorder, weakref.ref[ProfileScope]] = weakref.WeakKeyDictionary()


def _open_scope(recorder: Recorder) -> ProfileScope | None:
    try:
        ref = _OPEN_SCOPES.get(recorder)
    except TypeError:
        # Recorders without weak reference support are not tracked.
        return None
    scope = None if ref is None else ref()
    if scope is None or scope.closed:
        return None
    return scope


def _track(recorder: Recorder, scope: ProfileScope) -> None:
    try:
        _OPEN_SCOPES[recorder] = weakref.ref(scope)
    except TypeError:
        pass


class ProfileScope:
    """Measure a block and record its elapsed time exactly once.

    The start instant is captured at construction. Use as a context manager;
    the sample is recorded on every exit path, including exceptions, which are
    never suppressed. At most one scope may be open per recorder; a scope that
    is dropped without being closed records nothing and frees its recorder.
    """

    __slots__ = ("_timer", "_recorder", "_closed", "__weakref__")

    def __init__(self, clock: Clock, recorder: Recorder) -> None:
        self._timer = Timer(clock)
        self._recorder = recorder
        self._closed = False
        if __debug__:
            assert _open_scope(recorder) is None, "recorder already has an active profile scope"
            _track(recorder, self)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Record the elapsed time; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._recorder.record(self._timer.elapsed())

    def __enter__(self) -> ProfileScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            _LOG.debug("profile_scope_unwound exc_type=%s", exc_type.__name__)
        self.close()


def begin_profile(clock: Clock, recorder: Recorder) -> ProfileScope:
    """Open a profile scope against ``recorder``."""
    return ProfileScope(clock, recorder)
