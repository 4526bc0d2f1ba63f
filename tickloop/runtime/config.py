"""Centralized loop configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

_RENDER_LIMITS = ("always", "once", "never")


@dataclass(frozen=True, slots=True)
class LoopConfig:
    tick_rate: float = 60.0
    render_limit: str = "always"
    max_catch_up_ticks: int | None = None
    log_level: str = "INFO"


_LOOP_CONFIG: ContextVar[LoopConfig | None] = ContextVar("tickloop_loop_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_render_limit(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in _RENDER_LIMITS:
        return str(fallback)
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("TICKLOOP_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_loop_config(*, env: Mapping[str, str] | None = None) -> LoopConfig:
    max_catch_up = _int("TICKLOOP_MAX_CATCH_UP_TICKS", 0, minimum=0, env=env)
    return LoopConfig(
        tick_rate=_float("TICKLOOP_TICK_RATE", 60.0, minimum=1.0, env=env),
        render_limit=_normalize_render_limit(
            _text("TICKLOOP_RENDER_LIMIT", "always", env=env),
            "always",
        ),
        max_catch_up_ticks=max_catch_up if max_catch_up > 0 else None,
        log_level=resolve_log_level_name(env=env),
    )


def initialize_loop_config(*, env: Mapping[str, str] | None = None) -> LoopConfig:
    config = load_loop_config(env=env)
    _LOOP_CONFIG.set(config)
    return config


def set_loop_config(config: LoopConfig) -> LoopConfig:
    _LOOP_CONFIG.set(config)
    return config


def get_loop_config() -> LoopConfig:
    config = _LOOP_CONFIG.get()
    if config is not None:
        return config
    return initialize_loop_config()


__all__ = [
    "LoopConfig",
    "get_loop_config",
    "initialize_loop_config",
    "load_loop_config",
    "resolve_log_level_name",
    "set_loop_config",
]
