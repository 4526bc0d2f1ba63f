"""Logging setup for the loop runtime.

Loop log lines are ``key=value`` messages; the per-second report and other
measurements travel as ``extra`` fields. Both formatters keep those fields:
the JSON formatter nests them under ``fields`` and the text formatter appends
them to the message.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from enum import Enum
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from tickloop.api.logging import LoggingConfig
from tickloop.runtime.config import LoopConfig, get_loop_config
from tickloop.runtime.duration import Duration

_QUEUE_LISTENER: QueueListener | None = None
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _record_fields(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRIBUTES}


def _field_value(value: object) -> object:
    if isinstance(value, Duration):
        return value.seconds
    if isinstance(value, Enum):
        return value.value
    return str(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; durations are written as seconds."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = _record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=_field_value)


class LoopTextFormatter(logging.Formatter):
    """Console format that appends extra fields as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _record_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={_text_value(value)}" for key, value in fields.items())
        head, sep, tail = line.partition("\n")
        return f"{head} {pairs}{sep}{tail}"


def _text_value(value: object) -> object:
    if isinstance(value, float):
        return f"{value:.3f}"
    if isinstance(value, (Duration, Enum)):
        return _field_value(value)
    return value


def logging_config_for_loop(config: LoopConfig, *, file_path: str | None = None) -> LoggingConfig:
    """Build the logging pipeline config that matches a loop config."""
    return LoggingConfig(
        level_name=config.log_level,
        console_format="text",
        file_path=file_path,
        file_format="json",
    )


def configure_tickloop_logging(config: LoggingConfig) -> None:
    """Configure root logging; a file sink is fed from a background queue."""
    global _QUEUE_LISTENER

    shutdown_tickloop_logging()

    level = logging.getLevelName(config.level_name.strip().upper())
    if not isinstance(level, int):
        level = logging.INFO
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    # Keeps file writes off the loop thread.
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_tickloop_logging() -> None:
    """Stop the background listener, flushing queued records."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_tickloop_logging(config: LoopConfig | None = None) -> None:
    """Configure console logging at the loop config's level.

    Falls back to the current loop config. Does nothing when the root logger
    already has handlers, so an application's own setup wins.
    """
    if logging.getLogger().handlers:
        return
    configure_tickloop_logging(logging_config_for_loop(config or get_loop_config()))


def get_tickloop_logger(name: str) -> logging.Logger:
    """Return a logger under the ``tickloop`` namespace."""
    if name != "tickloop" and not name.startswith("tickloop."):
        name = f"tickloop.{name}"
    return logging.getLogger(name)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return LoopTextFormatter()
