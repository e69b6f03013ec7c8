"""Console logging implementation.

Configuration targets the package logger (``dbgcmd`` by default), never the
root logger, so a host application's own handlers stay untouched.
"""

from __future__ import annotations

import copy
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from dbgcmd.api.logging import ConsoleLoggingConfig
from dbgcmd.runtime.build_config import resolve_log_level_name
from dbgcmd.runtime.json_codec import dumps_text

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        elif record.exc_text:
            payload["exc_info"] = record.exc_text
        return dumps_text(payload)


class RecordPreservingQueueHandler(QueueHandler):
    """Queue handler that enqueues an unflattened copy of each record.

    The stock ``prepare`` merges the traceback into ``msg`` and drops
    ``exc_info``, which loses structure the JSON formatter needs.
    """

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        return copy.copy(record)


def configure_console_logging(config: ConsoleLoggingConfig) -> None:
    """Attach handlers to the package logger, with optional async file streaming.

    Replaces handlers previously installed on that logger and stops it
    propagating, so records are written once.
    """
    shutdown_console_logging()

    level = getattr(logging, config.level_name.upper(), logging.INFO)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [stream_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    target = logging.getLogger(config.logger_name)
    target.handlers.clear()
    target.setLevel(level)
    target.propagate = False

    if len(handlers) == 1:
        target.addHandler(handlers[0])
        return

    global _QUEUE_LISTENER
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    target.addHandler(RecordPreservingQueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_console_logging() -> None:
    """Flush and stop the file streaming listener, if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def setup_console_logging(logger_name: str = "dbgcmd") -> None:
    """Configure minimal console logging unless the host already logs.

    Does nothing when the package logger or the root logger has handlers.
    """
    if logging.getLogger(logger_name).handlers or logging.getLogger().handlers:
        return
    configure_console_logging(
        ConsoleLoggingConfig(
            level_name=resolve_log_level_name(default="INFO"),
            console_format="text",
            file_path=None,
            file_format="json",
            logger_name=logger_name,
        )
    )


def get_console_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "JsonFormatter",
    "RecordPreservingQueueHandler",
    "configure_console_logging",
    "get_console_logger",
    "setup_console_logging",
    "shutdown_console_logging",
]
