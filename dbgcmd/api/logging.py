"""Public console logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConsoleLoggingConfig:
    """Console logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json
    logger_name: str = "dbgcmd"


__all__ = ["ConsoleLoggingConfig"]
