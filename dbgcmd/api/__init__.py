"""Public debug console API contracts."""

from dbgcmd.api.console import (
    ConfirmResult,
    ConsoleConfig,
    DebugConsole,
    ParsableCommand,
    ParseFailed,
    Parsed,
    create_console,
)
from dbgcmd.api.input_events import ConsoleInputRouter, KeyEvent, create_input_router
from dbgcmd.api.logging import ConsoleLoggingConfig

__all__ = [
    "ConfirmResult",
    "ConsoleConfig",
    "ConsoleInputRouter",
    "ConsoleLoggingConfig",
    "DebugConsole",
    "KeyEvent",
    "ParsableCommand",
    "ParseFailed",
    "Parsed",
    "create_console",
    "create_input_router",
]
