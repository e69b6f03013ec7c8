"""State model for in-application command-line debug consoles."""

from dbgcmd.api import (
    ConfirmResult,
    ConsoleConfig,
    DebugConsole,
    KeyEvent,
    ParsableCommand,
    ParseFailed,
    Parsed,
    create_console,
    create_input_router,
)
from dbgcmd.runtime.console import RuntimeConsole as Console
from dbgcmd.runtime.errors import CommandParseError

__all__ = [
    "CommandParseError",
    "ConfirmResult",
    "Console",
    "ConsoleConfig",
    "DebugConsole",
    "KeyEvent",
    "ParsableCommand",
    "ParseFailed",
    "Parsed",
    "create_console",
    "create_input_router",
]
