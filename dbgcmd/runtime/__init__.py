"""Debug console runtime modules."""

from dbgcmd.runtime.build_config import BUILD_CONFIG, BuildConfig, load_build_config
from dbgcmd.runtime.console import RuntimeConsole
from dbgcmd.runtime.errors import PARSE_FAILURE_ERRORS, CommandParseError
from dbgcmd.runtime.history import ConsoleHistory
from dbgcmd.runtime.input_router import RuntimeConsoleInputRouter
from dbgcmd.runtime.logging import configure_console_logging, setup_console_logging

__all__ = [
    "BUILD_CONFIG",
    "BuildConfig",
    "CommandParseError",
    "ConsoleHistory",
    "PARSE_FAILURE_ERRORS",
    "RuntimeConsole",
    "RuntimeConsoleInputRouter",
    "configure_console_logging",
    "load_build_config",
    "setup_console_logging",
]
