"""Public debug-console API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, Self, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from dbgcmd.runtime.build_config import BuildConfig

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ParsableCommand(Protocol):
    """Command type that knows how to parse itself from console text.

    ``parse`` raises ``ValueError`` (``CommandParseError`` is one) or
    ``LookupError`` when the text does not name a valid command.
    """

    @classmethod
    def parse(cls, text: str) -> Self: ...


@dataclass(frozen=True, slots=True)
class Parsed(Generic[T_co]):
    """Entry parsed into a command."""

    value: T_co


@dataclass(frozen=True, slots=True)
class ParseFailed:
    """Entry rejected by the command parser; ``error`` is the parser's own exception."""

    error: BaseException


ConfirmResult: TypeAlias = Parsed[T] | ParseFailed


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Construction-time console settings."""

    history_capacity: int | None = None
    start_active: bool = True
    start_shown: bool = False


@runtime_checkable
class DebugConsole(Protocol):
    """Public debug console contract."""

    @property
    def history_cursor(self) -> int | None:
        """Return index of the browsed history entry, or None while composing."""

    def entry(self) -> str:
        """Return the text entered so far."""

    def receive_char(self, ch: str) -> None:
        """Append one character to the entry."""

    def receive_text(self, text: str) -> None:
        """Append text to the entry."""

    def receive_char_if(self, ch: str, predicate: Callable[[str], bool]) -> bool:
        """Append one character if predicate accepts it."""

    def receive_text_if(self, text: str, predicate: Callable[[str], bool]) -> bool:
        """Append text if predicate accepts it."""

    def backspace(self) -> None:
        """Remove the last entry character."""

    def set_entry(self, text: str) -> None:
        """Replace the whole entry."""

    def clear_entry(self) -> None:
        """Empty the entry and stop browsing history."""

    def up(self) -> bool:
        """Move toward older history entries."""

    def down(self) -> bool:
        """Move toward newer history entries."""

    def up_deduped(self) -> bool:
        """Move toward older entries, skipping repeats of the visible text."""

    def down_deduped(self) -> bool:
        """Move toward newer entries, skipping repeats of the visible text."""

    def history(self) -> tuple[str, ...]:
        """Return confirmed entries, oldest first."""

    def history_deduped(self) -> tuple[str, ...]:
        """Return confirmed entries without consecutive repeats."""

    def history_len(self) -> int:
        """Return number of stored entries, duplicates included."""

    def clear_history(self) -> None:
        """Drop all stored entries."""

    def confirm(self, command_type: Callable[[str], T] | type[T]) -> ConfirmResult[T] | None:
        """Parse the entry into ``command_type`` and archive it."""

    def enabled(self) -> bool:
        """Return whether the build allows the console at all."""

    def is_active(self) -> bool:
        """Return whether confirm() will parse."""

    def set_active(self, active: bool) -> None:
        """Set the host-controlled active flag."""

    def activate(self) -> None:
        """Set the active flag."""

    def deactivate(self) -> None:
        """Clear the active flag."""

    def shown(self) -> bool:
        """Return whether the host should draw the console."""

    def show(self) -> None:
        """Mark console visible."""

    def hide(self) -> None:
        """Mark console hidden."""

    def toggle_shown(self) -> None:
        """Flip visibility."""


def create_console(
    config: ConsoleConfig | None = None,
    *,
    build: BuildConfig | None = None,
) -> DebugConsole:
    """Create default debug console implementation."""
    from dbgcmd.runtime.console import RuntimeConsole

    return RuntimeConsole.from_config(config or ConsoleConfig(), build=build)


__all__ = [
    "ConfirmResult",
    "ConsoleConfig",
    "DebugConsole",
    "ParsableCommand",
    "ParseFailed",
    "Parsed",
    "create_console",
]
