"""Public input event types consumed by the console input router."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from dbgcmd.api.console import DebugConsole


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Normalized key/char event.

    ``event_type`` is ``"key_down"``, ``"key_up"`` or ``"char"``. For key
    events ``value`` is a key name such as ``"Backspace"``; for char events it
    is the produced text.
    """

    event_type: str
    value: str


@runtime_checkable
class ConsoleInputRouter(Protocol):
    """Public key-event to console-operation routing contract."""

    @property
    def toggle_key(self) -> str:
        """Return normalized key name that toggles console visibility."""

    def accepts_text(self, text: str) -> bool:
        """Return whether every character of text may be typed into the console."""

    def handle_key_event(self, event: KeyEvent) -> bool:
        """Apply one event to the console. Return whether it was consumed."""

    def handle_key_events(self, events: Iterable[KeyEvent]) -> int:
        """Apply events in order. Return number consumed."""


def create_input_router(
    console: DebugConsole,
    *,
    toggle_key: str = "f1",
    accepted_chars: str | None = None,
) -> ConsoleInputRouter:
    """Create default input router bound to ``console``."""
    from dbgcmd.runtime.input_router import RuntimeConsoleInputRouter

    return RuntimeConsoleInputRouter(console, toggle_key=toggle_key, accepted_chars=accepted_chars)


__all__ = ["ConsoleInputRouter", "KeyEvent", "create_input_router"]
