"""Key-event routing into a debug console."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable

from dbgcmd.api.console import DebugConsole
from dbgcmd.api.input_events import KeyEvent

DEFAULT_ACCEPTED_CHARS = string.ascii_letters + string.digits + " ._-\"'/\\~"

logger = logging.getLogger(__name__)


class RuntimeConsoleInputRouter:
    """Maps normalized key events to console editing and navigation."""

    def __init__(
        self,
        console: DebugConsole,
        *,
        toggle_key: str = "f1",
        accepted_chars: str | None = None,
    ) -> None:
        normalized_toggle = toggle_key.strip().lower()
        if not normalized_toggle:
            raise ValueError("toggle_key must not be empty")
        chars = DEFAULT_ACCEPTED_CHARS if accepted_chars is None else accepted_chars
        if not chars:
            raise ValueError("accepted_chars must not be empty")
        self._console = console
        self._toggle_key = normalized_toggle
        self._accepted = frozenset(chars)

    @property
    def toggle_key(self) -> str:
        return self._toggle_key

    def accepts_text(self, text: str) -> bool:
        return bool(text) and all(ch in self._accepted for ch in text)

    def handle_key_event(self, event: KeyEvent) -> bool:
        """Apply one event to the console.

        The toggle key always flips visibility. Everything else is ignored
        while the console is hidden.
        """
        if event.event_type == "key_down" and event.value.strip().lower() == self._toggle_key:
            self._console.toggle_shown()
            return True
        if not self._console.shown():
            return False
        if event.event_type == "key_down":
            return self._handle_key_down(event.value.strip().lower())
        if event.event_type == "char":
            return self._console.receive_text_if(event.value, self.accepts_text)
        return False

    def handle_key_events(self, events: Iterable[KeyEvent]) -> int:
        consumed = 0
        for event in events:
            if self.handle_key_event(event):
                consumed += 1
        return consumed

    def _handle_key_down(self, key: str) -> bool:
        if key == "backspace":
            self._console.backspace()
            return True
        if key == "arrowup":
            self._console.up_deduped()
            return True
        if key == "arrowdown":
            self._console.down_deduped()
            return True
        logger.debug("console_key_ignored key=%s", key)
        return False


ConsoleInputRouter = RuntimeConsoleInputRouter

__all__ = ["ConsoleInputRouter", "DEFAULT_ACCEPTED_CHARS", "RuntimeConsoleInputRouter"]
