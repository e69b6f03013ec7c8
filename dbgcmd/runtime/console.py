"""Debug console state machine."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from dbgcmd.api.console import ConfirmResult, ConsoleConfig, ParseFailed, Parsed
from dbgcmd.runtime.build_config import BUILD_CONFIG, BuildConfig
from dbgcmd.runtime.errors import PARSE_FAILURE_ERRORS, log_parse_failure
from dbgcmd.runtime.history import ConsoleHistory

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RuntimeConsole:
    """Entry buffer, history and gating for an in-app debug console.

    The host feeds character and editing events, optionally scrolls history
    with ``up``/``down`` and calls ``confirm`` with its own command type.

    Policies:

    * Editing while browsing history detaches into a fresh composition seeded
      with the browsed text. Stored history entries never change.
    * ``confirm`` archives the raw text whether or not it parses, and always
      clears the entry. Blank (empty or whitespace-only) entries are parsed
      but never archived.
    * When inactive, editing and navigation still update state; only
      ``confirm`` refuses, returning ``None``.
    """

    def __init__(
        self,
        *,
        history_capacity: int | None = None,
        active: bool = True,
        shown: bool = False,
        build: BuildConfig | None = None,
    ) -> None:
        self._build = build if build is not None else BUILD_CONFIG
        self._history = ConsoleHistory(history_capacity)
        self._entry = ""
        self._active = active
        self._shown = shown

    @classmethod
    def from_config(cls, config: ConsoleConfig, *, build: BuildConfig | None = None) -> RuntimeConsole:
        return cls(
            history_capacity=config.history_capacity,
            active=config.start_active,
            shown=config.start_shown,
            build=build,
        )

    @property
    def build(self) -> BuildConfig:
        return self._build

    @property
    def history_cursor(self) -> int | None:
        return self._history.cursor

    # Entry editing

    def entry(self) -> str:
        return self._entry

    def receive_char(self, ch: str) -> None:
        """Append one character to the entry."""
        self._detach()
        self._entry += ch

    def receive_text(self, text: str) -> None:
        self._detach()
        self._entry += text

    def receive_char_if(self, ch: str, predicate: Callable[[str], bool]) -> bool:
        """Append ``ch`` only if ``predicate`` accepts it. Return whether it did."""
        accepted = bool(predicate(ch))
        if accepted:
            self.receive_char(ch)
        return accepted

    def receive_text_if(self, text: str, predicate: Callable[[str], bool]) -> bool:
        accepted = bool(predicate(text))
        if accepted:
            self.receive_text(text)
        return accepted

    def backspace(self) -> None:
        self._detach()
        self._entry = self._entry[:-1]

    def set_entry(self, text: str) -> None:
        """Replace the whole entry and stop browsing history."""
        self._entry = text
        self._history.reset_cursor()

    def clear_entry(self) -> None:
        self._entry = ""
        self._history.reset_cursor()

    # History

    def up(self) -> bool:
        """Select the next older history entry. Clamps at the oldest."""
        moved = self._history.up()
        if moved:
            self._sync_entry()
        return moved

    def down(self) -> bool:
        """Select the next newer history entry, or return to an empty fresh entry."""
        moved = self._history.down()
        if moved:
            self._sync_entry()
        return moved

    def up_deduped(self) -> bool:
        """Like ``up``, but skips entries equal to the text shown before the call.

        Returns whether the visible entry changed.
        """
        starting = self._entry
        while self.up() and self._entry == starting:
            pass
        return self._entry != starting

    def down_deduped(self) -> bool:
        starting = self._entry
        while self.down() and self._entry == starting:
            pass
        return self._entry != starting

    def history(self) -> tuple[str, ...]:
        return self._history.entries()

    def history_deduped(self) -> tuple[str, ...]:
        return self._history.entries_deduped()

    def history_len(self) -> int:
        return len(self._history)

    def clear_history(self) -> None:
        self._history.clear()

    # Confirm

    def confirm(self, command_type: Callable[[str], T] | type[T]) -> ConfirmResult[T] | None:
        """Parse the entry into ``command_type`` and archive it.

        ``command_type`` is either a class with a ``parse`` classmethod or any
        callable taking the entry text. Returns ``None`` when the console is
        inactive, without touching any state. Otherwise the entry is archived
        and cleared first, then parsed: ``Parsed(value)`` on success,
        ``ParseFailed(error)`` when the parser raises one of
        ``PARSE_FAILURE_ERRORS``. Other exceptions propagate.
        """
        if not self.is_active():
            logger.debug(
                "console_confirm_disabled active=%s build_enabled=%s",
                self._active,
                self._build.console_enabled,
            )
            return None
        text = self._entry
        parse = _resolve_parser(command_type)
        self._archive(text)
        try:
            value = parse(text)
        except PARSE_FAILURE_ERRORS as exc:
            log_parse_failure(logger, "console_confirm_parse_failed", text=text)
            return ParseFailed(exc)
        logger.debug("console_confirm_parsed text=%r history_len=%d", text, len(self._history))
        return Parsed(value)

    # Gating

    def enabled(self) -> bool:
        """Whether the build allows the console at all.

        False under ``python -O`` unless the package was built with the
        force-enabled flag.
        """
        return self._build.console_enabled

    def is_active(self) -> bool:
        return self._active and self.enabled()

    def set_active(self, active: bool) -> None:
        self._active = bool(active)

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    # Visibility

    def shown(self) -> bool:
        return self._shown

    def show(self) -> None:
        self._shown = True

    def hide(self) -> None:
        self._shown = False

    def toggle_shown(self) -> None:
        self._shown = not self._shown

    def _detach(self) -> None:
        # The entry already holds a copy of the browsed text.
        self._history.reset_cursor()

    def _sync_entry(self) -> None:
        selected = self._history.selected()
        self._entry = "" if selected is None else selected

    def _archive(self, text: str) -> None:
        if text.strip():
            self._history.push(text)
        else:
            self._history.reset_cursor()
        self._entry = ""


def _resolve_parser(command_type: Any) -> Callable[[str], Any]:
    # Only class-level parsers count; an instance method named parse would
    # receive the text as self.
    if isinstance(command_type, type):
        try:
            raw = inspect.getattr_static(command_type, "parse")
        except AttributeError:
            return command_type
        if isinstance(raw, (classmethod, staticmethod)):
            return getattr(command_type, "parse")
    return command_type


__all__ = ["RuntimeConsole"]
