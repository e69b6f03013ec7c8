"""Confirmed-entry history with shell-style cursor navigation."""

from __future__ import annotations

from collections import deque
from itertools import groupby


class ConsoleHistory:
    """Ordered confirmed entries, oldest first, with a browse cursor.

    The cursor is ``None`` while the user composes a fresh entry and an index
    into the stored entries while browsing. ``up`` moves toward older entries
    and clamps at the oldest; ``down`` moves toward newer entries and falls
    off the newest end back to ``None``.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("history capacity must be >= 1")
        self._entries: deque[str] = deque(maxlen=capacity)
        self._cursor: int | None = None

    @property
    def capacity(self) -> int | None:
        return self._entries.maxlen

    @property
    def cursor(self) -> int | None:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def entries_deduped(self) -> tuple[str, ...]:
        """Return entries with consecutive repeats collapsed."""
        return tuple(text for text, _group in groupby(self._entries))

    def selected(self) -> str | None:
        """Return the entry under the cursor, or None while not browsing."""
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def push(self, text: str) -> None:
        """Append one entry as the newest and stop browsing."""
        self._entries.append(text)
        self._cursor = None

    def reset_cursor(self) -> None:
        self._cursor = None

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = None

    def up(self) -> bool:
        """Move cursor toward older entries. Return whether it moved."""
        if not self._entries:
            return False
        if self._cursor is None:
            self._cursor = len(self._entries) - 1
            return True
        if self._cursor > 0:
            self._cursor -= 1
            return True
        return False

    def down(self) -> bool:
        """Move cursor toward newer entries. Return whether it moved."""
        if self._cursor is None:
            return False
        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
        else:
            self._cursor = None
        return True


__all__ = ["ConsoleHistory"]
