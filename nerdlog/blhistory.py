"""Browser-like history: go back and forth, adding truncates the forward part."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HistoryItem:
    """A single entry in the browser-like history."""

    text: str
    time: datetime = field(default_factory=datetime.now)


class BLHistory:
    """In-memory history that behaves like a browser's back/forward list.

    Adding a new item while positioned somewhere in the middle drops all
    the items that were newer than the current one.
    """

    def __init__(self):
        self._items: list[HistoryItem] = []
        self._cur_idx = 0

    def add(self, text):
        """Add a new item right after the current one and make it current."""
        if self._items and self._cur_idx < len(self._items) - 1:
            del self._items[self._cur_idx + 1:]

        self._items.append(HistoryItem(text=text))
        self._cur_idx = len(self._items) - 1

    def prev(self):
        """Step back; return the new current item, or None at the start."""
        if self._cur_idx == 0:
            return None

        self._cur_idx -= 1
        return self._items[self._cur_idx]

    def next(self):
        """Step forward; return the new current item, or None at the end."""
        if self._cur_idx >= len(self._items) - 1:
            return None

        self._cur_idx += 1
        return self._items[self._cur_idx]