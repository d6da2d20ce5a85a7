"""Command-line style history, optionally persisted to a file.

Each item is stored on its own line in the form::

    :<unix nanoseconds>:<data length>:<extra length>:<extra><data>\\n
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import BinaryIO

_INT_RE = re.compile(rb"[+-]?[0-9]+")


class HistoryDecodeError(ValueError):
    """Raised when a history file cannot be decoded."""


@dataclass(frozen=True)
class HistoryItem:
    """A single command-line history entry."""

    text: str = ""
    time_ns: int = 0


def marshal_item(item):
    """Encode a history item into its on-disk form."""
    data = item.text.encode("utf-8")
    return b":%d:%d:0:%s\n" % (item.time_ns, len(data), data)


def _parse_int(chunk, what):
    if not _INT_RE.fullmatch(chunk):
        raise HistoryDecodeError(f"parsing {what}: invalid integer {chunk!r}")
    return int(chunk)


def _read_field(data, pos, what):
    end = data.find(b":", pos)
    if end == -1:
        raise HistoryDecodeError(f"reading {what}: unexpected EOF")
    return _parse_int(data[pos:end], what), end + 1


def _read_exact(data, pos, size, what):
    if size <= 0:
        return b"", pos
    end = pos + size
    if end > len(data):
        raise HistoryDecodeError(f"reading {what}: unexpected EOF")
    return data[pos:end], end


def _expect_byte(data, pos, want, what):
    if pos >= len(data):
        raise HistoryDecodeError(f"reading {what}: unexpected EOF")
    got = data[pos]
    if got != want:
        raise HistoryDecodeError(
            f"reading {what}: expected to read {want}, but read {got}"
        )
    return pos + 1


def _decode_item(data, pos):
    pos = _expect_byte(data, pos, ord(":"), "initial colon")
    nanos, pos = _read_field(data, pos, "timestamp")
    len_data, pos = _read_field(data, pos, "data length")
    len_extra, pos = _read_field(data, pos, "extra length")
    _, pos = _read_exact(data, pos, len_extra, "extra data")
    payload, pos = _read_exact(data, pos, len_data, "data")
    pos = _expect_byte(data, pos, ord("\n"), "final newline")
    return HistoryItem(text=payload.decode("utf-8", errors="replace"), time_ns=nanos), pos


def decode_history(stream: BinaryIO):
    """Decode all history items from a binary stream."""
    data = stream.read()
    if isinstance(data, str):
        data = data.encode("utf-8")

    items = []
    pos = 0
    while pos < len(data):
        try:
            item, pos = _decode_item(data, pos)
        except HistoryDecodeError as exc:
            raise HistoryDecodeError(f"{len(items)}th item: {exc}") from None
        items.append(item)

    return items


class CLHistory:
    """Shell-like command history with prefix-free prev/next navigation.

    If ``filename`` is empty or None the history lives only in memory;
    otherwise it is loaded from and appended to that file.
    """

    def __init__(self, filename=None):
        self._filename = filename or None
        self._items: list[HistoryItem] = []
        self._cur_idx = -1
        self._ephemeral = HistoryItem()

        try:
            self.load()
        except FileNotFoundError:
            pass

    def load(self):
        """Load the whole history from the file, if there is one."""
        if self._filename is None:
            return

        with open(self._filename, "rb") as f:
            items = decode_history(f)

        self._items = items
        self._reset_navigation()

    def add(self, text):
        """Append a new item, persisting it if a file is configured."""
        self._reset_navigation()

        item = HistoryItem(text=text, time_ns=time.time_ns())
        self._items.append(item)

        if self._filename is not None:
            with open(self._filename, "ab") as f:
                f.write(marshal_item(item))

    def reset(self):
        """Abort any history navigation in progress."""
        self._reset_navigation()

    def prev(self, text):
        """Return ``(item, has_more)`` for the previous differing item."""
        if self._cur_idx == -1:
            self._start_navigation(text)

        while True:
            self._cur_idx = max(self._cur_idx - 1, 0)
            has_more = self._cur_idx > 0
            item = self._item_at(self._cur_idx)
            if item.text != text or not has_more:
                return item, has_more

    def next(self, text):
        """Return ``(item, has_more)`` for the next differing item.

        Going past the newest item yields the text that was being edited
        when the navigation started.
        """
        if self._cur_idx == -1:
            self._start_navigation(text)

        while True:
            self._cur_idx = min(self._cur_idx + 1, len(self._items))
            has_more = self._cur_idx < len(self._items)
            item = self._item_at(self._cur_idx)
            if item.text != text or not has_more:
                return item, has_more

    def _start_navigation(self, text):
        self._cur_idx = len(self._items)
        self._ephemeral = HistoryItem(text=text)

    def _reset_navigation(self):
        self._cur_idx = -1
        self._ephemeral = HistoryItem()

    def _item_at(self, idx):
        if idx < len(self._items):
            return self._items[idx]
        if idx == len(self._items):
            return self._ephemeral
        raise IndexError(f"idx={idx}, len(items)={len(self._items)}")