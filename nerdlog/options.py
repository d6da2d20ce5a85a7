"""Runtime-tunable UI options and their metadata."""

from __future__ import annotations

import dataclasses
import re
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _local_zone():
    return datetime.now().astimezone().tzinfo


@dataclass
class Options:
    """All the user-settable options."""

    timezone: tzinfo = field(default_factory=_local_zone)
    # How many log lines to fetch from each logstream in one query.
    max_num_lines: int = 250


class SharedOptions:
    """Thread-safe holder of an Options instance."""

    def __init__(self, options):
        self._lock = threading.Lock()
        self._options = options

    def get_timezone(self):
        with self._lock:
            return self._options.timezone

    def get_max_num_lines(self):
        with self._lock:
            return self._options.max_num_lines

    def get_all(self):
        """Return a copy of the current options."""
        with self._lock:
            return dataclasses.replace(self._options)

    def call(self, func):
        """Call ``func(options)`` under the lock and return its result."""
        with self._lock:
            return func(self._options)


@dataclass(frozen=True)
class OptionMeta:
    """How to read and write one option; ``alias_of`` names another option."""

    get: Optional[Callable[[Options], str]] = None
    set: Optional[Callable[[Options, str], None]] = None
    help: str = ""
    alias_of: str = ""


def _zone_name(tz):
    if tz is timezone.utc:
        return "UTC"
    key = getattr(tz, "key", None)
    return key if key else "Local"


def _load_zone(name):
    if name in ("", "UTC"):
        return timezone.utc
    if name == "Local":
        return _local_zone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone {name}") from exc


def _set_timezone(options, value):
    options.timezone = _load_zone(value)


def _set_max_num_lines(options, value):
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid number: {value!r}")
    num = int(value)
    if num < 2:
        raise ValueError("numlines must be at least 2")
    options.max_num_lines = num


ALL_OPTIONS: dict[str, OptionMeta] = {
    "timezone": OptionMeta(
        get=lambda o: _zone_name(o.timezone),
        set=_set_timezone,
        help="Timezone to use in the UI.",
    ),
    "maxnumlines": OptionMeta(
        get=lambda o: str(o.max_num_lines),
        set=_set_max_num_lines,
        help="How many log lines to fetch from each logstream in one query",
    ),
    "numlines": OptionMeta(alias_of="maxnumlines"),
}


def option_meta_by_name(name):
    """Return the metadata for an option, resolving aliases; None if unknown."""
    meta = ALL_OPTIONS.get(name)
    if meta is None:
        return None

    if meta.alias_of:
        target = ALL_OPTIONS.get(meta.alias_of)
        if target is None:
            raise RuntimeError(
                f"option {name} is defined as an alias of non-existing option {meta.alias_of}"
            )
        if target.alias_of:
            raise RuntimeError(
                f"option {name} is defined as an alias of another alias {meta.alias_of}"
            )
        meta = target

    return meta