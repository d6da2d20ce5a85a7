"""Sizing helpers for message boxes shown on a terminal screen.

Lengths are measured in UTF-8 bytes.
"""

from __future__ import annotations


def _byte_len(line):
    return len(line.encode("utf-8"))


def max_line_length(text):
    """Return the length of the longest line in ``text``."""
    return max(_byte_len(line) for line in text.split("\n"))


def num_lines(text, screen_width):
    """Return how many screen lines are needed to draw ``text``.

    Surrounding whitespace is ignored, long lines wrap at ``screen_width``,
    and every line, empty ones included, takes at least one screen line.
    """
    if screen_width <= 0:
        return 0

    return sum(
        max(-(-_byte_len(line) // screen_width), 1)
        for line in text.strip().split("\n")
    )


def optimal_message_view_size(screen_width, extra_width, extra_height, text):
    """Return ``(width, height)`` that best fits ``text`` on the screen.

    ``extra_width`` and ``extra_height`` cover borders, padding, buttons
    and any other elements around the text.
    """
    width = min(max_line_length(text) + extra_width, screen_width)
    height = extra_height + num_lines(text, screen_width - extra_width)
    return width, height