"""Helpers for text carrying inline terminal colour tags like ``[red]``."""

from __future__ import annotations


def clear_tview_formatting(text):
    """Remove formatting tags such as ``[red]`` or ``[-]`` from ``text``.

    ``[[`` yields a literal ``[``, and escaped tags such as ``[red[]``
    come out as ``[red]``.
    """
    out = []
    in_tag = False
    escaped = False
    tag_start = 0
    size = len(text)
    i = 0

    while i < size:
        c = text[i]
        following = text[i + 1] if i + 1 < size else ""

        if in_tag:
            if c == "]":
                if escaped:
                    out.append("[" + text[tag_start:i - 1] + "]")
                    escaped = False
                in_tag = False
            elif c == "[" and following == "]":
                escaped = True
        elif c == "[":
            if following == "[":
                out.append("[")
                i += 1
            else:
                in_tag = True
                tag_start = i + 1
        else:
            out.append(c)

        i += 1

    return "".join(out)


def highlight_rune(text, index, prefix, suffix):
    """Wrap the character at ``index`` in ``prefix`` and ``suffix``.

    An out-of-range index leaves the text unchanged.
    """
    if index < 0 or index >= len(text):
        return text
    return text[:index] + prefix + text[index] + suffix + text[index + 1:]