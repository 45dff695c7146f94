"""ANSI-aware width measurement and clipping for rendered rows."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1
    # Keep trailing resets so clipped styles do not leak into the next row.
    while i < n:
        match = ANSI_ESCAPE_RE.match(text, i) if text[i] == "\x1b" else None
        if match is None:
            i += 1
            continue
        out.append(match.group(0))
        i = match.end()

    return "".join(out)


__all__ = ["ANSI_ESCAPE_RE", "char_display_width", "clip_ansi_line", "display_width", "strip_ansi"]
