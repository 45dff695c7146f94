"""Scroll geometry shared by scrolling handlers and the renderer."""

from __future__ import annotations

from ..content.keymaps import KeymapCategory
from ..content.lazyvim import LazyVimTopic

PAGE_STEP = 10


def keymap_rows(height: int) -> int:
    """Keymap rows visible below the title, description and help lines."""
    return max(5, height - 9)


def keymap_max_scroll(category: KeymapCategory, height: int) -> int:
    return max(0, len(category.keymaps) - keymap_rows(height))


def topic_rows(height: int) -> int:
    return max(10, height - 8)


def topic_line_count(topic: LazyVimTopic) -> int:
    """Rendered height of a topic: body, code block and surrounding chrome."""
    code_lines = topic.code.count("\n") + 1 if topic.code else 0
    return len(topic.body) + code_lines + 6


def topic_max_scroll(topic: LazyVimTopic, height: int) -> int:
    return max(0, topic_line_count(topic) - topic_rows(height))


def clamp_scroll(scroll: int, maximum: int) -> int:
    return max(0, min(scroll, maximum))


def follow_cursor(cursor: int, offset: int, visible: int) -> int:
    """Smallest shift of ``offset`` that keeps ``cursor`` inside the window."""
    if visible <= 0:
        return 0
    if cursor < offset:
        return cursor
    if cursor >= offset + visible:
        return cursor - visible + 1
    return offset


__all__ = [
    "PAGE_STEP",
    "clamp_scroll",
    "follow_cursor",
    "keymap_max_scroll",
    "keymap_rows",
    "topic_line_count",
    "topic_max_scroll",
    "topic_rows",
]
