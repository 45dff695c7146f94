"""Static reference content: tool cards, keymap tables, LazyVim topics."""

from __future__ import annotations

from .keymaps import KEYMAPS_BY_TOOL, Keymap, KeymapCategory, keymap_categories
from .lazyvim import LAZYVIM_TOPICS, LazyVimTopic
from .tools import TOOL_GROUPS, ToolInfo, find_tool

__all__ = [
    "KEYMAPS_BY_TOOL",
    "Keymap",
    "KeymapCategory",
    "LAZYVIM_TOPICS",
    "LazyVimTopic",
    "TOOL_GROUPS",
    "ToolInfo",
    "find_tool",
    "keymap_categories",
]
