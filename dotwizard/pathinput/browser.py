"""Drill-in/drill-out directory navigator rooted at one absolute path.

Rows are synthesized as ``[select this directory, ../, children...]``.
Navigation never touches the edited text until the root is committed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..fs import expand_path, list_directories

SELECT_ROW = 0
PARENT_ROW = 1
FIXED_ROWS = 2


def resolve_browser_root(text: str, home: str) -> str:
    """Return the directory the browser should open at.

    Uses the expanded buffer (or ``home`` when blank), walking up to the
    nearest existing ancestor when it is not a directory.
    """
    candidate = expand_path(text.strip(), home) or home
    candidate = os.path.abspath(candidate)
    while not os.path.isdir(candidate):
        parent = os.path.dirname(candidate)
        if parent == candidate:
            break
        candidate = parent
    return candidate


@dataclass
class BrowserState:
    root: str
    entries: list[str] = field(default_factory=list)
    cursor: int = 0

    @classmethod
    def open(cls, text: str, home: str, show_hidden: bool) -> BrowserState:
        root = resolve_browser_root(text, home)
        return cls(root=root, entries=list_directories(root, "", show_hidden))

    @property
    def row_count(self) -> int:
        return len(self.entries) + FIXED_ROWS

    def move(self, delta: int) -> None:
        self.cursor = max(0, min(self.cursor + delta, self.row_count - 1))

    def _reroot(self, root: str, show_hidden: bool) -> None:
        self.root = root
        self.entries = list_directories(root, "", show_hidden)
        self.cursor = 0

    def go_parent(self, show_hidden: bool) -> bool:
        """Re-root at the parent directory; ``False`` at the filesystem root."""
        parent = os.path.dirname(self.root)
        if parent == self.root:
            return False
        self._reroot(parent, show_hidden)
        return True

    def drill_into(self, index: int, show_hidden: bool) -> bool:
        if not 0 <= index < len(self.entries):
            return False
        self._reroot(os.path.join(self.root, self.entries[index]), show_hidden)
        return True

    def relist(self, show_hidden: bool) -> None:
        self._reroot(self.root, show_hidden)

    def row_label(self, row: int) -> str:
        if row == SELECT_ROW:
            return "Select this directory"
        if row == PARENT_ROW:
            return "../"
        return self.entries[row - FIXED_ROWS] + "/"


__all__ = [
    "BrowserState",
    "FIXED_ROWS",
    "PARENT_ROW",
    "SELECT_ROW",
    "resolve_browser_root",
]
