"""Tab completion over child directories."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..fs import expand_path, list_directories

NO_MATCHES_MESSAGE = "No matching directories"


@dataclass
class CompletionState:
    """Dropdown of candidate names with one highlighted row."""

    candidates: list[str] = field(default_factory=list)
    highlighted: int = 0

    def move(self, delta: int) -> None:
        """Move the highlight by ``delta``, clamped without wraparound."""
        if not self.candidates:
            self.highlighted = 0
            return
        self.highlighted = max(0, min(self.highlighted + delta, len(self.candidates) - 1))

    @property
    def current(self) -> str | None:
        if 0 <= self.highlighted < len(self.candidates):
            return self.candidates[self.highlighted]
        return None


def split_path_for_completion(text: str, home: str) -> tuple[str, str]:
    """Split buffer text into ``(parent_dir, prefix)``.

    ``""`` resolves to ``(home, "")``; a trailing separator lists the
    directory itself; otherwise the last component is the prefix.
    """
    expanded = expand_path(text, home)
    if not expanded:
        return home, ""
    if expanded.endswith("/"):
        return os.path.normpath(expanded), ""
    parent = os.path.dirname(expanded) or "."
    return parent, os.path.basename(expanded)


def find_candidates(text: str, home: str, show_hidden: bool) -> list[str]:
    parent, prefix = split_path_for_completion(text, home)
    return list_directories(parent, prefix, show_hidden)


def splice_completion(text: str, name: str, home: str) -> str:
    """Replace the prefix span (text after the last separator) with ``name/``."""
    if not text:
        return os.path.join(home, name) + "/"
    cut = text.rfind("/")
    return text[:cut + 1] + name + "/"


__all__ = [
    "CompletionState",
    "NO_MATCHES_MESSAGE",
    "find_candidates",
    "splice_completion",
    "split_path_for_completion",
]
