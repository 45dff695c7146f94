"""Rune-addressable single-line text buffer with a clamped cursor."""

from __future__ import annotations

from dataclasses import dataclass, field

PATH_SEPARATOR = "/"


@dataclass
class LineBuffer:
    """Editable text stored as one ``str`` per code point.

    Every mutation re-clamps ``cursor`` into ``[0, len(runes)]``.
    """

    runes: list[str] = field(default_factory=list)
    cursor: int = 0

    def __post_init__(self) -> None:
        self._clamp()

    @classmethod
    def from_text(cls, text: str) -> LineBuffer:
        """Build a buffer holding ``text`` with the cursor at the end."""
        runes = list(text)
        return cls(runes=runes, cursor=len(runes))

    @property
    def text(self) -> str:
        return "".join(self.runes)

    def __len__(self) -> int:
        return len(self.runes)

    def _clamp(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.runes)))

    def set_text(self, text: str) -> None:
        """Replace the contents and move the cursor to the end."""
        self.runes = list(text)
        self.cursor = len(self.runes)

    def insert(self, text: str) -> None:
        self._clamp()
        chars = list(text)
        self.runes[self.cursor:self.cursor] = chars
        self.cursor += len(chars)
        self._clamp()

    def backspace(self) -> None:
        """Delete the rune before the cursor; no-op at the start."""
        self._clamp()
        if self.cursor == 0:
            return
        del self.runes[self.cursor - 1]
        self.cursor -= 1
        self._clamp()

    def delete(self) -> None:
        """Delete the rune under the cursor; no-op at the end."""
        self._clamp()
        if self.cursor < len(self.runes):
            del self.runes[self.cursor]
        self._clamp()

    def move_left(self) -> None:
        self.cursor -= 1
        self._clamp()

    def move_right(self) -> None:
        self.cursor += 1
        self._clamp()

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.runes)

    def clear(self) -> None:
        self.runes = []
        self.cursor = 0

    def delete_word(self) -> None:
        """Delete back to the previous path separator.

        Separators directly before the cursor are skipped first, then the word
        is removed up to (not including) the separator that precedes it.
        """
        self._clamp()
        if self.cursor == 0:
            return
        pos = self.cursor - 1
        while pos > 0 and self.runes[pos] == PATH_SEPARATOR:
            pos -= 1
        while pos > 0 and self.runes[pos - 1] != PATH_SEPARATOR:
            pos -= 1
        del self.runes[pos:self.cursor]
        self.cursor = pos
        self._clamp()


__all__ = ["LineBuffer", "PATH_SEPARATOR"]
