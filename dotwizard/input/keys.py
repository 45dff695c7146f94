"""Closed key vocabulary shared by every screen handler.

Raw terminal bytes are decoded into ``Key`` values: a named physical key (or a
printable rune) plus modifier flags. Handlers compare against ``Key`` values,
never against ad-hoc strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyName(Enum):
    """Physical keys the wizard distinguishes."""

    RUNE = "rune"
    SPACE = "space"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "pgup"
    PAGE_DOWN = "pgdown"


@dataclass(frozen=True)
class Key:
    """One decoded key press.

    ``char`` is set only for ``KeyName.RUNE``. Control chords are runes with
    ``ctrl=True`` and a lowercase letter in ``char``.
    """

    name: KeyName
    char: str = ""
    ctrl: bool = False

    @classmethod
    def rune(cls, char: str) -> Key:
        return cls(KeyName.RUNE, char)

    @classmethod
    def control(cls, letter: str) -> Key:
        return cls(KeyName.RUNE, letter.lower(), ctrl=True)

    def is_rune(self, char: str | None = None) -> bool:
        """Return whether this is an unmodified printable rune (optionally ``char``)."""
        if self.name is not KeyName.RUNE or self.ctrl:
            return False
        return char is None or self.char == char

    def is_ctrl(self, letter: str) -> bool:
        return self.name is KeyName.RUNE and self.ctrl and self.char == letter

    @property
    def printable(self) -> str | None:
        """Text this key inserts into a line buffer, if any."""
        if self.name is KeyName.SPACE:
            return " "
        if self.is_rune() and self.char.isprintable():
            return self.char
        return None

    @property
    def label(self) -> str:
        """Human-readable chord name, e.g. ``ctrl+w`` or ``enter``."""
        if self.name is KeyName.RUNE:
            base = self.char
        else:
            base = self.name.value
        if self.ctrl:
            base = f"ctrl+{base}"
        return base


SPACE = Key(KeyName.SPACE)
ENTER = Key(KeyName.ENTER)
TAB = Key(KeyName.TAB)
BACKSPACE = Key(KeyName.BACKSPACE)
DELETE = Key(KeyName.DELETE)
ESC = Key(KeyName.ESC)
UP = Key(KeyName.UP)
DOWN = Key(KeyName.DOWN)
LEFT = Key(KeyName.LEFT)
RIGHT = Key(KeyName.RIGHT)
HOME = Key(KeyName.HOME)
END = Key(KeyName.END)
PAGE_UP = Key(KeyName.PAGE_UP)
PAGE_DOWN = Key(KeyName.PAGE_DOWN)
CTRL_A = Key.control("a")
CTRL_B = Key.control("b")
CTRL_C = Key.control("c")
CTRL_D = Key.control("d")
CTRL_E = Key.control("e")
CTRL_F = Key.control("f")
CTRL_U = Key.control("u")
CTRL_W = Key.control("w")


def is_up(key: Key) -> bool:
    """Return whether ``key`` moves a list cursor up (arrow or vim ``k``)."""
    return key == UP or key.is_rune("k")


def is_down(key: Key) -> bool:
    """Return whether ``key`` moves a list cursor down (arrow or vim ``j``)."""
    return key == DOWN or key.is_rune("j")


def is_activate(key: Key) -> bool:
    """Return whether ``key`` resolves the option under the cursor."""
    return key == ENTER or key == SPACE


__all__ = [
    "BACKSPACE",
    "CTRL_A",
    "CTRL_B",
    "CTRL_C",
    "CTRL_D",
    "CTRL_E",
    "CTRL_F",
    "CTRL_U",
    "CTRL_W",
    "DELETE",
    "DOWN",
    "END",
    "ENTER",
    "ESC",
    "HOME",
    "Key",
    "KeyName",
    "LEFT",
    "PAGE_DOWN",
    "PAGE_UP",
    "RIGHT",
    "SPACE",
    "TAB",
    "UP",
    "is_activate",
    "is_down",
    "is_up",
]
