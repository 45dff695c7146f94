"""Modal path editor: typing, completion dropdown, and directory browser.

``PathEditor`` mutates a ``PathEditorState`` in place. The wizard hands it a
cloned state so the surrounding update stays value-in, value-out.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum

from ..input.key_registry import KeyBinding, KeyRegistry
from ..input.keys import (
    BACKSPACE,
    CTRL_A,
    CTRL_B,
    CTRL_E,
    CTRL_U,
    CTRL_W,
    DELETE,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    RIGHT,
    TAB,
    Key,
    is_down,
    is_up,
)
from ..fs import expand_path
from .browser import PARENT_ROW, SELECT_ROW, FIXED_ROWS, BrowserState
from .buffer import LineBuffer
from .completion import (
    NO_MATCHES_MESSAGE,
    CompletionState,
    find_candidates,
    splice_completion,
)

logger = logging.getLogger(__name__)

EMPTY_PATH_MESSAGE = "Path cannot be empty"


class PathMode(Enum):
    TYPING = "typing"
    COMPLETION = "completion"
    BROWSER = "browser"


@dataclass
class PathEditorState:
    """Line buffer plus the mode-specific overlays and a screen-local error."""

    buffer: LineBuffer = field(default_factory=LineBuffer)
    mode: PathMode = PathMode.TYPING
    completion: CompletionState | None = None
    browser: BrowserState | None = None
    show_hidden: bool = False
    error: str = ""

    @classmethod
    def with_text(cls, text: str, show_hidden: bool = False) -> PathEditorState:
        return cls(buffer=LineBuffer.from_text(text), show_hidden=show_hidden)

    @property
    def text(self) -> str:
        return self.buffer.text


@dataclass(frozen=True)
class PathEditResult:
    """Outcome of one key in the path editor.

    ``submitted`` carries the validated absolute directory on a successful
    submit. ``show_hidden_changed`` asks the caller to persist the preference.
    """

    submitted: str | None = None
    show_hidden_changed: bool = False


def validate_directory(text: str, home: str) -> tuple[str | None, str]:
    """Return ``(absolute_dir, "")`` or ``(None, error_message)``."""
    trimmed = text.strip()
    if not trimmed:
        return None, EMPTY_PATH_MESSAGE
    absolute = os.path.abspath(expand_path(trimmed, home))
    if not os.path.exists(absolute):
        return None, f"Directory not found: {absolute}"
    if not os.path.isdir(absolute):
        return None, f"Path is not a directory: {absolute}"
    return absolute, ""


class PathEditor:
    """Key dispatcher for one ``PathEditorState``."""

    def __init__(self, state: PathEditorState, home: str) -> None:
        self.state = state
        self.home = home
        self._result = PathEditResult()
        self._typing = KeyRegistry().register_bindings(
            KeyBinding((BACKSPACE,), self._edit(state.buffer.backspace)),
            KeyBinding((DELETE,), self._edit(state.buffer.delete)),
            KeyBinding((LEFT,), state.buffer.move_left),
            KeyBinding((RIGHT,), state.buffer.move_right),
            KeyBinding((HOME, CTRL_A), state.buffer.move_home),
            KeyBinding((END, CTRL_E), state.buffer.move_end),
            KeyBinding((CTRL_U,), self._edit(state.buffer.clear)),
            KeyBinding((CTRL_W,), self._edit(state.buffer.delete_word)),
            KeyBinding((TAB,), self.trigger_completion),
            KeyBinding((CTRL_B,), self.open_browser),
            KeyBinding((ENTER,), self.submit),
        )

    def _edit(self, action):
        def run() -> None:
            action()
            self.state.error = ""

        return run

    def handle_key(self, key: Key) -> PathEditResult:
        """Route ``key`` to the active mode and report what happened."""
        self._result = PathEditResult()
        mode = self.state.mode
        if mode is PathMode.COMPLETION:
            self._handle_completion_key(key)
        elif mode is PathMode.BROWSER:
            self._handle_browser_key(key)
        else:
            self._handle_typing_key(key)
        return self._result

    def close_overlay(self) -> bool:
        """Leave completion or browser mode with the buffer untouched."""
        if self.state.mode is PathMode.TYPING:
            return False
        self.state.mode = PathMode.TYPING
        self.state.completion = None
        self.state.browser = None
        return True

    # Typing mode

    def _handle_typing_key(self, key: Key) -> None:
        if self._typing.handles(key):
            self._typing.dispatch(key)
            return
        text = key.printable
        if text is not None:
            self.state.buffer.insert(text)
            self.state.error = ""

    def trigger_completion(self) -> None:
        state = self.state
        candidates = find_candidates(state.text, self.home, state.show_hidden)
        if not candidates:
            state.error = NO_MATCHES_MESSAGE
            return
        state.error = ""
        if len(candidates) == 1:
            self._commit_candidate(candidates[0])
            return
        state.completion = CompletionState(candidates=candidates, highlighted=0)
        state.mode = PathMode.COMPLETION

    def _commit_candidate(self, name: str) -> None:
        self.state.buffer.set_text(splice_completion(self.state.text, name, self.home))
        self.state.completion = None
        self.state.mode = PathMode.TYPING

    def open_browser(self) -> None:
        self.state.browser = BrowserState.open(self.state.text, self.home, self.state.show_hidden)
        self.state.mode = PathMode.BROWSER

    def submit(self) -> None:
        absolute, error = validate_directory(self.state.text, self.home)
        self.state.error = error
        if absolute is None:
            logger.debug("path submit rejected: %s", error)
            return
        self.state.buffer.set_text(absolute)
        self._result = PathEditResult(submitted=absolute)

    # Completion mode

    def _handle_completion_key(self, key: Key) -> None:
        completion = self.state.completion
        if completion is None:
            self.state.mode = PathMode.TYPING
            self._handle_typing_key(key)
            return
        if is_up(key):
            completion.move(-1)
        elif is_down(key):
            completion.move(1)
        elif key in (ENTER, TAB):
            name = completion.current
            if name is None:
                self.close_overlay()
            else:
                self._commit_candidate(name)
        elif key == ESC:
            self.close_overlay()
        else:
            self.close_overlay()
            self._handle_typing_key(key)

    # Browser mode

    def _handle_browser_key(self, key: Key) -> None:
        browser = self.state.browser
        if browser is None:
            self.state.mode = PathMode.TYPING
            return
        show_hidden = self.state.show_hidden
        if is_up(key):
            browser.move(-1)
        elif is_down(key):
            browser.move(1)
        elif key in (ENTER, RIGHT) or key.is_rune("l"):
            self._activate_browser_row(browser)
        elif key == LEFT or key.is_rune("h"):
            browser.go_parent(show_hidden)
        elif key.is_rune("."):
            self.state.show_hidden = not show_hidden
            browser.relist(self.state.show_hidden)
            self._result = PathEditResult(show_hidden_changed=True)
        elif key in (ESC, CTRL_B):
            self.close_overlay()

    def _activate_browser_row(self, browser: BrowserState) -> None:
        if browser.cursor == SELECT_ROW:
            self.state.buffer.set_text(browser.root)
            self.state.error = ""
            self.close_overlay()
        elif browser.cursor == PARENT_ROW:
            browser.go_parent(self.state.show_hidden)
        else:
            browser.drill_into(browser.cursor - FIXED_ROWS, self.state.show_hidden)


__all__ = [
    "EMPTY_PATH_MESSAGE",
    "PathEditResult",
    "PathEditor",
    "PathEditorState",
    "PathMode",
    "validate_directory",
]
