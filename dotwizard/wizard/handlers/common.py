"""Shared list-navigation helpers for screen handlers.

Handlers receive the already-cloned state, mutate it in place, and return
an optional effect.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ...input.keys import BACKSPACE, Key, is_activate, is_down, is_up
from ..messages import Effect
from ..navigation import go_back
from ..options import Option, move_cursor, screen_options
from ..state import WizardState

Handler = Callable[[WizardState, Key], "Effect | None"]
OptionResolver = Callable[[WizardState, Option], "Effect | None"]


def move_in(state: WizardState, rows: Sequence[object], key: Key) -> bool:
    """Apply up/down to ``state.cursor``; ``True`` if ``key`` was a move."""
    if is_up(key):
        state.cursor = move_cursor(rows, state.cursor, -1)
        return True
    if is_down(key):
        state.cursor = move_cursor(rows, state.cursor, 1)
        return True
    return False


def option_at_cursor(state: WizardState, options: Sequence[Option]) -> Option | None:
    if not 0 <= state.cursor < len(options):
        return None
    option = options[state.cursor]
    if option.separator:
        return None
    return option


def option_list_handler(resolve: OptionResolver, *, backspace_back: bool = True) -> Handler:
    """Build a handler for a plain option screen.

    Up/down move, enter (or space where it reaches the screen) resolves the
    row under the cursor through ``resolve``, backspace goes back.
    """

    def handle(state: WizardState, key: Key) -> Effect | None:
        options = screen_options(state)
        if move_in(state, options, key):
            return None
        if backspace_back and key == BACKSPACE:
            go_back(state)
            return None
        if is_activate(key):
            option = option_at_cursor(state, options)
            if option is not None:
                return resolve(state, option)
        return None

    return handle


__all__ = ["Handler", "OptionResolver", "move_in", "option_at_cursor", "option_list_handler"]
