"""Welcome, main menu and the learn hub."""

from __future__ import annotations

from ...input.keys import ENTER, Key
from ...pathinput.editor import PathEditorState
from ..messages import Effect
from ..navigation import go_back
from ..options import BACK, Option
from ..screens import Screen
from ..state import WizardState
from .common import option_list_handler
from .install import os_cursor


def handle_welcome(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER:
        state.go(Screen.MAIN_MENU)
    return None


def enter_project_flow(state: WizardState) -> None:
    """Prefill the path with the working directory and forget the last project."""
    state.path_editor = PathEditorState.with_text(state.cwd, state.path_editor.show_hidden)
    state.choices.reset_project()
    state.project_log_lines = []
    state.error_message = ""
    state.go(Screen.PROJECT_PATH)


def enter_trainer(state: WizardState) -> None:
    state.trainer_session = None
    state.trainer_cursor = 0
    state.trainer_input = ""
    state.trainer_message = ""
    state.prev_screen = Screen.LEARN_MENU
    state.go(Screen.TRAINER_MENU)


def _resolve_main_menu(state: WizardState, option: Option) -> Effect | None:
    value = option.value
    if value == "install":
        state.go(Screen.OS_SELECT, os_cursor(state))
    elif value == "learn":
        state.go(Screen.LEARN_MENU)
    elif value == "restore" and state.available_backups:
        state.selected_backup = -1
        state.go(Screen.RESTORE_BACKUP)
    elif value == "project":
        enter_project_flow(state)
    elif value == "skills":
        state.go(Screen.SKILL_MENU)
    elif value == "exit":
        state.quitting = True
    return None


def _resolve_learn_menu(state: WizardState, option: Option) -> Effect | None:
    value = option.value
    if value == "tools":
        state.prev_screen = Screen.LEARN_MENU
        state.viewing_tool = ""
        state.go(Screen.LEARN_TERMINALS)
    elif value == "keymaps":
        state.prev_screen = Screen.LEARN_MENU
        state.go(Screen.KEYMAPS_MENU)
    elif value == "lazyvim":
        state.prev_screen = Screen.LEARN_MENU
        state.go(Screen.LEARN_LAZYVIM)
    elif value == "trainer":
        enter_trainer(state)
    elif value == BACK:
        go_back(state)
    return None


HANDLERS = {
    Screen.WELCOME: handle_welcome,
    Screen.MAIN_MENU: option_list_handler(_resolve_main_menu, backspace_back=False),
    Screen.LEARN_MENU: option_list_handler(_resolve_learn_menu),
}


__all__ = ["HANDLERS", "enter_project_flow", "enter_trainer"]
