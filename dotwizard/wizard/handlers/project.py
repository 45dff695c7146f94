"""Project initialization flow: path, stack, memory, CI, confirm and run."""

from __future__ import annotations

import logging

from ...fs import UNKNOWN_STACK, detect_stack
from ...input.keys import ENTER, Key
from ...pathinput.editor import PathEditor
from ..messages import Effect, InitProject, ProjectFinished, ProjectProgress, SaveShowHidden
from ..options import CONFIRM, PROJECT_STACKS, Option
from ..screens import Screen
from ..state import WizardState
from .common import option_list_handler

logger = logging.getLogger(__name__)


def stack_cursor(stack: str) -> int:
    for index, option in enumerate(PROJECT_STACKS):
        if option.value == stack:
            return index
    return 0


def handle_path(state: WizardState, key: Key) -> Effect | None:
    editor = PathEditor(state.path_editor, state.home)
    result = editor.handle_key(key)
    if result.submitted is not None:
        state.choices.project_path = result.submitted
        stack = detect_stack(result.submitted)
        state.choices.project_stack = "" if stack == UNKNOWN_STACK else stack
        logger.debug("project path %s, detected stack %s", result.submitted, stack)
        state.go(Screen.PROJECT_STACK, stack_cursor(stack))
        return None
    if result.show_hidden_changed:
        return SaveShowHidden(state.path_editor.show_hidden)
    return None


def _resolve_stack(state: WizardState, option: Option) -> Effect | None:
    state.choices.project_stack = option.value
    state.go(Screen.PROJECT_MEMORY)
    return None


def _resolve_memory(state: WizardState, option: Option) -> Effect | None:
    state.choices.project_memory = option.value
    if option.value != "obsidian-brain":
        state.go(Screen.PROJECT_CI)
    elif state.system.has_obsidian:
        state.go(Screen.PROJECT_ENGRAM)
    else:
        state.go(Screen.PROJECT_OBSIDIAN_INSTALL)
    return None


def _resolve_obsidian(state: WizardState, option: Option) -> Effect | None:
    state.choices.install_obsidian = option.value == "yes"
    state.go(Screen.PROJECT_ENGRAM)
    return None


def _resolve_engram(state: WizardState, option: Option) -> Effect | None:
    state.choices.project_engram = option.value == "yes"
    state.go(Screen.PROJECT_CI)
    return None


def _resolve_ci(state: WizardState, option: Option) -> Effect | None:
    state.choices.project_ci = option.value
    state.go(Screen.PROJECT_CONFIRM)
    return None


def _resolve_confirm(state: WizardState, option: Option) -> Effect | None:
    if option.value != CONFIRM:
        state.go(Screen.MAIN_MENU)
        return None
    state.choices.init_project = True
    state.project_log_lines = []
    state.error_message = ""
    state.go(Screen.PROJECT_INSTALLING)
    return InitProject(Screen.PROJECT_INSTALLING, state.choices)


def handle_result(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER:
        state.go(Screen.MAIN_MENU)
    return None


def handle_installing(state: WizardState, key: Key) -> Effect | None:
    return None


def on_progress(state: WizardState, msg: ProjectProgress) -> Effect | None:
    state.add_project_log_line(msg.line)
    return None


def on_finished(state: WizardState, msg: ProjectFinished) -> Effect | None:
    state.error_message = msg.error
    if msg.error:
        logger.warning("project init failed: %s", msg.error)
    state.go(Screen.PROJECT_RESULT)
    return None


HANDLERS = {
    Screen.PROJECT_PATH: handle_path,
    Screen.PROJECT_STACK: option_list_handler(_resolve_stack),
    Screen.PROJECT_MEMORY: option_list_handler(_resolve_memory),
    Screen.PROJECT_OBSIDIAN_INSTALL: option_list_handler(_resolve_obsidian),
    Screen.PROJECT_ENGRAM: option_list_handler(_resolve_engram),
    Screen.PROJECT_CI: option_list_handler(_resolve_ci),
    Screen.PROJECT_CONFIRM: option_list_handler(_resolve_confirm),
    Screen.PROJECT_INSTALLING: handle_installing,
    Screen.PROJECT_RESULT: handle_result,
}


__all__ = ["HANDLERS", "handle_path", "on_finished", "on_progress", "stack_cursor"]
