"""Install wizard screens and the install run.

Each option resolver writes the choice its screen owns and moves forward.
The run itself is a chain: every ``StepFinished`` either fails into ERROR or
requests the next step.
"""

from __future__ import annotations

import logging

from ...input.keys import BACKSPACE, ENTER, Key, is_activate
from ...selection.categories import (
    MODULE_CATEGORIES,
    collect_selected_features,
    ensure_category,
    is_agent_teams_lite_selected,
)
from ...selection.model import EntryKind
from ...services.system import OS_DEBIAN, OS_LINUX, OS_TERMUX
from ..choices import UserChoices
from ..messages import (
    Effect,
    ExistingConfigsScanned,
    RunInstallStep,
    ScanExistingConfigs,
    StepFinished,
    StepProgress,
)
from ..navigation import go_back
from ..options import AI_TOOLS, CONFIRM, LEARN, OS_OPTIONS, Option, screen_selection
from ..screens import Screen
from ..state import WizardState
from ..steps import StepStatus, build_install_steps
from .common import move_in, option_list_handler

logger = logging.getLogger(__name__)


def _is_termux(state: WizardState) -> bool:
    return state.system.is_termux or state.choices.os == OS_TERMUX


def _learn(state: WizardState, screen: Screen) -> None:
    state.prev_screen = state.screen
    state.viewing_tool = ""
    state.go(screen)


def os_cursor(state: WizardState) -> int:
    """Index of the detected OS among the OS options."""
    detected = state.system.wizard_os
    for index, option in enumerate(OS_OPTIONS):
        if option.value == detected:
            return index
    return 0


# Forward flow


def proceed_to_backup_or_install(state: WizardState) -> Effect:
    """Ask for the existing-config scan; its reply picks backup or install."""
    return ScanExistingConfigs(state.screen)


def start_install(state: WizardState) -> Effect | None:
    state.steps = build_install_steps(state.choices, state.system, state.existing_configs)
    state.current_step = 0
    state.log_lines = []
    state.error_message = ""
    state.show_details = False
    state.install_started_at = state.now
    state.install_total_time = 0.0
    state.go(Screen.INSTALLING)
    logger.info("install started with %d steps", len(state.steps))
    return run_next_step(state)


def run_next_step(state: WizardState) -> Effect | None:
    if state.current_step >= len(state.steps):
        state.install_total_time = max(0.0, state.now - state.install_started_at)
        state.go(Screen.COMPLETE)
        logger.info("install complete in %.1fs", state.install_total_time)
        return None
    step = state.steps[state.current_step]
    step.status = StepStatus.RUNNING
    return RunInstallStep(
        Screen.INSTALLING,
        step.id,
        step.name,
        step.interactive,
        state.choices,
        tuple(state.existing_configs),
    )


def _resolve_os(state: WizardState, option: Option) -> Effect | None:
    state.choices.os = option.value
    if option.value == OS_TERMUX:
        state.choices.terminal = "none"
        state.choices.install_font = True
        state.go(Screen.SHELL_SELECT)
    else:
        state.go(Screen.TERMINAL_SELECT)
    return None


def _needs_ghostty_warning(state: WizardState) -> bool:
    system = state.system
    return state.choices.os == OS_LINUX and system.os == OS_DEBIAN and not system.has_ghostty


def _resolve_terminal(state: WizardState, option: Option) -> Effect | None:
    if option.value == LEARN:
        _learn(state, Screen.LEARN_TERMINALS)
        return None
    state.choices.terminal = option.value
    if option.value == "ghostty" and _needs_ghostty_warning(state):
        state.go(Screen.GHOSTTY_WARNING)
    elif option.value != "none":
        state.go(Screen.FONT_SELECT)
    else:
        state.go(Screen.SHELL_SELECT)
    return None


def _resolve_ghostty_warning(state: WizardState, option: Option) -> Effect | None:
    if option.value == "continue":
        state.go(Screen.FONT_SELECT)
    elif option.value == "change":
        state.choices.terminal = ""
        state.go(Screen.TERMINAL_SELECT)
    else:
        state.go(Screen.MAIN_MENU)
    return None


def _resolve_font(state: WizardState, option: Option) -> Effect | None:
    state.choices.install_font = option.value == "yes"
    state.go(Screen.SHELL_SELECT)
    return None


def _resolve_shell(state: WizardState, option: Option) -> Effect | None:
    if option.value == LEARN:
        _learn(state, Screen.LEARN_SHELLS)
        return None
    state.choices.shell = option.value
    state.go(Screen.WM_SELECT)
    return None


def _resolve_wm(state: WizardState, option: Option) -> Effect | None:
    if option.value == LEARN:
        _learn(state, Screen.LEARN_WM)
        return None
    state.choices.window_manager = option.value
    state.go(Screen.NVIM_SELECT)
    return None


def _resolve_nvim(state: WizardState, option: Option) -> Effect | None:
    if option.value == LEARN:
        _learn(state, Screen.LEARN_NVIM)
        return None
    if option.value == "keymaps":
        state.prev_screen = Screen.NVIM_SELECT
        state.go(Screen.KEYMAPS)
        return None
    if option.value == "lazyvim":
        state.prev_screen = Screen.NVIM_SELECT
        state.go(Screen.LEARN_LAZYVIM)
        return None
    state.choices.install_nvim = option.value == "yes"
    if _is_termux(state):
        return proceed_to_backup_or_install(state)
    state.ai_tool_selected = [False] * len(AI_TOOLS)
    state.go(Screen.AI_TOOLS_SELECT)
    return None


def _resolve_framework_confirm(state: WizardState, option: Option) -> Effect | None:
    if option.value == "yes":
        state.choices.install_ai_framework = True
        state.go(Screen.AI_FRAMEWORK_PRESET)
        return None
    state.choices.install_ai_framework = False
    return proceed_to_backup_or_install(state)


def _resolve_preset(state: WizardState, option: Option) -> Effect | None:
    if option.value == "custom":
        state.choices.ai_framework_preset = ""
        state.ai_category_selected = {}
        state.go(Screen.AI_FRAMEWORK_CATEGORIES)
        return None
    state.choices.ai_framework_preset = option.value
    state.choices.ai_framework_modules = []
    state.ai_category_selected = None
    return proceed_to_backup_or_install(state)


def _resolve_category(state: WizardState, option: Option) -> Effect | None:
    selection = state.ai_category_selected
    if selection is None:
        selection = state.ai_category_selected = {}
    if option.value == CONFIRM:
        features = collect_selected_features(selection)
        teams = is_agent_teams_lite_selected(selection)
        state.choices.ai_framework_modules = features
        state.choices.install_agent_teams_lite = teams
        if not features and not teams:
            state.choices.install_ai_framework = False
        return proceed_to_backup_or_install(state)
    for index, category in enumerate(MODULE_CATEGORIES):
        if category.id == option.value:
            state.selected_category = index
            ensure_category(selection, category)
            state.go(Screen.AI_FRAMEWORK_CATEGORY_ITEMS)
            break
    return None


def _resolve_backup_confirm(state: WizardState, option: Option) -> Effect | None:
    if option.value == "cancel":
        state.choices = UserChoices()
        state.go(Screen.MAIN_MENU)
        return None
    state.choices.create_backup = option.value == "backup"
    return start_install(state)


# Multi-select screens


def handle_ai_tools(state: WizardState, key: Key) -> Effect | None:
    if len(state.ai_tool_selected) != len(AI_TOOLS):
        state.ai_tool_selected = [False] * len(AI_TOOLS)
    selection = screen_selection(state)
    if selection is None:
        return None
    if move_in(state, selection.entries(), key):
        return None
    if key == BACKSPACE:
        go_back(state)
        return None
    if not is_activate(key):
        return None
    entry = selection.toggle(state.cursor)
    if entry is None or entry.kind is not EntryKind.CONFIRM:
        return None
    state.choices.ai_tools = [AI_TOOLS[index][0] for index in selection.selected_indices()]
    if not state.choices.ai_tools:
        state.choices.install_ai_framework = False
        return proceed_to_backup_or_install(state)
    state.go(Screen.AI_FRAMEWORK_CONFIRM)
    return None


def handle_category_items(state: WizardState, key: Key) -> Effect | None:
    if not 0 <= state.selected_category < len(MODULE_CATEGORIES):
        go_back(state)
        return None
    if state.ai_category_selected is None:
        state.ai_category_selected = {}
    ensure_category(state.ai_category_selected, MODULE_CATEGORIES[state.selected_category])
    selection = screen_selection(state)
    if selection is None:
        return None
    if move_in(state, selection.entries(), key):
        return None
    if key == BACKSPACE:
        go_back(state)
        return None
    if key.is_rune("a"):
        selection.toggle_all()
        return None
    if is_activate(key):
        entry = selection.toggle(state.cursor)
        if entry is not None and entry.kind is EntryKind.BACK:
            go_back(state)
    return None


# Terminal screens


def handle_complete(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER:
        state.quitting = True
    return None


def handle_error(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER:
        state.quitting = True
    elif key.is_rune("r"):
        state.error_message = ""
        state.go(Screen.WELCOME)
    return None


def handle_installing(state: WizardState, key: Key) -> Effect | None:
    return None


# Completion messages


def on_configs_scanned(state: WizardState, msg: ExistingConfigsScanned) -> Effect | None:
    state.existing_configs = list(msg.configs)
    if state.existing_configs:
        state.go(Screen.BACKUP_CONFIRM)
        return None
    return start_install(state)


def on_step_progress(state: WizardState, msg: StepProgress) -> Effect | None:
    state.add_log_line(msg.line)
    return None


def on_step_finished(state: WizardState, msg: StepFinished) -> Effect | None:
    for step in state.steps:
        if step.id != msg.step_id:
            continue
        if msg.error:
            step.status = StepStatus.FAILED
            step.error = msg.error
            state.error_message = f"Step '{step.name}' failed:\n{msg.error}"
            logger.warning("install step %s failed: %s", step.id, msg.error)
            state.go(Screen.ERROR)
            return None
        step.status = StepStatus.DONE
        break
    else:
        logger.debug("finish for unknown step %s", msg.step_id)
        return None
    state.current_step += 1
    return run_next_step(state)


HANDLERS = {
    Screen.OS_SELECT: option_list_handler(_resolve_os),
    Screen.TERMINAL_SELECT: option_list_handler(_resolve_terminal),
    Screen.GHOSTTY_WARNING: option_list_handler(_resolve_ghostty_warning),
    Screen.FONT_SELECT: option_list_handler(_resolve_font),
    Screen.SHELL_SELECT: option_list_handler(_resolve_shell),
    Screen.WM_SELECT: option_list_handler(_resolve_wm),
    Screen.NVIM_SELECT: option_list_handler(_resolve_nvim),
    Screen.AI_TOOLS_SELECT: handle_ai_tools,
    Screen.AI_FRAMEWORK_CONFIRM: option_list_handler(_resolve_framework_confirm),
    Screen.AI_FRAMEWORK_PRESET: option_list_handler(_resolve_preset),
    Screen.AI_FRAMEWORK_CATEGORIES: option_list_handler(_resolve_category),
    Screen.AI_FRAMEWORK_CATEGORY_ITEMS: handle_category_items,
    Screen.BACKUP_CONFIRM: option_list_handler(_resolve_backup_confirm),
    Screen.INSTALLING: handle_installing,
    Screen.COMPLETE: handle_complete,
    Screen.ERROR: handle_error,
}


__all__ = [
    "HANDLERS",
    "on_configs_scanned",
    "on_step_finished",
    "on_step_progress",
    "os_cursor",
    "proceed_to_backup_or_install",
    "run_next_step",
    "start_install",
]
