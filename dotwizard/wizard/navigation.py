"""Back navigation.

The predecessor of a screen is not a stack pop: several forward transitions
skip screens depending on earlier answers, so going back recomputes the
predecessor from the accumulated choices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .choices import UserChoices
from .screens import KEYMAP_CATEGORY_SCREENS, LEARN_TOOL_SCREENS, Screen
from .state import WizardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationContext:
    is_termux: bool = False
    obsidian_installed: bool = False
    custom_selection_active: bool = False
    prev_screen: Screen = Screen.MAIN_MENU


_FIXED: dict[Screen, Screen] = {
    Screen.OS_SELECT: Screen.MAIN_MENU,
    Screen.TERMINAL_SELECT: Screen.OS_SELECT,
    Screen.FONT_SELECT: Screen.TERMINAL_SELECT,
    Screen.WM_SELECT: Screen.SHELL_SELECT,
    Screen.NVIM_SELECT: Screen.WM_SELECT,
    Screen.AI_TOOLS_SELECT: Screen.NVIM_SELECT,
    Screen.AI_FRAMEWORK_CONFIRM: Screen.AI_TOOLS_SELECT,
    Screen.AI_FRAMEWORK_PRESET: Screen.AI_FRAMEWORK_CONFIRM,
    Screen.AI_FRAMEWORK_CATEGORIES: Screen.AI_FRAMEWORK_PRESET,
    Screen.AI_FRAMEWORK_CATEGORY_ITEMS: Screen.AI_FRAMEWORK_CATEGORIES,
    Screen.GHOSTTY_WARNING: Screen.TERMINAL_SELECT,
    Screen.LEARN_MENU: Screen.MAIN_MENU,
    Screen.RESTORE_BACKUP: Screen.MAIN_MENU,
    Screen.RESTORE_CONFIRM: Screen.RESTORE_BACKUP,
    Screen.PROJECT_PATH: Screen.MAIN_MENU,
    Screen.PROJECT_RESULT: Screen.MAIN_MENU,
    Screen.SKILL_MENU: Screen.MAIN_MENU,
    Screen.KEYMAPS: Screen.KEYMAPS_MENU,
    Screen.KEYMAPS_TMUX: Screen.KEYMAPS_MENU,
    Screen.KEYMAPS_ZELLIJ: Screen.KEYMAPS_MENU,
    Screen.KEYMAPS_GHOSTTY: Screen.KEYMAPS_MENU,
    Screen.LAZYVIM_TOPIC: Screen.LEARN_LAZYVIM,
    Screen.TRAINER_LESSON: Screen.TRAINER_MENU,
    Screen.TRAINER_PRACTICE: Screen.TRAINER_MENU,
    Screen.TRAINER_BOSS: Screen.TRAINER_MENU,
    Screen.TRAINER_RESULT: Screen.TRAINER_MENU,
    Screen.TRAINER_BOSS_RESULT: Screen.TRAINER_MENU,
    Screen.PROJECT_STACK: Screen.PROJECT_PATH,
    Screen.PROJECT_MEMORY: Screen.PROJECT_STACK,
    Screen.PROJECT_OBSIDIAN_INSTALL: Screen.PROJECT_MEMORY,
    Screen.PROJECT_CONFIRM: Screen.PROJECT_CI,
    Screen.SKILL_BROWSE: Screen.SKILL_MENU,
    Screen.SKILL_INSTALL: Screen.SKILL_MENU,
    Screen.SKILL_REMOVE: Screen.SKILL_MENU,
    Screen.SKILL_RESULT: Screen.SKILL_MENU,
    Screen.SKILL_UPDATE: Screen.SKILL_MENU,
}

_RETURNS_TO_PREVIOUS = LEARN_TOOL_SCREENS | {
    Screen.KEYMAPS_MENU,
    Screen.LEARN_LAZYVIM,
    Screen.TRAINER_MENU,
}

_TOOL_BY_CATEGORY_SCREEN = {category: tool for tool, category in KEYMAP_CATEGORY_SCREENS.items()}


def _backup_confirm_predecessor(choices: UserChoices, ctx: NavigationContext) -> Screen:
    if ctx.is_termux:
        return Screen.NVIM_SELECT
    if choices.ai_tools and choices.install_ai_framework and ctx.custom_selection_active:
        return Screen.AI_FRAMEWORK_CATEGORIES
    if choices.ai_tools and choices.install_ai_framework:
        return Screen.AI_FRAMEWORK_PRESET
    if choices.ai_tools:
        return Screen.AI_FRAMEWORK_CONFIRM
    return Screen.AI_TOOLS_SELECT


def predecessor_of(screen: Screen, choices: UserChoices, ctx: NavigationContext) -> Screen | None:
    """Screen that ``esc`` returns to, or ``None`` where back is undefined."""
    if screen in _FIXED:
        return _FIXED[screen]
    if screen in _RETURNS_TO_PREVIOUS:
        return ctx.prev_screen
    if screen in _TOOL_BY_CATEGORY_SCREEN:
        return _TOOL_BY_CATEGORY_SCREEN[screen]
    if screen is Screen.SHELL_SELECT:
        if ctx.is_termux:
            return Screen.OS_SELECT
        if choices.terminal == "none":
            return Screen.TERMINAL_SELECT
        return Screen.FONT_SELECT
    if screen is Screen.BACKUP_CONFIRM:
        return _backup_confirm_predecessor(choices, ctx)
    if screen is Screen.PROJECT_ENGRAM:
        return Screen.PROJECT_MEMORY if ctx.obsidian_installed else Screen.PROJECT_OBSIDIAN_INSTALL
    if screen is Screen.PROJECT_CI:
        if choices.project_memory == "obsidian-brain":
            return Screen.PROJECT_ENGRAM
        return Screen.PROJECT_MEMORY
    return None


def navigation_context(state: WizardState) -> NavigationContext:
    return NavigationContext(
        is_termux=state.system.is_termux or state.choices.os == "termux",
        obsidian_installed=state.system.has_obsidian,
        custom_selection_active=state.ai_category_selected is not None,
        prev_screen=state.prev_screen,
    )


def _clear_step_field(state: WizardState) -> None:
    """Forget what the screen being left wrote into ``UserChoices``."""
    choices = state.choices
    screen = state.screen
    if screen is Screen.OS_SELECT:
        state.choices = UserChoices()
    elif screen is Screen.TERMINAL_SELECT:
        choices.terminal = ""
    elif screen is Screen.FONT_SELECT:
        choices.install_font = False
    elif screen is Screen.SHELL_SELECT:
        choices.shell = ""
    elif screen is Screen.WM_SELECT:
        choices.window_manager = ""
    elif screen is Screen.NVIM_SELECT:
        choices.install_nvim = False
    elif screen is Screen.AI_TOOLS_SELECT:
        choices.ai_tools = []
        state.ai_tool_selected = []
    elif screen is Screen.AI_FRAMEWORK_CONFIRM:
        choices.install_ai_framework = False
    elif screen is Screen.AI_FRAMEWORK_PRESET:
        choices.ai_framework_preset = ""
    elif screen is Screen.AI_FRAMEWORK_CATEGORIES:
        choices.ai_framework_modules = []
        state.ai_category_selected = None
    elif screen is Screen.PROJECT_MEMORY:
        choices.project_memory = ""
    elif screen is Screen.PROJECT_CI:
        choices.project_ci = ""
    elif screen in (Screen.LEARN_TERMINALS, Screen.LEARN_SHELLS, Screen.LEARN_WM, Screen.LEARN_NVIM):
        state.viewing_tool = ""


def go_back(state: WizardState) -> bool:
    """Move ``state`` to its predecessor in place. ``False`` if there is none."""
    origin = state.screen
    target = predecessor_of(origin, state.choices, navigation_context(state))
    if target is None:
        return False
    if target is origin:
        # A content screen whose remembered origin is itself.
        target = Screen.MAIN_MENU
    _clear_step_field(state)
    cursor = 0
    if origin is Screen.AI_FRAMEWORK_CATEGORY_ITEMS:
        cursor = state.selected_category
    elif origin is Screen.RESTORE_CONFIRM and state.selected_backup >= 0:
        cursor = state.selected_backup
    elif origin in _TOOL_BY_CATEGORY_SCREEN:
        cursor = state.keymap_category
    elif origin is Screen.LAZYVIM_TOPIC:
        cursor = state.lazyvim_topic
    logger.debug("back: %s -> %s", origin.name, target.name)
    state.go(target, cursor)
    return True


__all__ = ["NavigationContext", "go_back", "navigation_context", "predecessor_of"]
