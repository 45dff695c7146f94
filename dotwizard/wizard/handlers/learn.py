"""Tool descriptions, keymap reference and the LazyVim guide."""

from __future__ import annotations

from ...content.keymaps import keymap_categories
from ...content.lazyvim import LAZYVIM_TOPICS
from ...input.keys import ENTER, PAGE_DOWN, PAGE_UP, Key, is_down, is_up
from ..messages import Effect
from ..navigation import go_back
from ..options import BACK, Option
from ..screens import KEYMAP_CATEGORY_SCREENS, KEYMAP_TOOL_BY_CATEGORY, Screen
from ..state import WizardState
from ..viewport import PAGE_STEP, clamp_scroll, keymap_max_scroll, topic_max_scroll
from .common import option_list_handler

_KEYMAP_TOOL_SCREENS = {
    "neovim": Screen.KEYMAPS,
    "tmux": Screen.KEYMAPS_TMUX,
    "zellij": Screen.KEYMAPS_ZELLIJ,
    "ghostty": Screen.KEYMAPS_GHOSTTY,
}


def _resolve_tool(state: WizardState, option: Option) -> Effect | None:
    if option.value == BACK:
        go_back(state)
    else:
        state.viewing_tool = option.value
    return None


def _resolve_nvim(state: WizardState, option: Option) -> Effect | None:
    if option.value == "keymaps":
        state.go(Screen.KEYMAPS)
    elif option.value == "lazyvim":
        state.go(Screen.LEARN_LAZYVIM)
    else:
        return _resolve_tool(state, option)
    return None


def _resolve_keymaps_menu(state: WizardState, option: Option) -> Effect | None:
    screen = _KEYMAP_TOOL_SCREENS.get(option.value)
    if screen is not None:
        state.go(screen)
    elif option.value == BACK:
        go_back(state)
    return None


def _resolve_keymap_tool(state: WizardState, option: Option) -> Effect | None:
    if option.value == BACK:
        go_back(state)
        return None
    state.keymap_category = int(option.value)
    state.go(KEYMAP_CATEGORY_SCREENS[state.screen])
    return None


def _resolve_lazyvim(state: WizardState, option: Option) -> Effect | None:
    if option.value == BACK:
        go_back(state)
        return None
    state.lazyvim_topic = int(option.value)
    state.go(Screen.LAZYVIM_TOPIC)
    return None


def _scroll(state: WizardState, key: Key, maximum: int) -> bool:
    if is_up(key):
        delta = -1
    elif is_down(key):
        delta = 1
    elif key == PAGE_UP:
        delta = -PAGE_STEP
    elif key == PAGE_DOWN:
        delta = PAGE_STEP
    else:
        return False
    state.scroll = clamp_scroll(state.scroll + delta, maximum)
    return True


def handle_keymap_category(state: WizardState, key: Key) -> Effect | None:
    categories = keymap_categories(KEYMAP_TOOL_BY_CATEGORY[state.screen])
    if not 0 <= state.keymap_category < len(categories):
        go_back(state)
        return None
    maximum = keymap_max_scroll(categories[state.keymap_category], state.height)
    if _scroll(state, key, maximum):
        return None
    if key == ENTER or key.is_rune("q"):
        go_back(state)
    return None


def handle_lazyvim_topic(state: WizardState, key: Key) -> Effect | None:
    if not 0 <= state.lazyvim_topic < len(LAZYVIM_TOPICS):
        go_back(state)
        return None
    maximum = topic_max_scroll(LAZYVIM_TOPICS[state.lazyvim_topic], state.height)
    if _scroll(state, key, maximum):
        return None
    if key == ENTER or key.is_rune("q"):
        go_back(state)
    return None


HANDLERS = {
    Screen.LEARN_TERMINALS: option_list_handler(_resolve_tool),
    Screen.LEARN_SHELLS: option_list_handler(_resolve_tool),
    Screen.LEARN_WM: option_list_handler(_resolve_tool),
    Screen.LEARN_NVIM: option_list_handler(_resolve_nvim),
    Screen.KEYMAPS_MENU: option_list_handler(_resolve_keymaps_menu),
    Screen.KEYMAPS: option_list_handler(_resolve_keymap_tool),
    Screen.KEYMAPS_TMUX: option_list_handler(_resolve_keymap_tool),
    Screen.KEYMAPS_ZELLIJ: option_list_handler(_resolve_keymap_tool),
    Screen.KEYMAPS_GHOSTTY: option_list_handler(_resolve_keymap_tool),
    Screen.KEYMAP_CATEGORY: handle_keymap_category,
    Screen.KEYMAPS_TMUX_CATEGORY: handle_keymap_category,
    Screen.KEYMAPS_ZELLIJ_CATEGORY: handle_keymap_category,
    Screen.KEYMAPS_GHOSTTY_CATEGORY: handle_keymap_category,
    Screen.LEARN_LAZYVIM: option_list_handler(_resolve_lazyvim),
    Screen.LAZYVIM_TOPIC: handle_lazyvim_topic,
}


__all__ = ["HANDLERS", "handle_keymap_category", "handle_lazyvim_topic"]
