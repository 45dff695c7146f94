"""Skill manager screens.

Browse, install and remove share one catalog load. The install and remove
selections are sized from the candidates when the catalog arrives.
"""

from __future__ import annotations

import logging

from ...input.keys import ENTER, Key, is_activate
from ...selection.model import EntryKind
from ...skills.layout import browse_entries
from ..messages import (
    Effect,
    InstallSkills,
    LoadSkills,
    RemoveSkills,
    SkillActionFinished,
    SkillCatalogUpdated,
    SkillsLoaded,
    UpdateSkillCatalog,
)
from ..navigation import go_back
from ..options import BACK, Option, screen_selection, skill_candidates
from ..screens import Screen
from ..state import WizardState
from .common import move_in, option_list_handler

logger = logging.getLogger(__name__)

CATALOG_UPDATED = "✅ Catalog updated successfully"

_LOADING_SCREENS = {
    "browse": Screen.SKILL_BROWSE,
    "install": Screen.SKILL_INSTALL,
    "remove": Screen.SKILL_REMOVE,
}


def _resolve_menu(state: WizardState, option: Option) -> Effect | None:
    screen = _LOADING_SCREENS.get(option.value)
    if screen is not None:
        state.skill_loading = True
        state.skill_load_error = ""
        state.skill_selected = []
        state.go(screen)
        return LoadSkills(screen)
    if option.value == "update":
        state.skill_loading = True
        state.skill_load_error = ""
        state.skill_result_log = []
        state.error_message = ""
        state.go(Screen.SKILL_UPDATE)
        return UpdateSkillCatalog(Screen.SKILL_UPDATE)
    if option.value == BACK:
        go_back(state)
    return None


def handle_browse(state: WizardState, key: Key) -> Effect | None:
    rows = browse_entries(state.skill_catalog)
    if move_in(state, rows, key):
        return None
    if key == ENTER and 0 <= state.cursor < len(rows) and rows[state.cursor].kind is EntryKind.BACK:
        go_back(state)
    return None


def handle_pick(state: WizardState, key: Key) -> Effect | None:
    """Multi-select on SKILL_INSTALL and SKILL_REMOVE."""
    candidates = skill_candidates(state)
    if len(state.skill_selected) != len(candidates):
        state.skill_selected = [False] * len(candidates)
    selection = screen_selection(state)
    if selection is None:
        return None
    if move_in(state, selection.entries(), key):
        return None
    if not is_activate(key):
        return None
    entry = selection.toggle(state.cursor)
    if entry is None:
        return None
    if entry.kind is EntryKind.BACK:
        go_back(state)
        return None
    if entry.kind is not EntryKind.CONFIRM:
        return None
    chosen = tuple(candidates[index] for index in selection.selected_indices())
    if not chosen:
        return None
    removing = state.screen is Screen.SKILL_REMOVE
    state.error_message = ""
    state.skill_result_log = []
    state.skill_loading = True
    state.go(Screen.SKILL_RESULT)
    logger.info("%s %d skills", "removing" if removing else "installing", len(chosen))
    if removing:
        return RemoveSkills(Screen.SKILL_RESULT, chosen)
    return InstallSkills(Screen.SKILL_RESULT, chosen)


def handle_result(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER:
        state.go(Screen.SKILL_MENU)
    return None


def handle_update(state: WizardState, key: Key) -> Effect | None:
    return None


def on_skills_loaded(state: WizardState, msg: SkillsLoaded) -> Effect | None:
    state.skill_loading = False
    if msg.error:
        state.skill_load_error = msg.error
        logger.warning("skill catalog load failed: %s", msg.error)
        return None
    state.skill_catalog = list(msg.skills)
    if state.screen in (Screen.SKILL_INSTALL, Screen.SKILL_REMOVE):
        state.skill_selected = [False] * len(skill_candidates(state))
    return None


def on_action_finished(state: WizardState, msg: SkillActionFinished) -> Effect | None:
    state.skill_loading = False
    state.skill_result_log = list(msg.log_lines)
    state.error_message = msg.error
    return None


def on_catalog_updated(state: WizardState, msg: SkillCatalogUpdated) -> Effect | None:
    state.skill_loading = False
    if msg.error:
        state.error_message = msg.error
        state.skill_result_log = []
        logger.warning("skill catalog update failed: %s", msg.error)
    else:
        state.skill_result_log = [CATALOG_UPDATED]
    state.go(Screen.SKILL_RESULT)
    return None


HANDLERS = {
    Screen.SKILL_MENU: option_list_handler(_resolve_menu),
    Screen.SKILL_BROWSE: handle_browse,
    Screen.SKILL_INSTALL: handle_pick,
    Screen.SKILL_REMOVE: handle_pick,
    Screen.SKILL_RESULT: handle_result,
    Screen.SKILL_UPDATE: handle_update,
}


__all__ = [
    "CATALOG_UPDATED",
    "HANDLERS",
    "on_action_finished",
    "on_catalog_updated",
    "on_skills_loaded",
]
