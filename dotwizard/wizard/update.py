"""The wizard's single transition function.

``update(state, msg)`` returns a new state plus at most one effect for the
runtime to execute. Key presses pass through global routing first (quit,
leader, loading gate, screen space, escape) before the screen handler sees
them. Completion messages from background work are dropped when they were
requested by a screen the user has since left.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..input.keys import CTRL_C, ESC, SPACE, Key
from ..pathinput.editor import PathEditor
from .handlers import HANDLERS, install, project, restore, skills, trainer
from .messages import (
    BackupDeleted,
    BackupsLoaded,
    Effect,
    ExistingConfigsScanned,
    KeyPressed,
    Message,
    ProjectFinished,
    ProjectProgress,
    Resize,
    RestoreFinished,
    SkillActionFinished,
    SkillCatalogUpdated,
    SkillsLoaded,
    StepFinished,
    StepProgress,
    Tagged,
    Tick,
    TrainerStatsLoaded,
)
from .navigation import go_back
from .screens import SPACE_PASSTHROUGH, TRAINER_SCREENS, Screen
from .state import WizardState

logger = logging.getLogger(__name__)

Update = tuple[WizardState, "Effect | None"]


def _quit(state: WizardState) -> None:
    state.quitting = True


def handle_escape(state: WizardState) -> Effect | None:
    screen = state.screen
    if screen is Screen.PROJECT_PATH:
        if PathEditor(state.path_editor, state.home).close_overlay():
            return None
        go_back(state)
        return None
    if screen in TRAINER_SCREENS:
        return trainer.escape(state)
    if screen is Screen.MAIN_MENU:
        _quit(state)
        return None
    go_back(state)
    return None


def _handle_leader(state: WizardState, key: Key) -> None:
    state.leader_armed = False
    if key.is_rune("q") and state.screen is not Screen.INSTALLING:
        _quit(state)
    elif key.is_rune("d") and state.screen is Screen.INSTALLING:
        state.show_details = not state.show_details


def _handle_space(state: WizardState) -> Effect | None:
    screen = state.screen
    if screen is Screen.WELCOME:
        state.go(Screen.MAIN_MENU)
        return None
    if screen in (Screen.COMPLETE, Screen.ERROR):
        _quit(state)
        return None
    return HANDLERS[screen](state, SPACE)


def _handle_key(state: WizardState, key: Key) -> Effect | None:
    if key == CTRL_C:
        _quit(state)
        return None
    if state.leader_armed:
        _handle_leader(state, key)
        return None
    if key == SPACE and state.screen not in SPACE_PASSTHROUGH:
        state.leader_armed = True
        return None
    if state.is_loading:
        if key == ESC:
            # Abandon; the late completion no longer matches its screen tag.
            state.skill_loading = False
            return handle_escape(state)
        return None
    if key == SPACE:
        return _handle_space(state)
    if key == ESC:
        return handle_escape(state)
    handler = HANDLERS.get(state.screen)
    if handler is None:
        return None
    return handler(state, key)


def _on_tick(state: WizardState, msg: Tick) -> Effect | None:
    state.now = msg.now
    if state.is_loading:
        state.spinner_frame += 1
    return None


def _on_resize(state: WizardState, msg: Resize) -> Effect | None:
    state.width = msg.width
    state.height = msg.height
    return None


def _on_stats_loaded(state: WizardState, msg: TrainerStatsLoaded) -> Effect | None:
    state.trainer_stats = msg.stats
    return None


_MESSAGE_HANDLERS: dict[type, Callable[[WizardState, Message], Effect | None]] = {
    Tick: _on_tick,
    Resize: _on_resize,
    BackupsLoaded: restore.on_backups_loaded,
    TrainerStatsLoaded: _on_stats_loaded,
    ExistingConfigsScanned: install.on_configs_scanned,
    StepProgress: install.on_step_progress,
    StepFinished: install.on_step_finished,
    ProjectProgress: project.on_progress,
    ProjectFinished: project.on_finished,
    SkillsLoaded: skills.on_skills_loaded,
    SkillActionFinished: skills.on_action_finished,
    SkillCatalogUpdated: skills.on_catalog_updated,
    RestoreFinished: restore.on_restore_finished,
    BackupDeleted: restore.on_backup_deleted,
}


def update(state: WizardState, msg: Message) -> Update:
    """Return ``(next_state, effect)``; ``state`` itself is never modified."""
    if isinstance(msg, Tagged) and msg.screen is not state.screen:
        logger.debug(
            "dropping stale %s for %s (now on %s)",
            type(msg).__name__,
            msg.screen.name,
            state.screen.name,
        )
        return state, None
    if isinstance(msg, KeyPressed):
        origin = state.screen
        next_state = state.clone()
        effect = _handle_key(next_state, msg.key)
        if next_state.screen is not origin:
            logger.debug("screen %s -> %s on %s", origin.name, next_state.screen.name, msg.key.label)
        return next_state, effect
    handler = _MESSAGE_HANDLERS.get(type(msg))
    if handler is None:
        logger.debug("unhandled message %s", type(msg).__name__)
        return state, None
    next_state = state.clone()
    return next_state, handler(next_state, msg)


__all__ = ["Update", "handle_escape", "update"]
