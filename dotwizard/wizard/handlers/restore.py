"""Backup restore and delete."""

from __future__ import annotations

import logging

from ..choices import UserChoices
from ..messages import BackupDeleted, BackupsLoaded, DeleteBackup, Effect, RestoreBackup, RestoreFinished
from ..navigation import go_back
from ..options import BACK, Option
from ..screens import Screen
from ..state import WizardState
from .common import option_list_handler

logger = logging.getLogger(__name__)


def _resolve_backup(state: WizardState, option: Option) -> Effect | None:
    if option.value == BACK:
        go_back(state)
        return None
    index = int(option.value)
    if 0 <= index < len(state.available_backups):
        state.selected_backup = index
        state.go(Screen.RESTORE_CONFIRM)
    return None


def _resolve_confirm(state: WizardState, option: Option) -> Effect | None:
    if not 0 <= state.selected_backup < len(state.available_backups):
        state.go(Screen.RESTORE_BACKUP)
        return None
    backup = state.available_backups[state.selected_backup]
    if option.value == "restore":
        return RestoreBackup(Screen.RESTORE_CONFIRM, backup)
    if option.value == "delete":
        return DeleteBackup(Screen.RESTORE_CONFIRM, backup)
    state.go(Screen.RESTORE_BACKUP, state.selected_backup)
    return None


def on_backups_loaded(state: WizardState, msg: BackupsLoaded) -> Effect | None:
    state.available_backups = list(msg.backups)
    return None


def on_restore_finished(state: WizardState, msg: RestoreFinished) -> Effect | None:
    if msg.error:
        state.error_message = f"Failed to restore backup: {msg.error}"
        state.go(Screen.ERROR)
        return None
    state.choices = UserChoices()
    state.go(Screen.COMPLETE)
    return None


def on_backup_deleted(state: WizardState, msg: BackupDeleted) -> Effect | None:
    if msg.error:
        state.error_message = f"Failed to delete backup: {msg.error}"
        state.go(Screen.ERROR)
        return None
    state.available_backups = list(msg.backups)
    state.selected_backup = -1
    if state.available_backups:
        state.go(Screen.RESTORE_BACKUP)
    else:
        state.go(Screen.MAIN_MENU)
    return None


HANDLERS = {
    Screen.RESTORE_BACKUP: option_list_handler(_resolve_backup),
    Screen.RESTORE_CONFIRM: option_list_handler(_resolve_confirm),
}


__all__ = ["HANDLERS", "on_backup_deleted", "on_backups_loaded", "on_restore_finished"]
