"""Host-facing collaborators: system probing, backups and subprocess helpers.

``installer`` and ``project_init`` consume wizard choices and are imported
from their modules directly.
"""

from __future__ import annotations

from .backups import BackupError, BackupInfo, create_backup, delete_backup, list_backups, restore_backup
from .system import SystemInfo, command_exists, detect_system

__all__ = [
    "BackupError",
    "BackupInfo",
    "SystemInfo",
    "command_exists",
    "create_backup",
    "delete_backup",
    "detect_system",
    "list_backups",
    "restore_backup",
]
