"""Config backups: scan, create, list, restore, delete.

Backups live under ``user_data_dir("dotwizard")/backups/<timestamp>/`` with a
``manifest.json`` mapping each saved entry back to its original location.
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "dotwizard"
BACKUP_ROOT = Path(user_data_dir(APP_NAME, appauthor=False)) / "backups"
MANIFEST_FILENAME = "manifest.json"
TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# Paths relative to $HOME that an install overwrites.
MANAGED_CONFIGS: tuple[str, ...] = (
    ".config/alacritty",
    ".config/wezterm",
    ".wezterm.lua",
    ".config/kitty",
    ".config/ghostty",
    ".config/fish",
    ".zshrc",
    ".config/nushell",
    ".config/starship.toml",
    ".tmux.conf",
    ".config/tmux",
    ".config/zellij",
    ".config/nvim",
)


class BackupError(Exception):
    """Raised when a backup cannot be created, restored, or deleted."""


@dataclass(frozen=True)
class BackupInfo:
    path: Path
    timestamp: datetime
    files: tuple[str, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.timestamp.strftime(DISPLAY_FORMAT)} ({len(self.files)} items)"


def scan_existing_configs(home: Path) -> list[str]:
    """Return managed config paths (relative to ``home``) that exist."""
    return [rel for rel in MANAGED_CONFIGS if (home / rel).exists() or (home / rel).is_symlink()]


def _copy_entry(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir() and not source.is_symlink():
        shutil.copytree(source, target, symlinks=True)
    else:
        shutil.copy2(source, target, follow_symlinks=False)


def create_backup(
    home: Path,
    configs: list[str],
    root: Path | None = None,
    now: datetime | None = None,
) -> BackupInfo:
    """Copy ``configs`` into a new timestamped backup directory."""
    base = root if root is not None else BACKUP_ROOT
    stamp = (now or datetime.now()).replace(microsecond=0)
    destination = base / stamp.strftime(TIMESTAMP_FORMAT)
    try:
        destination.mkdir(parents=True, exist_ok=False)
        saved: list[str] = []
        for rel in configs:
            source = home / rel
            if not (source.exists() or source.is_symlink()):
                continue
            _copy_entry(source, destination / "files" / rel)
            saved.append(rel)
        manifest = {"created": stamp.isoformat(), "home": str(home), "files": saved}
        (destination / MANIFEST_FILENAME).write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise BackupError(f"cannot create backup in {destination}: {exc}") from exc
    logger.info("created backup %s with %d entries", destination, len(saved))
    return BackupInfo(destination, stamp, tuple(saved))


def _read_backup(path: Path) -> BackupInfo | None:
    try:
        manifest = json.loads((path / MANIFEST_FILENAME).read_text(encoding="utf-8"))
        timestamp = datetime.fromisoformat(manifest["created"])
    except (OSError, ValueError, KeyError, TypeError):
        return None
    files = manifest.get("files", [])
    if not isinstance(files, list):
        return None
    return BackupInfo(path, timestamp, tuple(str(name) for name in files))


def list_backups(root: Path | None = None) -> list[BackupInfo]:
    """Return readable backups, newest first."""
    base = root if root is not None else BACKUP_ROOT
    try:
        candidates = [child for child in base.iterdir() if child.is_dir()]
    except OSError:
        return []
    backups = [info for info in map(_read_backup, candidates) if info is not None]
    backups.sort(key=lambda info: info.timestamp, reverse=True)
    return backups


def restore_backup(backup: BackupInfo, home: Path) -> None:
    """Replace current configs with the copies saved in ``backup``."""
    try:
        for rel in backup.files:
            source = backup.path / "files" / rel
            target = home / rel
            if target.is_symlink() or target.is_file():
                target.unlink()
            elif target.is_dir():
                shutil.rmtree(target)
            _copy_entry(source, target)
    except OSError as exc:
        raise BackupError(str(exc)) from exc
    logger.info("restored backup %s", backup.path)


def delete_backup(backup: BackupInfo) -> None:
    try:
        shutil.rmtree(backup.path)
    except OSError as exc:
        raise BackupError(f"cannot delete {backup.path}: {exc}") from exc
    logger.info("deleted backup %s", backup.path)


__all__ = [
    "BACKUP_ROOT",
    "BackupError",
    "BackupInfo",
    "MANAGED_CONFIGS",
    "create_backup",
    "delete_backup",
    "list_backups",
    "restore_backup",
    "scan_existing_configs",
]
