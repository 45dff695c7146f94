"""Typed messages into ``update`` and effects out of it.

Completion messages from background work derive from ``Tagged``: they carry
the screen that requested them, and ``update`` drops them once the user has
moved to a different screen.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..input.keys import Key
from ..services.backups import BackupInfo
from ..skills.catalog import SkillInfo
from ..trainer.model import UserStats
from .choices import UserChoices
from .screens import Screen


class Message:
    """Marker base for everything ``update`` accepts."""


class Effect:
    """Marker base for collaborator requests returned by ``update``."""


# Input and runtime messages


@dataclass(frozen=True)
class KeyPressed(Message):
    key: Key


@dataclass(frozen=True)
class Tick(Message):
    now: float


@dataclass(frozen=True)
class Resize(Message):
    width: int
    height: int


@dataclass(frozen=True)
class BackupsLoaded(Message):
    backups: tuple[BackupInfo, ...]


@dataclass(frozen=True)
class TrainerStatsLoaded(Message):
    stats: UserStats


# Tagged completion messages


@dataclass(frozen=True)
class Tagged(Message):
    screen: Screen


@dataclass(frozen=True)
class ExistingConfigsScanned(Tagged):
    configs: tuple[str, ...]


@dataclass(frozen=True)
class StepProgress(Tagged):
    step_id: str
    line: str


@dataclass(frozen=True)
class StepFinished(Tagged):
    step_id: str
    error: str = ""


@dataclass(frozen=True)
class ProjectProgress(Tagged):
    line: str


@dataclass(frozen=True)
class ProjectFinished(Tagged):
    error: str = ""


@dataclass(frozen=True)
class SkillsLoaded(Tagged):
    skills: tuple[SkillInfo, ...] = ()
    error: str = ""


@dataclass(frozen=True)
class SkillActionFinished(Tagged):
    log_lines: tuple[str, ...] = ()
    error: str = ""


@dataclass(frozen=True)
class SkillCatalogUpdated(Tagged):
    error: str = ""


@dataclass(frozen=True)
class RestoreFinished(Tagged):
    error: str = ""


@dataclass(frozen=True)
class BackupDeleted(Tagged):
    backups: tuple[BackupInfo, ...] = ()
    error: str = ""


# Effects


@dataclass(frozen=True)
class ScanExistingConfigs(Effect):
    screen: Screen


@dataclass(frozen=True)
class RunInstallStep(Effect):
    screen: Screen
    step_id: str
    name: str
    interactive: bool
    choices: UserChoices
    existing_configs: tuple[str, ...] = ()


@dataclass(frozen=True)
class ListBackups(Effect):
    pass


@dataclass(frozen=True)
class RestoreBackup(Effect):
    screen: Screen
    backup: BackupInfo


@dataclass(frozen=True)
class DeleteBackup(Effect):
    screen: Screen
    backup: BackupInfo


@dataclass(frozen=True)
class LoadSkills(Effect):
    screen: Screen


@dataclass(frozen=True)
class InstallSkills(Effect):
    screen: Screen
    skills: tuple[SkillInfo, ...]


@dataclass(frozen=True)
class RemoveSkills(Effect):
    screen: Screen
    skills: tuple[SkillInfo, ...]


@dataclass(frozen=True)
class UpdateSkillCatalog(Effect):
    screen: Screen


@dataclass(frozen=True)
class InitProject(Effect):
    screen: Screen
    choices: UserChoices


@dataclass(frozen=True)
class LoadTrainerStats(Effect):
    pass


@dataclass(frozen=True)
class SaveTrainerStats(Effect):
    stats: UserStats


@dataclass(frozen=True)
class SaveShowHidden(Effect):
    show_hidden: bool


__all__ = [
    "BackupDeleted",
    "BackupsLoaded",
    "DeleteBackup",
    "Effect",
    "ExistingConfigsScanned",
    "InitProject",
    "InstallSkills",
    "KeyPressed",
    "ListBackups",
    "LoadSkills",
    "LoadTrainerStats",
    "Message",
    "ProjectFinished",
    "ProjectProgress",
    "RemoveSkills",
    "Resize",
    "RestoreBackup",
    "RestoreFinished",
    "RunInstallStep",
    "SaveShowHidden",
    "SaveTrainerStats",
    "ScanExistingConfigs",
    "SkillActionFinished",
    "SkillCatalogUpdated",
    "SkillsLoaded",
    "StepFinished",
    "StepProgress",
    "Tagged",
    "Tick",
    "TrainerStatsLoaded",
    "UpdateSkillCatalog",
]
