"""Effect execution and the message channel back into ``update``.

``EffectRunner.execute`` turns each effect returned by ``update`` into work:
quick persistence effects run inline, everything else runs on a daemon
worker thread. Workers never touch wizard state; they report through the
``MessagePort`` and the loop feeds drained messages into ``update``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from .. import config
from ..services import backups as backup_service
from ..services.installer import StepError, StepRunner
from ..services.project_init import ProjectInitError, run_project_init
from ..services.system import SystemInfo
from ..skills import actions as skill_actions
from ..skills.catalog import DEFAULT_SKILLS_REPO, CatalogError, fetch_skill_catalog
from ..trainer import stats as trainer_stats
from ..wizard.messages import (
    BackupDeleted,
    BackupsLoaded,
    DeleteBackup,
    Effect,
    ExistingConfigsScanned,
    InitProject,
    InstallSkills,
    ListBackups,
    LoadSkills,
    LoadTrainerStats,
    Message,
    ProjectFinished,
    ProjectProgress,
    RemoveSkills,
    RestoreBackup,
    RestoreFinished,
    RunInstallStep,
    SaveShowHidden,
    SaveTrainerStats,
    ScanExistingConfigs,
    SkillActionFinished,
    SkillCatalogUpdated,
    SkillsLoaded,
    StepFinished,
    StepProgress,
    TrainerStatsLoaded,
    UpdateSkillCatalog,
)
from ..wizard.steps import InstallStep

logger = logging.getLogger(__name__)

HandOff = Callable[[Callable[[], None]], None]


class MessagePort:
    """Thread-safe FIFO of messages waiting for ``update``."""

    def __init__(self) -> None:
        self._queue: Queue[Message] = Queue()

    def send(self, message: Message) -> None:
        self._queue.put(message)

    def drain(self) -> list[Message]:
        """Return every queued message in arrival order."""
        out: list[Message] = []
        while True:
            try:
                out.append(self._queue.get_nowait())
            except Empty:
                break
        return out


def run_inline(work: Callable[[], None]) -> None:
    work()


@dataclass(frozen=True)
class RunnerSettings:
    """Host facts and overrides shared by every effect."""

    home: Path
    system: SystemInfo
    dry_run: bool = False
    skills_repo_url: str = DEFAULT_SKILLS_REPO
    init_script: str | None = None
    backup_root: Path | None = None
    stats_path: Path | None = None


class EffectRunner:
    """Executes effects and posts their completion messages to ``port``.

    ``hand_off`` runs interactive install steps on the caller's thread with
    the terminal released; it defaults to a plain call for tests and
    non-tty use. ``spawn`` starts background work and is injectable so tests
    can run workers synchronously.
    """

    def __init__(
        self,
        port: MessagePort,
        settings: RunnerSettings,
        *,
        hand_off: HandOff = run_inline,
        spawn: Callable[[str, Callable[[], None]], None] | None = None,
        step_runner: StepRunner | None = None,
    ) -> None:
        self.port = port
        self.settings = settings
        self.hand_off = hand_off
        self._spawn = spawn if spawn is not None else self._spawn_thread
        self.step_runner = step_runner or StepRunner(
            settings.system,
            settings.home,
            dry_run=settings.dry_run,
            backup_root=settings.backup_root,
        )
        self._dispatch: dict[type[Effect], Callable[..., None]] = {
            ScanExistingConfigs: self._scan_existing_configs,
            RunInstallStep: self._run_install_step,
            ListBackups: self._list_backups,
            RestoreBackup: self._restore_backup,
            DeleteBackup: self._delete_backup,
            LoadSkills: self._load_skills,
            InstallSkills: self._install_skills,
            RemoveSkills: self._remove_skills,
            UpdateSkillCatalog: self._update_catalog,
            InitProject: self._init_project,
            LoadTrainerStats: self._load_trainer_stats,
            SaveTrainerStats: self._save_trainer_stats,
            SaveShowHidden: self._save_show_hidden,
        }

    @staticmethod
    def _spawn_thread(name: str, work: Callable[[], None]) -> None:
        threading.Thread(target=work, name=name, daemon=True).start()

    def execute(self, effect: Effect | None) -> None:
        if effect is None:
            return
        handler = self._dispatch.get(type(effect))
        if handler is None:
            logger.warning("no executor for effect %r", effect)
            return
        handler(effect)

    def _background(self, effect: Effect, work: Callable[[], None]) -> None:
        name = f"dotwizard-{type(effect).__name__}"

        def guarded() -> None:
            logger.info("effect %s started", type(effect).__name__)
            work()
            logger.info("effect %s finished", type(effect).__name__)

        self._spawn(name, guarded)

    # Install

    def _scan_existing_configs(self, effect: ScanExistingConfigs) -> None:
        def work() -> None:
            try:
                configs = backup_service.scan_existing_configs(self.settings.home)
            except Exception:
                logger.exception("scanning existing configs failed")
                configs = []
            self.port.send(ExistingConfigsScanned(effect.screen, tuple(configs)))

        self._background(effect, work)

    def _run_install_step(self, effect: RunInstallStep) -> None:
        step = InstallStep(effect.step_id, effect.name, "", interactive=effect.interactive)

        def emit(line: str) -> None:
            self.port.send(StepProgress(effect.screen, effect.step_id, line))

        def work() -> None:
            error = ""
            try:
                self.step_runner.run(step, effect.choices, emit, effect.existing_configs)
            except StepError as exc:
                logger.warning("install step %s failed: %s", step.id, exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("install step %s crashed", step.id)
                error = str(exc) or type(exc).__name__
            self.port.send(StepFinished(effect.screen, effect.step_id, error))

        if effect.interactive:
            self.hand_off(work)
        else:
            self._background(effect, work)

    # Backups

    def _list_backups(self, effect: ListBackups) -> None:
        def work() -> None:
            try:
                found = backup_service.list_backups(self.settings.backup_root)
            except Exception:
                logger.exception("listing backups failed")
                found = []
            self.port.send(BackupsLoaded(tuple(found)))

        self._background(effect, work)

    def _restore_backup(self, effect: RestoreBackup) -> None:
        def work() -> None:
            error = ""
            try:
                backup_service.restore_backup(effect.backup, self.settings.home)
            except backup_service.BackupError as exc:
                logger.warning("restore failed: %s", exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("restore crashed")
                error = str(exc) or type(exc).__name__
            self.port.send(RestoreFinished(effect.screen, error))

        self._background(effect, work)

    def _delete_backup(self, effect: DeleteBackup) -> None:
        def work() -> None:
            error = ""
            try:
                backup_service.delete_backup(effect.backup)
            except backup_service.BackupError as exc:
                logger.warning("delete failed: %s", exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("delete crashed")
                error = str(exc) or type(exc).__name__
            try:
                remaining = backup_service.list_backups(self.settings.backup_root)
            except Exception:
                logger.exception("listing backups failed")
                remaining = []
            self.port.send(BackupDeleted(effect.screen, tuple(remaining), error))

        self._background(effect, work)

    # Skills

    def _load_skills(self, effect: LoadSkills) -> None:
        def work() -> None:
            try:
                skills = fetch_skill_catalog(self.settings.home, self.settings.skills_repo_url)
            except CatalogError as exc:
                logger.warning("skill catalog load failed: %s", exc)
                self.port.send(SkillsLoaded(effect.screen, error=str(exc)))
                return
            except Exception as exc:
                logger.exception("skill catalog load crashed")
                self.port.send(SkillsLoaded(effect.screen, error=str(exc) or type(exc).__name__))
                return
            self.port.send(SkillsLoaded(effect.screen, tuple(skills)))

        self._background(effect, work)

    def _skill_action(self, effect: InstallSkills | RemoveSkills, action: Callable[..., list[str]]) -> None:
        def work() -> None:
            try:
                lines = action(self.settings.home, list(effect.skills))
            except skill_actions.SkillActionError as exc:
                logger.warning("skill action failed: %s", exc)
                self.port.send(SkillActionFinished(effect.screen, tuple(exc.log_lines), str(exc)))
                return
            except Exception as exc:
                logger.exception("skill action crashed")
                self.port.send(SkillActionFinished(effect.screen, error=str(exc) or type(exc).__name__))
                return
            self.port.send(SkillActionFinished(effect.screen, tuple(lines)))

        self._background(effect, work)

    def _install_skills(self, effect: InstallSkills) -> None:
        self._skill_action(effect, skill_actions.install_skills)

    def _remove_skills(self, effect: RemoveSkills) -> None:
        self._skill_action(effect, skill_actions.remove_skills)

    def _update_catalog(self, effect: UpdateSkillCatalog) -> None:
        def work() -> None:
            error = ""
            try:
                skill_actions.update_catalog(self.settings.home)
            except skill_actions.SkillActionError as exc:
                logger.warning("catalog update failed: %s", exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("catalog update crashed")
                error = str(exc) or type(exc).__name__
            self.port.send(SkillCatalogUpdated(effect.screen, error))

        self._background(effect, work)

    # Project

    def _init_project(self, effect: InitProject) -> None:
        def emit(line: str) -> None:
            self.port.send(ProjectProgress(effect.screen, line))

        def work() -> None:
            error = ""
            try:
                run_project_init(
                    effect.choices,
                    emit,
                    script=self.settings.init_script,
                    dry_run=self.settings.dry_run,
                )
            except ProjectInitError as exc:
                logger.warning("project init failed: %s", exc)
                error = str(exc)
            except Exception as exc:
                logger.exception("project init crashed")
                error = str(exc) or type(exc).__name__
            self.port.send(ProjectFinished(effect.screen, error))

        self._background(effect, work)

    # Preferences

    def _load_trainer_stats(self, effect: LoadTrainerStats) -> None:
        def work() -> None:
            self.port.send(TrainerStatsLoaded(trainer_stats.load_stats(self.settings.stats_path)))

        self._background(effect, work)

    def _save_trainer_stats(self, effect: SaveTrainerStats) -> None:
        trainer_stats.save_stats(effect.stats, self.settings.stats_path)

    def _save_show_hidden(self, effect: SaveShowHidden) -> None:
        config.save_show_hidden(effect.show_hidden)


__all__ = ["EffectRunner", "HandOff", "MessagePort", "RunnerSettings", "run_inline"]
