"""Aggregate wizard state.

``update`` never mutates the state it receives: it works on ``clone()`` and
returns the copy. Sub-states are re-initialised when their owning screen is
entered and left stale on exit.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from ..pathinput.editor import PathEditorState
from ..services.backups import BackupInfo
from ..services.system import SystemInfo
from ..skills.catalog import SkillInfo
from ..trainer.model import GameSession, UserStats
from .choices import UserChoices
from .screens import Screen
from .steps import InstallStep

INSTALL_LOG_LIMIT = 20
PROJECT_LOG_LIMIT = 30
SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


def append_capped(lines: list[str], line: str, limit: int) -> None:
    lines.append(line)
    if len(lines) > limit:
        del lines[: len(lines) - limit]


@dataclass
class WizardState:
    screen: Screen = Screen.WELCOME
    prev_screen: Screen = Screen.MAIN_MENU
    cursor: int = 0
    leader_armed: bool = False
    quitting: bool = False
    show_details: bool = False
    width: int = 80
    height: int = 24
    now: float = 0.0
    spinner_frame: int = 0
    home: str = ""
    cwd: str = ""

    system: SystemInfo = field(default_factory=SystemInfo)
    choices: UserChoices = field(default_factory=UserChoices)

    # Install run
    steps: list[InstallStep] = field(default_factory=list)
    current_step: int = -1
    log_lines: list[str] = field(default_factory=list)
    error_message: str = ""
    install_started_at: float = 0.0
    install_total_time: float = 0.0

    # Project path input and project log
    path_editor: PathEditorState = field(default_factory=PathEditorState)
    project_log_lines: list[str] = field(default_factory=list)
    project_loading: bool = False

    # AI tools and framework drill-down
    ai_tool_selected: list[bool] = field(default_factory=list)
    ai_category_selected: dict[str, list[bool]] | None = None
    selected_category: int = 0

    # Skill manager
    skill_catalog: list[SkillInfo] = field(default_factory=list)
    skill_selected: list[bool] = field(default_factory=list)
    skill_loading: bool = False
    skill_load_error: str = ""
    skill_result_log: list[str] = field(default_factory=list)
    scroll: int = 0

    # Learn, keymaps, LazyVim
    viewing_tool: str = ""
    keymap_category: int = 0
    lazyvim_topic: int = 0

    # Backups
    existing_configs: list[str] = field(default_factory=list)
    available_backups: list[BackupInfo] = field(default_factory=list)
    selected_backup: int = -1

    # Trainer
    trainer_stats: UserStats = field(default_factory=UserStats)
    trainer_session: GameSession | None = None
    trainer_cursor: int = 0
    trainer_input: str = ""
    trainer_message: str = ""
    trainer_last_correct: bool = False

    def clone(self) -> WizardState:
        return copy.deepcopy(self)

    @property
    def is_loading(self) -> bool:
        if self.screen in (Screen.INSTALLING, Screen.PROJECT_INSTALLING):
            return True
        return self.skill_loading

    @property
    def spinner(self) -> str:
        return SPINNER_FRAMES[self.spinner_frame % len(SPINNER_FRAMES)]

    def go(self, screen: Screen, cursor: int = 0) -> None:
        self.screen = screen
        self.cursor = cursor
        self.scroll = 0

    def add_log_line(self, line: str) -> None:
        append_capped(self.log_lines, line, INSTALL_LOG_LIMIT)

    def add_project_log_line(self, line: str) -> None:
        append_capped(self.project_log_lines, line, PROJECT_LOG_LIMIT)


__all__ = [
    "INSTALL_LOG_LIMIT",
    "PROJECT_LOG_LIMIT",
    "SPINNER_FRAMES",
    "WizardState",
    "append_capped",
]
