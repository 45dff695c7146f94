"""Wizard bootstrap: host detection, initial state and runtime wiring."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .. import config
from ..fs import home_dir
from ..pathinput.editor import PathEditorState
from ..render import make_renderer, resolve_theme
from ..services.system import SystemInfo, detect_system
from ..skills.catalog import DEFAULT_SKILLS_REPO
from ..wizard import WizardState
from ..wizard.messages import ListBackups, LoadTrainerStats
from .bridge import EffectRunner, MessagePort, RunnerSettings
from .loop import WizardLoop, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppOptions:
    dry_run: bool = False
    no_color: bool = False
    style: str | None = None
    theme: str | None = None
    show_hidden: bool | None = None


def build_initial_state(
    home: str,
    cwd: str,
    system: SystemInfo,
    show_hidden: bool,
    width: int = 80,
    height: int = 24,
) -> WizardState:
    state = WizardState(home=home, cwd=cwd, system=system, width=width, height=height)
    state.path_editor = PathEditorState(show_hidden=show_hidden)
    return state


def run_app(options: AppOptions) -> int:
    """Run the interactive wizard; returns the process exit code."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        print("dotwizard needs an interactive terminal", file=sys.stderr)
        return 1

    home = home_dir()
    system = detect_system()
    show_hidden = config.load_show_hidden() if options.show_hidden is None else options.show_hidden
    logger.info("starting wizard (os=%s, dry_run=%s)", system.os, options.dry_run)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    columns, lines = terminal.size()
    state = build_initial_state(home, os.getcwd(), system, show_hidden, columns, lines)

    port = MessagePort()
    settings = RunnerSettings(
        home=Path(home),
        system=system,
        dry_run=options.dry_run,
        skills_repo_url=config.load_skills_repo_url() or DEFAULT_SKILLS_REPO,
        init_script=config.load_init_script(),
    )
    runner = EffectRunner(port, settings, hand_off=terminal.suspended)
    theme = resolve_theme(options.theme or config.load_theme_name(), no_color=options.no_color)
    render = make_renderer(
        no_color=options.no_color,
        style=options.style or config.load_code_style(),
        theme=theme,
    )
    loop = WizardLoop(state, port, runner, render)
    final = run_main_loop(loop, terminal, stdin_fd, (ListBackups(), LoadTrainerStats()))
    if final.error_message:
        logger.info("wizard ended with error: %s", final.error_message)
    return 0


__all__ = ["AppOptions", "build_initial_state", "run_app"]
