"""Project initialization through the project-starter ``init-project.sh`` script.

The script is fetched into the cache on first use unless an explicit path is
configured. Its output is streamed line by line to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_cache_dir

from ..wizard.choices import UserChoices
from .process import CommandError, Emit, stream_command

logger = logging.getLogger(__name__)

APP_NAME = "dotwizard"
STARTER_REPO = "https://github.com/Gentleman-Programming/project-starter-framework.git"
STARTER_DIR = Path(user_cache_dir(APP_NAME, appauthor=False)) / "project-starter-framework"
SCRIPT_NAME = "init-project.sh"


class ProjectInitError(Exception):
    """Project initialization failed; the message is shown on the result screen."""


def init_arguments(choices: UserChoices) -> list[str]:
    """Flags passed to the init script for the chosen options."""
    args = ["--non-interactive"]
    if choices.project_stack:
        args.append(f"--stack={choices.project_stack}")
    if choices.project_memory:
        args.append(f"--memory={choices.project_memory}")
    if choices.project_ci:
        args.append(f"--ci={choices.project_ci}")
    if choices.project_engram:
        args.append("--engram")
    if choices.install_obsidian:
        args.append("--install-obsidian")
    return args


def ensure_script(emit: Emit, *, starter_dir: Path | None = None, dry_run: bool = False) -> Path:
    directory = starter_dir if starter_dir is not None else STARTER_DIR
    script = directory / SCRIPT_NAME
    if script.is_file():
        return script
    if not dry_run:
        directory.parent.mkdir(parents=True, exist_ok=True)
    emit("Fetching project starter framework...")
    stream_command(
        ("git", "clone", "--depth", "1", STARTER_REPO, str(directory)),
        emit,
        dry_run=dry_run,
    )
    return script


def run_project_init(
    choices: UserChoices,
    emit: Emit,
    *,
    script: str | None = None,
    starter_dir: Path | None = None,
    dry_run: bool = False,
) -> None:
    """Run the init script inside ``choices.project_path``."""
    if not choices.project_path:
        raise ProjectInitError("no project path selected")
    try:
        if script:
            script_path = Path(script).expanduser()
        else:
            script_path = ensure_script(emit, starter_dir=starter_dir, dry_run=dry_run)
        if not dry_run and not script_path.is_file():
            raise ProjectInitError(f"init script not found: {script_path}")
        emit(f"Running {SCRIPT_NAME}...")
        stream_command(
            ("bash", str(script_path), *init_arguments(choices)),
            emit,
            cwd=choices.project_path,
            dry_run=dry_run,
        )
    except CommandError as exc:
        raise ProjectInitError(str(exc)) from exc
    except OSError as exc:
        raise ProjectInitError(str(exc)) from exc
    logger.info("project initialized at %s", choices.project_path)


__all__ = ["ProjectInitError", "STARTER_REPO", "ensure_script", "init_arguments", "run_project_init"]
