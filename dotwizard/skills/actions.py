"""Install, remove, and update skills.

Installing links a catalog skill into both ``~/.claude/skills`` and
``~/.agents/skills``. Each function returns the per-skill log lines and raises
``SkillActionError`` (carrying those lines) when any link operation failed.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from .catalog import SkillInfo, agents_skills_dir, catalog_dir, claude_skills_dir

logger = logging.getLogger(__name__)


class SkillActionError(Exception):
    def __init__(self, message: str, log_lines: list[str] | None = None) -> None:
        super().__init__(message)
        self.log_lines = list(log_lines or [])


def _targets(home: Path) -> tuple[tuple[Path, str], ...]:
    return (
        (claude_skills_dir(home), "~/.claude/skills/"),
        (agents_skills_dir(home), "~/.agents/skills/"),
    )


def _remove_path(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def install_skills(home: Path, skills: list[SkillInfo]) -> list[str]:
    lines: list[str] = []
    failures = 0
    for directory, _ in _targets(home):
        directory.mkdir(parents=True, exist_ok=True)
    for skill in skills:
        for directory, display in _targets(home):
            destination = directory / skill.name
            try:
                _remove_path(destination)
                os.symlink(skill.full_path, destination)
            except OSError as exc:
                lines.append(f"❌ {skill.name} → {display}: {exc}")
                failures += 1
            else:
                lines.append(f"✅ {skill.name} → {display}")
    if failures:
        raise SkillActionError(f"{failures} symlink(s) failed", lines)
    logger.info("installed %d skills", len(skills))
    return lines


def remove_skills(home: Path, skills: list[SkillInfo]) -> list[str]:
    lines: list[str] = []
    failures = 0
    for skill in skills:
        removed = False
        for directory, display in _targets(home):
            destination = directory / skill.name
            if not (destination.exists() or destination.is_symlink()):
                continue
            try:
                _remove_path(destination)
            except OSError as exc:
                lines.append(f"❌ {skill.name}: failed to remove from {display}: {exc}")
                failures += 1
            else:
                removed = True
        if removed:
            lines.append(f"✅ {skill.name} removed")
    if failures:
        raise SkillActionError(f"{failures} removal(s) failed", lines)
    logger.info("removed %d skills", len(skills))
    return lines


def update_catalog(home: Path) -> None:
    """``git pull`` the catalog checkout."""
    repo_dir = catalog_dir(home)
    if not repo_dir.exists():
        raise SkillActionError("skills catalog not found; browse or install first")
    result = subprocess.run(
        ["git", "-C", str(repo_dir), "pull"],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        detail = (result.stderr or result.stdout).strip()
        raise SkillActionError(f"git pull failed: {detail or result.returncode}")
    logger.info("skill catalog updated")


__all__ = ["SkillActionError", "install_skills", "remove_skills", "update_catalog"]
