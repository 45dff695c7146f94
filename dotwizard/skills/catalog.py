"""Skill catalog discovery.

The catalog is a git checkout at ``~/.gentleman/skills`` with ``curated/`` and
``community/`` folders, one directory per skill holding a ``SKILL.md``. Skills
that live directly in ``~/.claude/skills`` without coming from the checkout
are reported as ``local`` (or ``local:<group>`` for nested folders).
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SKILLS_REPO = "https://github.com/Gentleman-Programming/Gentleman-Skills.git"
SKILL_FILENAME = "SKILL.md"
REPO_CATEGORIES = ("curated", "community")
LOCAL_CATEGORY = "local"


class CatalogError(Exception):
    """Raised when the catalog checkout cannot be created or read."""


@dataclass(frozen=True)
class SkillInfo:
    name: str
    description: str
    category: str
    dir_name: str
    full_path: str
    installed: bool = False


def catalog_dir(home: Path) -> Path:
    return home / ".gentleman" / "skills"


def claude_skills_dir(home: Path) -> Path:
    return home / ".claude" / "skills"


def agents_skills_dir(home: Path) -> Path:
    return home / ".agents" / "skills"


def parse_skill_frontmatter(path: Path) -> tuple[str, str]:
    """Return ``(name, description)`` from a SKILL.md YAML header.

    Only the first line of the description is kept. Missing files, missing
    headers and YAML that does not parse yield ``("", "")``.
    """
    try:
        lines = path.read_text(encoding="utf-8").split("\n")
    except (OSError, UnicodeDecodeError):
        return "", ""
    if not lines or lines[0].strip() != "---":
        return "", ""
    try:
        end = next(index for index, line in enumerate(lines[1:], start=1) if line.strip() == "---")
    except StopIteration:
        return "", ""

    try:
        header = yaml.safe_load("\n".join(lines[1:end])) or {}
    except yaml.YAMLError as exc:
        logger.warning("bad frontmatter in %s: %s", path, exc)
        return "", ""
    if not isinstance(header, dict):
        return "", ""
    name = header.get("name")
    description = header.get("description")
    name = name.strip() if isinstance(name, str) else ""
    if not isinstance(description, str):
        return name, ""
    first = next((line.strip() for line in description.split("\n") if line.strip()), "")
    return name, first


def is_skill_installed(home: Path, name: str) -> bool:
    return any(
        (base / name).exists()
        for base in (claude_skills_dir(home), agents_skills_dir(home))
    )


def ensure_catalog(home: Path, repo_url: str = DEFAULT_SKILLS_REPO) -> Path:
    """Shallow-clone the catalog when the checkout is missing."""
    target = catalog_dir(home)
    if target.exists():
        return target
    target.parent.mkdir(parents=True, exist_ok=True)
    logger.info("cloning skill catalog %s into %s", repo_url, target)
    result = subprocess.run(
        ["git", "clone", "--depth", "1", repo_url, str(target)],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        detail = (result.stderr or result.stdout).strip()
        raise CatalogError(f"failed to clone skills repo: {detail or result.returncode}")
    return target


def _skill_from_dir(skill_dir: Path, category: str, installed: bool) -> SkillInfo | None:
    skill_file = skill_dir / SKILL_FILENAME
    if not skill_file.is_file():
        return None
    name, description = parse_skill_frontmatter(skill_file)
    return SkillInfo(
        name=name or skill_dir.name,
        description=description,
        category=category,
        dir_name=skill_dir.name,
        full_path=str(skill_dir),
        installed=installed,
    )


def _sorted_children(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError:
        return []


def _scan_local_skills(home: Path, repo_dir: Path, repo_paths: set[str]) -> list[SkillInfo]:
    skills: list[SkillInfo] = []
    repo_prefix = str(repo_dir.resolve())
    for entry in _sorted_children(claude_skills_dir(home)):
        if entry.is_symlink():
            try:
                target = entry.resolve(strict=True)
            except OSError:
                continue
            if str(target).startswith(repo_prefix) or str(target) in repo_paths:
                continue
            skill = _skill_from_dir(target, LOCAL_CATEGORY, installed=True)
            if skill is not None:
                skills.append(skill)
            continue
        if not entry.is_dir() or str(entry) in repo_paths:
            continue
        direct = _skill_from_dir(entry, LOCAL_CATEGORY, installed=True)
        if direct is not None:
            skills.append(direct)
            continue
        # A grouping folder such as backend/api-gateway/.
        for sub in _sorted_children(entry):
            if not sub.is_dir() or str(sub) in repo_paths:
                continue
            nested = _skill_from_dir(sub, f"{LOCAL_CATEGORY}:{entry.name}", installed=True)
            if nested is not None:
                skills.append(nested)
    return skills


def fetch_skill_catalog(home: Path, repo_url: str = DEFAULT_SKILLS_REPO) -> list[SkillInfo]:
    """Clone if needed, then scan repo skills followed by local-only skills."""
    repo_dir = ensure_catalog(home, repo_url)
    skills: list[SkillInfo] = []
    repo_paths: set[str] = set()
    for category in REPO_CATEGORIES:
        for skill_dir in _sorted_children(repo_dir / category):
            if not skill_dir.is_dir():
                continue
            skill = _skill_from_dir(skill_dir, category, installed=False)
            if skill is None:
                continue
            repo_paths.add(str(skill_dir))
            skills.append(
                SkillInfo(
                    name=skill.name,
                    description=skill.description,
                    category=category,
                    dir_name=skill.dir_name,
                    full_path=skill.full_path,
                    installed=is_skill_installed(home, skill.name),
                )
            )
    skills.extend(_scan_local_skills(home, repo_dir, repo_paths))
    logger.info("skill catalog loaded: %d skills", len(skills))
    return skills


__all__ = [
    "CatalogError",
    "DEFAULT_SKILLS_REPO",
    "SkillInfo",
    "agents_skills_dir",
    "catalog_dir",
    "claude_skills_dir",
    "ensure_catalog",
    "fetch_skill_catalog",
    "is_skill_installed",
    "parse_skill_frontmatter",
]
