"""Skill catalog: discovery, symlink actions, and screen layout."""

from __future__ import annotations

from .actions import SkillActionError, install_skills, remove_skills, update_catalog
from .catalog import (
    CatalogError,
    SkillInfo,
    fetch_skill_catalog,
    is_skill_installed,
    parse_skill_frontmatter,
)

__all__ = [
    "CatalogError",
    "SkillActionError",
    "SkillInfo",
    "fetch_skill_catalog",
    "install_skills",
    "is_skill_installed",
    "parse_skill_frontmatter",
    "remove_skills",
    "update_catalog",
]
