"""Row layout for the skill browse, install, and remove screens.

Skills are grouped by category (curated, community, then local groups in
order of appearance). Install and remove screens are ``SelectionList`` views
whose ``selected`` flags run parallel to ``ordered_skills(subset)``.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..selection.model import SEPARATOR_ENTRY, Entry, EntryKind, GroupRange, SelectionList
from .catalog import SkillInfo

PRIORITY_CATEGORIES = ("curated", "community")
DESC_MAX_LEN = 60
BACK_LABEL = "← Back"
CONFIRM_INSTALL_LABEL = "✅ Confirm installation"
CONFIRM_REMOVE_LABEL = "✅ Confirm removal"
ALL_INSTALLED_NOTICE = "✅ All skills are already installed!"
NONE_INSTALLED_NOTICE = "No skills installed"


def truncate_desc(desc: str, max_len: int = DESC_MAX_LEN) -> str:
    if len(desc) <= max_len:
        return desc
    return desc[: max_len - 1] + "…"


def category_order(skills: Iterable[SkillInfo]) -> list[str]:
    skills = list(skills)
    present = {skill.category for skill in skills}
    order = [category for category in PRIORITY_CATEGORIES if category in present]
    for skill in skills:
        if skill.category not in order:
            order.append(skill.category)
    return order


def category_header(category: str) -> str:
    if category == "curated":
        return "📦 Curated"
    if category == "community":
        return "🌐 Community"
    if category == "local":
        return "🏠 Local"
    if category.startswith("local:"):
        group = category[len("local:"):]
        return "🏠 " + group[:1].upper() + group[1:]
    return "📁 " + category


def ordered_skills(skills: Iterable[SkillInfo]) -> list[SkillInfo]:
    """Stable regrouping of ``skills`` by display category order."""
    skills = list(skills)
    ordered: list[SkillInfo] = []
    for category in category_order(skills):
        ordered.extend(skill for skill in skills if skill.category == category)
    return ordered


def skill_label(skill: SkillInfo) -> str:
    desc = truncate_desc(skill.description)
    return f"{skill.name} — {desc}" if desc else skill.name


def category_groups(skills: list[SkillInfo]) -> list[GroupRange]:
    """Contiguous category runs over an already ``ordered_skills`` list."""
    groups: list[GroupRange] = []
    start = 0
    while start < len(skills):
        category = skills[start].category
        end = start + 1
        while end < len(skills) and skills[end].category == category:
            end += 1
        groups.append(GroupRange(start, end, category_header(category)))
        start = end
    return groups


def install_candidates(catalog: Iterable[SkillInfo]) -> list[SkillInfo]:
    return ordered_skills(skill for skill in catalog if not skill.installed)


def remove_candidates(catalog: Iterable[SkillInfo]) -> list[SkillInfo]:
    return ordered_skills(skill for skill in catalog if skill.installed)


def skill_selection(skills: list[SkillInfo], selected: list[bool], *, removing: bool) -> SelectionList:
    """Multi-select list for install (``removing=False``) or remove."""
    if not skills:
        notice = NONE_INSTALLED_NOTICE if removing else ALL_INSTALLED_NOTICE
        return SelectionList(
            [],
            [],
            select_all=False,
            footer=(Entry(EntryKind.NOTICE, notice), SEPARATOR_ENTRY, Entry(EntryKind.BACK, BACK_LABEL)),
        )
    confirm = CONFIRM_REMOVE_LABEL if removing else CONFIRM_INSTALL_LABEL
    return SelectionList(
        [skill_label(skill) for skill in skills],
        selected,
        category_groups(skills),
        separator_after_select_all=False,
        footer=(SEPARATOR_ENTRY, Entry(EntryKind.CONFIRM, confirm)),
    )


def browse_entries(catalog: Iterable[SkillInfo]) -> list[Entry]:
    """Read-only rows: headers, badged items, then back."""
    rows: list[Entry] = []
    skills = ordered_skills(catalog)
    for group in category_groups(skills):
        rows.append(Entry(EntryKind.GROUP, group.title, group=group))
        for index in range(group.start, group.end):
            skill = skills[index]
            badge = "✓ " if skill.installed else "  "
            rows.append(Entry(EntryKind.ITEM, badge + skill_label(skill), index=index))
    rows.append(SEPARATOR_ENTRY)
    rows.append(Entry(EntryKind.BACK, BACK_LABEL))
    return rows


__all__ = [
    "ALL_INSTALLED_NOTICE",
    "BACK_LABEL",
    "CONFIRM_INSTALL_LABEL",
    "CONFIRM_REMOVE_LABEL",
    "NONE_INSTALLED_NOTICE",
    "browse_entries",
    "category_groups",
    "category_header",
    "category_order",
    "install_candidates",
    "ordered_skills",
    "remove_candidates",
    "skill_label",
    "skill_selection",
    "truncate_desc",
]
