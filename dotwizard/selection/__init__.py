"""Multi-select engine and the two-level category drill-down."""

from .categories import (
    MODULE_CATEGORIES,
    ModuleCategory,
    ModuleItem,
    category_entries,
    collect_selected_features,
    is_agent_teams_lite_selected,
)
from .model import CheckState, Entry, EntryKind, GroupRange, SelectionList

__all__ = [
    "CheckState",
    "Entry",
    "EntryKind",
    "GroupRange",
    "MODULE_CATEGORIES",
    "ModuleCategory",
    "ModuleItem",
    "SelectionList",
    "category_entries",
    "collect_selected_features",
    "is_agent_teams_lite_selected",
]
