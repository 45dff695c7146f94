"""Generic multi-select over a flat or grouped list.

``selected`` is the single source of truth. Group checkboxes and the
select-all label are derived from it on every call and never stored.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

SELECT_ALL_LABEL = "✅ Select All"
DESELECT_ALL_LABEL = "❌ Deselect All"
SEPARATOR_LABEL = "─────────────"


class EntryKind(Enum):
    SELECT_ALL = "select_all"
    GROUP = "group"
    ITEM = "item"
    SEPARATOR = "separator"
    CONFIRM = "confirm"
    BACK = "back"
    NOTICE = "notice"


class CheckState(Enum):
    """Tri-state group checkbox."""

    ALL = "[✓]"
    NONE = "[ ]"
    PARTIAL = "[-]"


@dataclass(frozen=True)
class GroupRange:
    """Half-open ``[start, end)`` span over ``selected`` with a display title."""

    start: int
    end: int
    title: str = ""

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end


@dataclass(frozen=True)
class Entry:
    """One visible row of a selection screen."""

    kind: EntryKind
    label: str = ""
    index: int = -1
    group: GroupRange | None = None

    @property
    def separator(self) -> bool:
        return self.kind is EntryKind.SEPARATOR

    @property
    def inert(self) -> bool:
        return self.kind in (EntryKind.SEPARATOR, EntryKind.NOTICE)


SEPARATOR_ENTRY = Entry(EntryKind.SEPARATOR, SEPARATOR_LABEL)


class SelectionList:
    """Parallel ``labels``/``selected`` arrays plus optional group ranges.

    ``selected`` is kept by reference so that a caller-owned list (for example
    a category map value) observes every toggle.
    """

    def __init__(
        self,
        labels: Sequence[str],
        selected: list[bool] | None = None,
        groups: Sequence[GroupRange] = (),
        *,
        select_all: bool = True,
        separator_after_select_all: bool = True,
        header_format: str = "{title}",
        footer: Sequence[Entry] = (),
    ) -> None:
        self.labels = list(labels)
        self.selected = selected if selected is not None else [False] * len(self.labels)
        if len(self.selected) != len(self.labels):
            raise ValueError(
                f"selected has {len(self.selected)} flags for {len(self.labels)} labels"
            )
        for group in groups:
            if group.start < 0 or group.end > len(self.labels) or group.start > group.end:
                raise ValueError(f"group range [{group.start}, {group.end}) out of bounds")
        self.groups = list(groups)
        self.select_all = select_all
        self.separator_after_select_all = separator_after_select_all
        self.header_format = header_format
        self.footer = tuple(footer)

    def __len__(self) -> int:
        return len(self.labels)

    # Derived reads

    def all_selected(self) -> bool:
        return bool(self.selected) and all(self.selected)

    def count_selected(self, group: GroupRange | None = None) -> int:
        if group is None:
            return sum(1 for flag in self.selected if flag)
        return sum(1 for flag in self.selected[group.start:group.end] if flag)

    def selected_indices(self) -> list[int]:
        return [index for index, flag in enumerate(self.selected) if flag]

    def group_check(self, group: GroupRange) -> CheckState:
        span = self.selected[group.start:group.end]
        if span and all(span):
            return CheckState.ALL
        if any(span):
            return CheckState.PARTIAL
        return CheckState.NONE

    def group_label(self, group: GroupRange) -> str:
        return self.header_format.format(
            title=group.title,
            selected=self.count_selected(group),
            total=len(group),
        )

    def select_all_label(self) -> str:
        return DESELECT_ALL_LABEL if self.all_selected() else SELECT_ALL_LABEL

    def entries(self) -> list[Entry]:
        """Lay out visible rows: select-all, group headers with items, footer."""
        rows: list[Entry] = []
        if self.select_all:
            rows.append(Entry(EntryKind.SELECT_ALL, self.select_all_label()))
            if self.separator_after_select_all:
                rows.append(SEPARATOR_ENTRY)
        starts = {group.start: group for group in self.groups if len(group)}
        for index, label in enumerate(self.labels):
            group = starts.get(index)
            if group is not None:
                rows.append(Entry(EntryKind.GROUP, self.group_label(group), group=group))
            rows.append(Entry(EntryKind.ITEM, label, index=index))
        rows.extend(self.footer)
        return rows

    # Mutations

    def set_all(self, value: bool) -> None:
        for index in range(len(self.selected)):
            self.selected[index] = value

    def toggle_all(self) -> None:
        """Select everything unless everything is already selected."""
        self.set_all(not self.all_selected())

    def toggle_group(self, group: GroupRange) -> None:
        target = self.group_check(group) is not CheckState.ALL
        for index in range(group.start, min(group.end, len(self.selected))):
            self.selected[index] = target

    def toggle_item(self, index: int) -> None:
        if 0 <= index < len(self.selected):
            self.selected[index] = not self.selected[index]

    def toggle(self, cursor: int) -> Entry | None:
        """Apply the toggle owned by the row under ``cursor``.

        Returns the resolved row so the caller can act on CONFIRM or BACK rows;
        those, separators, and notices leave ``selected`` unchanged.
        """
        rows = self.entries()
        if not 0 <= cursor < len(rows):
            return None
        entry = rows[cursor]
        if entry.kind is EntryKind.SELECT_ALL:
            self.toggle_all()
        elif entry.kind is EntryKind.GROUP and entry.group is not None:
            self.toggle_group(entry.group)
        elif entry.kind is EntryKind.ITEM:
            self.toggle_item(entry.index)
        return entry


__all__ = [
    "CheckState",
    "DESELECT_ALL_LABEL",
    "Entry",
    "EntryKind",
    "GroupRange",
    "SELECT_ALL_LABEL",
    "SEPARATOR_ENTRY",
    "SEPARATOR_LABEL",
    "SelectionList",
]
