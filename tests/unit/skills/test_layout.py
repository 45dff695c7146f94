"""Tests for skill list ordering, headers and row labels."""

from __future__ import annotations

import unittest

from dotwizard.selection.model import EntryKind
from dotwizard.skills.catalog import SkillInfo
from dotwizard.skills.layout import (
    BACK_LABEL,
    CONFIRM_REMOVE_LABEL,
    NONE_INSTALLED_NOTICE,
    browse_entries,
    category_header,
    category_order,
    install_candidates,
    skill_label,
    skill_selection,
    truncate_desc,
)

GATEWAY = SkillInfo("gateway", "", "local:backend", "api-gateway", "/l/api-gateway", installed=True)
ZOD = SkillInfo("zod", "Zod v4 schemas", "community", "zod", "/c/zod")
REACT = SkillInfo("react-19", "React 19 patterns", "curated", "react-19", "/c/react-19", installed=True)
DJANGO = SkillInfo("django", "", "curated", "django", "/c/django")


class SkillLayoutTests(unittest.TestCase):
    def test_priority_categories_come_first(self) -> None:
        self.assertEqual(
            category_order([GATEWAY, ZOD, REACT]),
            ["curated", "community", "local:backend"],
        )

    def test_headers(self) -> None:
        self.assertEqual(category_header("curated"), "📦 Curated")
        self.assertEqual(category_header("local"), "🏠 Local")
        self.assertEqual(category_header("local:backend"), "🏠 Backend")
        self.assertEqual(category_header("misc"), "📁 misc")

    def test_labels_truncate_long_descriptions(self) -> None:
        long = truncate_desc("x" * 80)

        self.assertEqual(len(long), 60)
        self.assertTrue(long.endswith("…"))
        self.assertEqual(skill_label(DJANGO), "django")
        self.assertEqual(skill_label(ZOD), "zod — Zod v4 schemas")

    def test_install_candidates_skip_installed_and_regroup(self) -> None:
        self.assertEqual(install_candidates([ZOD, REACT, DJANGO]), [DJANGO, ZOD])

    def test_selection_rows_have_no_separator_after_select_all(self) -> None:
        skills = install_candidates([ZOD, DJANGO])
        rows = skill_selection(skills, [False, False], removing=False).entries()

        self.assertEqual(
            [row.kind for row in rows],
            [
                EntryKind.SELECT_ALL,
                EntryKind.GROUP,
                EntryKind.ITEM,
                EntryKind.GROUP,
                EntryKind.ITEM,
                EntryKind.SEPARATOR,
                EntryKind.CONFIRM,
            ],
        )
        self.assertEqual(rows[1].label, "📦 Curated")
        self.assertEqual(rows[3].label, "🌐 Community")

    def test_empty_remove_list_shows_notice_and_back(self) -> None:
        rows = skill_selection([], [], removing=True).entries()

        self.assertEqual([row.label for row in rows][0], NONE_INSTALLED_NOTICE)
        self.assertEqual(rows[-1].kind, EntryKind.BACK)
        self.assertNotIn(CONFIRM_REMOVE_LABEL, [row.label for row in rows])

    def test_browse_marks_installed_skills(self) -> None:
        rows = browse_entries([ZOD, REACT])

        self.assertEqual(
            [row.label for row in rows],
            [
                "📦 Curated",
                "✓ react-19 — React 19 patterns",
                "🌐 Community",
                "  zod — Zod v4 schemas",
                rows[-2].label,
                BACK_LABEL,
            ],
        )
        self.assertTrue(rows[-2].separator)


if __name__ == "__main__":
    unittest.main()
