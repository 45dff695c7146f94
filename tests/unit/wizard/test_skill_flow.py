"""Skill manager flow driven through ``update``."""

from __future__ import annotations

import unittest

from dotwizard.input.keys import DOWN, ENTER, ESC, SPACE, Key
from dotwizard.skills.catalog import SkillInfo
from dotwizard.wizard import KeyPressed, Screen, WizardState, update
from dotwizard.wizard.handlers.skills import CATALOG_UPDATED
from dotwizard.wizard.messages import (
    InstallSkills,
    LoadSkills,
    RemoveSkills,
    SkillActionFinished,
    SkillCatalogUpdated,
    SkillsLoaded,
    UpdateSkillCatalog,
)

CATALOG = (
    SkillInfo("react-19", "React patterns", "curated", "react-19", "/c/react-19"),
    SkillInfo("django", "Django", "curated", "django", "/c/django", installed=True),
    SkillInfo("zod", "Schemas", "community", "zod", "/c/zod"),
)


def _feed(state: WizardState, *keys: Key):
    effect = None
    for key in keys:
        state, effect = update(state, KeyPressed(key))
    return state, effect


def _pick(state: WizardState, index: int):
    state.cursor = 0
    return _feed(state, *([DOWN] * index), ENTER)


def _loaded(screen: Screen) -> WizardState:
    row = {Screen.SKILL_BROWSE: 0, Screen.SKILL_INSTALL: 1, Screen.SKILL_REMOVE: 2}[screen]
    state, _ = _pick(WizardState(screen=Screen.SKILL_MENU), row)
    state, _ = update(state, SkillsLoaded(screen, CATALOG))
    return state


class SkillMenuTests(unittest.TestCase):
    def test_browse_requests_catalog_and_shows_loading(self) -> None:
        state, effect = _pick(WizardState(screen=Screen.SKILL_MENU), 0)

        self.assertIs(state.screen, Screen.SKILL_BROWSE)
        self.assertTrue(state.skill_loading)
        self.assertTrue(state.is_loading)
        self.assertEqual(effect, LoadSkills(Screen.SKILL_BROWSE))

    def test_load_error_is_kept_on_screen(self) -> None:
        state, _ = _pick(WizardState(screen=Screen.SKILL_MENU), 0)

        state, _ = update(state, SkillsLoaded(Screen.SKILL_BROWSE, error="git missing"))

        self.assertFalse(state.skill_loading)
        self.assertEqual(state.skill_load_error, "git missing")

    def test_late_catalog_after_leaving_is_dropped(self) -> None:
        state, _ = _pick(WizardState(screen=Screen.SKILL_MENU), 0)
        state, _ = _feed(state, ESC)
        self.assertIs(state.screen, Screen.SKILL_MENU)
        self.assertFalse(state.skill_loading)

        after, _ = update(state, SkillsLoaded(Screen.SKILL_BROWSE, CATALOG))

        self.assertEqual(after.skill_catalog, [])

    def test_update_catalog_reports_result(self) -> None:
        state, effect = _pick(WizardState(screen=Screen.SKILL_MENU), 3)
        self.assertEqual(effect, UpdateSkillCatalog(Screen.SKILL_UPDATE))

        state, _ = update(state, SkillCatalogUpdated(Screen.SKILL_UPDATE))

        self.assertIs(state.screen, Screen.SKILL_RESULT)
        self.assertEqual(state.skill_result_log, [CATALOG_UPDATED])


class SkillInstallRemoveTests(unittest.TestCase):
    def test_install_candidates_exclude_installed(self) -> None:
        state = _loaded(Screen.SKILL_INSTALL)

        self.assertEqual(len(state.skill_selected), 2)

    def test_install_selected_skill(self) -> None:
        state = _loaded(Screen.SKILL_INSTALL)
        # Rows: select-all, curated header, react-19, community header, zod, separator, confirm
        state, _ = _pick(state, 2)
        self.assertEqual(state.skill_selected, [True, False])

        state, effect = _pick(state, 6)

        self.assertIs(state.screen, Screen.SKILL_RESULT)
        self.assertIsInstance(effect, InstallSkills)
        self.assertEqual([skill.name for skill in effect.skills], ["react-19"])

        state, _ = update(state, SkillActionFinished(Screen.SKILL_RESULT, ("✅ react-19",)))
        self.assertFalse(state.skill_loading)
        self.assertEqual(state.skill_result_log, ["✅ react-19"])

        state, _ = _feed(state, ENTER)
        self.assertIs(state.screen, Screen.SKILL_MENU)

    def test_space_toggle_waits_for_loading_to_finish(self) -> None:
        state = _loaded(Screen.SKILL_INSTALL)
        state.cursor = 0
        state, _ = _feed(state, DOWN, DOWN)
        state.skill_loading = True

        state, effect = _feed(state, SPACE)

        self.assertEqual(state.skill_selected, [False, False])
        self.assertFalse(state.leader_armed)
        self.assertIsNone(effect)

        state.skill_loading = False
        state, _ = _feed(state, SPACE)

        self.assertEqual(state.skill_selected, [True, False])

    def test_confirm_with_nothing_selected_does_nothing(self) -> None:
        state = _loaded(Screen.SKILL_INSTALL)

        state, effect = _pick(state, 6)

        self.assertIs(state.screen, Screen.SKILL_INSTALL)
        self.assertIsNone(effect)

    def test_remove_lists_installed_skills(self) -> None:
        state = _loaded(Screen.SKILL_REMOVE)
        self.assertEqual(len(state.skill_selected), 1)

        state, _ = _pick(state, 0)
        state, effect = _pick(state, 4)

        self.assertIsInstance(effect, RemoveSkills)
        self.assertEqual([skill.name for skill in effect.skills], ["django"])


if __name__ == "__main__":
    unittest.main()
