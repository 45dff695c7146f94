"""Project init walk-through driven through ``update``."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dotwizard.input.keys import DOWN, ENTER, ESC, SPACE, TAB, Key
from dotwizard.pathinput.editor import PathMode
from dotwizard.services.system import SystemInfo
from dotwizard.wizard import KeyPressed, Screen, WizardState, update
from dotwizard.wizard.messages import InitProject, ProjectFinished, ProjectProgress, SaveShowHidden


def _feed(state: WizardState, *keys: Key):
    effect = None
    for key in keys:
        state, effect = update(state, KeyPressed(key))
    return state, effect


def _pick(state: WizardState, index: int):
    state.cursor = 0
    return _feed(state, *([DOWN] * index), ENTER)


class ProjectFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
        (self.root / "src").mkdir()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _state(self, **kwargs) -> WizardState:
        return WizardState(screen=Screen.MAIN_MENU, home=str(self.root), cwd=str(self.root), **kwargs)

    def test_entering_prefills_working_directory_and_resets_project(self) -> None:
        state = self._state()
        state.choices.project_ci = "gitlab"

        state, _ = _pick(state, 2)

        self.assertIs(state.screen, Screen.PROJECT_PATH)
        self.assertEqual(state.path_editor.text, str(self.root))
        self.assertEqual(state.choices.project_ci, "")

    def test_full_flow_emits_init_effect(self) -> None:
        state, _ = _pick(self._state(), 2)

        state, _ = _feed(state, ENTER)
        self.assertIs(state.screen, Screen.PROJECT_STACK)
        self.assertEqual(state.choices.project_stack, "python")
        self.assertEqual(state.cursor, 3)

        state, _ = _feed(state, ENTER)
        self.assertIs(state.screen, Screen.PROJECT_MEMORY)

        state, _ = _pick(state, 0)
        self.assertIs(state.screen, Screen.PROJECT_OBSIDIAN_INSTALL)
        state, _ = _pick(state, 0)
        self.assertTrue(state.choices.install_obsidian)
        self.assertIs(state.screen, Screen.PROJECT_ENGRAM)
        state, _ = _pick(state, 1)
        self.assertFalse(state.choices.project_engram)
        state, _ = _pick(state, 0)
        self.assertEqual(state.choices.project_ci, "github")
        self.assertIs(state.screen, Screen.PROJECT_CONFIRM)

        state, effect = _pick(state, 0)

        self.assertIs(state.screen, Screen.PROJECT_INSTALLING)
        self.assertIsInstance(effect, InitProject)
        self.assertEqual(effect.choices.project_path, str(self.root))
        self.assertEqual(effect.choices.project_memory, "obsidian-brain")
        self.assertTrue(effect.choices.init_project)

    def test_detected_obsidian_skips_install_prompt(self) -> None:
        state = WizardState(screen=Screen.PROJECT_MEMORY, system=SystemInfo(has_obsidian=True))

        state, _ = _pick(state, 0)

        self.assertIs(state.screen, Screen.PROJECT_ENGRAM)

    def test_non_brain_memory_goes_straight_to_ci(self) -> None:
        state, _ = _pick(WizardState(screen=Screen.PROJECT_MEMORY), 3)

        self.assertEqual(state.choices.project_memory, "simple")
        self.assertIs(state.screen, Screen.PROJECT_CI)

    def test_unknown_stack_is_stored_empty(self) -> None:
        empty = self.root / "src"
        state = self._state()
        state.cwd = str(empty)
        state, _ = _pick(state, 2)

        state, _ = _feed(state, ENTER)

        self.assertIs(state.screen, Screen.PROJECT_STACK)
        self.assertEqual(state.choices.project_stack, "")
        self.assertEqual(state.cursor, 0)

    def test_missing_directory_stays_with_error(self) -> None:
        state, _ = _pick(self._state(), 2)
        state, _ = _feed(state, Key.rune("x"), ENTER)

        self.assertIs(state.screen, Screen.PROJECT_PATH)
        self.assertIn("Directory not found", state.path_editor.error)

    def test_space_is_typed_into_the_path(self) -> None:
        state, _ = _pick(self._state(), 2)

        state, _ = _feed(state, SPACE)

        self.assertEqual(state.path_editor.text, str(self.root) + " ")
        self.assertFalse(state.leader_armed)

    def test_escape_closes_overlay_before_leaving(self) -> None:
        state, _ = _pick(self._state(), 2)
        state, _ = _feed(state, Key.control("b"))
        self.assertIs(state.path_editor.mode, PathMode.BROWSER)

        state, _ = _feed(state, ESC)
        self.assertIs(state.screen, Screen.PROJECT_PATH)
        self.assertIs(state.path_editor.mode, PathMode.TYPING)

        state, _ = _feed(state, ESC)
        self.assertIs(state.screen, Screen.MAIN_MENU)

    def test_hidden_toggle_in_browser_requests_persistence(self) -> None:
        state, _ = _pick(self._state(), 2)
        state, _ = _feed(state, Key.control("b"))

        state, effect = _feed(state, Key.rune("."))

        self.assertEqual(effect, SaveShowHidden(True))
        self.assertTrue(state.path_editor.show_hidden)

    def test_progress_and_result(self) -> None:
        state = WizardState(screen=Screen.PROJECT_INSTALLING)
        state, _ = update(state, ProjectProgress(Screen.PROJECT_INSTALLING, "Copying templates"))
        state, _ = update(state, ProjectFinished(Screen.PROJECT_INSTALLING))

        self.assertIs(state.screen, Screen.PROJECT_RESULT)
        self.assertEqual(state.project_log_lines, ["Copying templates"])
        self.assertEqual(state.error_message, "")

        state, _ = _feed(state, ENTER)
        self.assertIs(state.screen, Screen.MAIN_MENU)

    def test_tab_with_no_match_reports_error(self) -> None:
        state, _ = _pick(self._state(), 2)
        state, _ = _feed(state, Key.rune("/"), Key.rune("z"), Key.rune("z"), TAB)

        self.assertIs(state.path_editor.mode, PathMode.TYPING)
        self.assertTrue(state.path_editor.error)


if __name__ == "__main__":
    unittest.main()
