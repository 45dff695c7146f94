"""Global key routing in ``update``: quit, leader, space, loading gate, escape.

Also covers the purity contract (the input state is never modified) and the
dropping of completion messages that belong to a screen the user has left.
"""

from __future__ import annotations

import unittest

from dotwizard.input.keys import CTRL_C, DOWN, ENTER, ESC, SPACE, Key
from dotwizard.wizard import KeyPressed, Resize, Screen, Tick, WizardState, update
from dotwizard.wizard.messages import ProjectFinished, StepFinished


def _press(state: WizardState, key: Key) -> WizardState:
    next_state, _effect = update(state, KeyPressed(key))
    return next_state


class UpdatePurityTests(unittest.TestCase):
    def test_key_press_returns_new_state_and_leaves_input_untouched(self) -> None:
        state = WizardState(screen=Screen.MAIN_MENU)

        moved = _press(state, DOWN)

        self.assertIsNot(moved, state)
        self.assertEqual(moved.cursor, 1)
        self.assertEqual(state.cursor, 0)

    def test_resize_updates_dimensions(self) -> None:
        state = WizardState()
        resized, effect = update(state, Resize(120, 40))

        self.assertEqual((resized.width, resized.height), (120, 40))
        self.assertEqual((state.width, state.height), (80, 24))
        self.assertIsNone(effect)

    def test_tick_advances_spinner_only_while_loading(self) -> None:
        idle, _ = update(WizardState(screen=Screen.MAIN_MENU), Tick(5.0))
        busy, _ = update(WizardState(screen=Screen.INSTALLING), Tick(5.0))

        self.assertEqual(idle.spinner_frame, 0)
        self.assertEqual(idle.now, 5.0)
        self.assertEqual(busy.spinner_frame, 1)


class StaleMessageTests(unittest.TestCase):
    def test_completion_for_left_screen_is_dropped(self) -> None:
        state = WizardState(screen=Screen.MAIN_MENU)

        next_state, effect = update(state, StepFinished(Screen.INSTALLING, "clone"))

        self.assertIs(next_state, state)
        self.assertIsNone(effect)

    def test_completion_for_current_screen_is_applied(self) -> None:
        state = WizardState(screen=Screen.PROJECT_INSTALLING)

        next_state, _ = update(state, ProjectFinished(Screen.PROJECT_INSTALLING, "boom"))

        self.assertIs(next_state.screen, Screen.PROJECT_RESULT)
        self.assertEqual(next_state.error_message, "boom")


class GlobalKeyTests(unittest.TestCase):
    def test_ctrl_c_quits_from_any_screen(self) -> None:
        for screen in (Screen.WELCOME, Screen.INSTALLING, Screen.PROJECT_PATH):
            with self.subTest(screen=screen):
                self.assertTrue(_press(WizardState(screen=screen), CTRL_C).quitting)

    def test_space_arms_leader_and_q_quits(self) -> None:
        armed = _press(WizardState(screen=Screen.OS_SELECT), SPACE)
        self.assertTrue(armed.leader_armed)
        self.assertIs(armed.screen, Screen.OS_SELECT)

        quit_state = _press(armed, Key.rune("q"))
        self.assertTrue(quit_state.quitting)
        self.assertFalse(quit_state.leader_armed)

    def test_leader_consumes_any_following_key(self) -> None:
        armed = _press(WizardState(screen=Screen.MAIN_MENU), SPACE)
        after = _press(armed, DOWN)

        self.assertFalse(after.leader_armed)
        self.assertEqual(after.cursor, 0)

    def test_leader_d_toggles_details_while_installing(self) -> None:
        state = WizardState(screen=Screen.INSTALLING)
        state = _press(_press(state, SPACE), Key.rune("d"))
        self.assertTrue(state.show_details)

        state = _press(_press(state, SPACE), Key.rune("q"))
        self.assertFalse(state.quitting)

    def test_space_on_welcome_enters_main_menu(self) -> None:
        self.assertIs(_press(WizardState(), SPACE).screen, Screen.MAIN_MENU)

    def test_space_on_complete_quits(self) -> None:
        self.assertTrue(_press(WizardState(screen=Screen.COMPLETE), SPACE).quitting)

    def test_loading_gate_swallows_keys(self) -> None:
        state = WizardState(screen=Screen.SKILL_BROWSE, skill_loading=True)

        self.assertEqual(_press(state, DOWN).cursor, 0)

    def test_escape_abandons_a_skill_load(self) -> None:
        state = WizardState(screen=Screen.SKILL_BROWSE, skill_loading=True)

        after = _press(state, ESC)

        self.assertIs(after.screen, Screen.SKILL_MENU)
        self.assertFalse(after.skill_loading)

    def test_escape_is_inert_while_installing(self) -> None:
        for screen in (Screen.INSTALLING, Screen.PROJECT_INSTALLING):
            with self.subTest(screen=screen):
                self.assertIs(_press(WizardState(screen=screen), ESC).screen, screen)

    def test_escape_on_main_menu_quits(self) -> None:
        self.assertTrue(_press(WizardState(screen=Screen.MAIN_MENU), ESC).quitting)

    def test_enter_on_welcome_enters_main_menu(self) -> None:
        self.assertIs(_press(WizardState(), ENTER).screen, Screen.MAIN_MENU)


if __name__ == "__main__":
    unittest.main()
