"""Tests for the wizard loop: ticks, redraws and message draining."""

from __future__ import annotations

import unittest
from unittest import mock

from dotwizard.input.keys import ENTER, Key
from dotwizard.runtime.bridge import MessagePort
from dotwizard.runtime.loop import RuntimeLoopTiming, WizardLoop, compose_frame, run_main_loop
from dotwizard.wizard import KeyPressed, Screen, WizardState
from dotwizard.wizard.messages import BackupsLoaded, ListBackups, StepFinished


def _render(state: WizardState, width: int, height: int) -> list[str]:
    return [state.screen.value] + [""] * (height - 1)


class ComposeFrameTests(unittest.TestCase):
    def test_homes_cursor_and_clears_each_row(self) -> None:
        frame = compose_frame(["a", "b", "c"], 2)

        self.assertEqual(frame, "\x1b[Ha\x1b[K\r\nb\x1b[K\x1b[J")


class WizardLoopTests(unittest.TestCase):
    def setUp(self) -> None:
        self.port = MessagePort()
        self.runner = mock.Mock()
        self.loop = WizardLoop(WizardState(screen=Screen.MAIN_MENU), self.port, self.runner, _render)

    def test_start_executes_initial_effects(self) -> None:
        self.loop.start([ListBackups()])

        self.runner.execute.assert_called_once_with(ListBackups())

    def test_dispatch_runs_returned_effect(self) -> None:
        self.loop.dispatch(KeyPressed(Key.rune("j")))

        self.assertEqual(self.loop.state.cursor, 1)
        self.runner.execute.assert_called_once_with(None)

    def test_pump_applies_resize_and_drained_messages(self) -> None:
        self.port.send(BackupsLoaded(()))
        self.loop.frame()

        self.loop.pump(100, 30, now=0.5)

        self.assertEqual((self.loop.state.width, self.loop.state.height), (100, 30))
        self.assertTrue(self.loop.dirty)
        self.assertEqual(self.port.drain(), [])

    def test_idle_tick_does_not_redraw(self) -> None:
        self.loop.pump(80, 24, now=0.0)
        self.loop.frame()

        self.loop.pump(80, 24, now=5.0)

        self.assertEqual(self.loop.state.now, 5.0)
        self.assertIsNone(self.loop.frame())

    def test_loading_tick_redraws_on_spinner_cadence(self) -> None:
        self.loop.state.screen = Screen.INSTALLING
        self.loop.frame()

        self.loop.pump(80, 24, now=0.05)
        self.assertIsNone(self.loop.frame())

        self.loop.pump(80, 24, now=0.2)
        self.assertEqual(self.loop.state.spinner_frame, 1)
        self.assertIsNotNone(self.loop.frame())

    def test_stale_completion_still_drains(self) -> None:
        self.port.send(StepFinished(Screen.INSTALLING, "clone"))

        self.loop.pump(80, 24, now=0.0)

        self.assertIs(self.loop.state.screen, Screen.MAIN_MENU)

    def test_frame_renders_once_until_dirty_again(self) -> None:
        frame = self.loop.frame()

        self.assertTrue(frame.startswith("\x1b[Hmain_menu"))
        self.assertIsNone(self.loop.frame())


class RunMainLoopTests(unittest.TestCase):
    def test_runs_until_quit_and_writes_frames(self) -> None:
        terminal = mock.MagicMock()
        terminal.size.return_value = (80, 24)
        runner = mock.Mock()
        loop = WizardLoop(
            WizardState(screen=Screen.MAIN_MENU),
            MessagePort(),
            runner,
            _render,
            RuntimeLoopTiming(key_poll_ms=1),
        )
        # Bottom row of the main menu is Exit.
        keys = iter([None] + [Key.rune("j")] * 4 + [ENTER])

        with mock.patch("dotwizard.runtime.loop.read_key", side_effect=lambda fd, timeout_ms: next(keys)):
            final = run_main_loop(loop, terminal, 0, (ListBackups(),))

        self.assertTrue(final.quitting)
        terminal.raw_mode.assert_called_once_with()
        runner.execute.assert_any_call(ListBackups())
        self.assertTrue(terminal.write.called)


if __name__ == "__main__":
    unittest.main()
