"""Screen projection of wizard state."""

from __future__ import annotations

import unittest

from dotwizard.content.lazyvim import LAZYVIM_TOPICS
from dotwizard.render.ansi import display_width
from dotwizard.render.theme import PLAIN_THEME
from dotwizard.render.view import RenderContext, format_duration, make_renderer, render_lines, topic_lines
from dotwizard.wizard import Screen, WizardState
from dotwizard.wizard.steps import InstallStep, StepStatus


class RenderLinesTests(unittest.TestCase):
    def test_main_menu_layout(self) -> None:
        lines = render_lines(WizardState(screen=Screen.MAIN_MENU), 60, 20, no_color=True)

        self.assertEqual(len(lines), 20)
        self.assertEqual(lines[0], "Main Menu")
        self.assertEqual(lines[3], "▸ 🚀 Start Installation")
        self.assertEqual(lines[4], "  📚 Learn & Practice")
        self.assertEqual(lines[-1], "↑/↓: move • enter: select • esc: quit")

    def test_rows_are_clipped_to_width(self) -> None:
        lines = render_lines(WizardState(screen=Screen.WELCOME), 12, 30)

        self.assertTrue(all(display_width(line) <= 12 for line in lines))

    def test_tiny_terminal_still_returns_requested_height(self) -> None:
        self.assertEqual(len(render_lines(WizardState(screen=Screen.MAIN_MENU), 5, 2, no_color=True)), 2)

    def test_leader_help_replaces_footer(self) -> None:
        state = WizardState(screen=Screen.MAIN_MENU, leader_armed=True)

        self.assertEqual(render_lines(state, 60, 12, no_color=True)[-1], "leader: q quit • d details")

    def test_installing_shows_step_icons_and_latest_log_line(self) -> None:
        state = WizardState(screen=Screen.INSTALLING)
        state.steps = [
            InstallStep("clone", "Clone Repository", "", status=StepStatus.DONE),
            InstallStep("shell", "Install Shell", "", status=StepStatus.RUNNING),
            InstallStep("cleanup", "Cleanup", ""),
        ]
        state.log_lines = ["older", "Installing fish..."]

        body = render_lines(state, 60, 20, no_color=True)[3:]

        self.assertEqual(body[0], "✓ Clone Repository")
        self.assertEqual(body[1], f"{state.spinner} Install Shell")
        self.assertEqual(body[2], "○ Cleanup")
        self.assertIn("  Installing fish...", body)
        self.assertNotIn("  older", body)

    def test_error_screen_splits_message(self) -> None:
        state = WizardState(screen=Screen.ERROR, error_message="Step failed\nnetwork down")

        lines = render_lines(state, 60, 12, no_color=True)

        self.assertEqual(lines[3:5], ["Step failed", "network down"])

    def test_skill_loading_spinner(self) -> None:
        state = WizardState(screen=Screen.SKILL_BROWSE, skill_loading=True)

        lines = render_lines(state, 60, 12, no_color=True)

        self.assertEqual(lines[3], f"{state.spinner} Loading skills catalog...")

    def test_make_renderer_binds_color_mode(self) -> None:
        render = make_renderer(no_color=True)

        lines = render(WizardState(screen=Screen.COMPLETE), 60, 12)

        self.assertFalse(any("\x1b" in line for line in lines))


class TopicLinesTests(unittest.TestCase):
    def test_plain_code_block_without_color(self) -> None:
        topic = next(topic for topic in LAZYVIM_TOPICS if topic.code)
        ctx = RenderContext(width=80, rows=20, theme=PLAIN_THEME, style="monokai", no_color=True)

        rows = topic_lines(topic, ctx)

        self.assertEqual(rows[0], topic.title)
        self.assertIn("  " + topic.code.split("\n")[0], rows)
        self.assertFalse(any("\x1b" in row for row in rows))


class FormatDurationTests(unittest.TestCase):
    def test_formats(self) -> None:
        self.assertEqual(format_duration(65.0), "1m 05s")
        self.assertEqual(format_duration(9.7), "9s")
        self.assertEqual(format_duration(-3), "0s")


if __name__ == "__main__":
    unittest.main()
