"""Install-step planning and execution against a fake home and cache."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dotwizard.services.installer import Command, CopyConfig, StepError, StepRunner
from dotwizard.services.process import CommandError
from dotwizard.services.system import SystemInfo
from dotwizard.wizard.choices import UserChoices
from dotwizard.wizard.steps import InstallStep


class StepPlanTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.home = root / "home"
        self.cache = root / "cache"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _runner(self, system: SystemInfo, **kwargs) -> StepRunner:
        return StepRunner(system, self.home, cache_dir=self.cache, **kwargs)

    def test_clone_then_pull_once_checked_out(self) -> None:
        runner = self._runner(SystemInfo(os="mac"))
        checkout = str(self.cache / "Gentleman.Dots")

        (first,) = runner.plan("clone", UserChoices())
        self.assertEqual(first.argv[:4], ("git", "clone", "--depth", "1"))
        self.assertEqual(first.argv[-1], checkout)

        (self.cache / "Gentleman.Dots" / ".git").mkdir(parents=True)
        (second,) = runner.plan("clone", UserChoices())
        self.assertEqual(second.argv, ("git", "-C", checkout, "pull", "--ff-only"))

    def test_debian_deps_use_apt(self) -> None:
        runner = self._runner(SystemInfo(os="debian"))

        actions = runner.plan("deps", UserChoices(os="linux"))

        self.assertEqual(
            actions,
            [
                Command(("sudo", "apt-get", "update")),
                Command(("sudo", "apt-get", "install", "-y", "build-essential", "curl", "file", "git", "unzip")),
            ],
        )

    def test_mac_terminal_installs_cask_and_copies_config(self) -> None:
        runner = self._runner(SystemInfo(os="mac"))

        actions = runner.plan("terminal", UserChoices(os="mac", terminal="alacritty"))

        self.assertEqual(
            actions,
            [
                Command(("brew", "install", "--cask", "alacritty")),
                CopyConfig("alacritty.toml", ".config/alacritty/alacritty.toml"),
            ],
        )

    def test_termux_font_and_shell(self) -> None:
        runner = self._runner(SystemInfo(os="termux", is_termux=True))
        choices = UserChoices(os="termux", shell="nushell")

        (font,) = runner.plan("font", choices)
        self.assertIn(str(self.home / ".termux" / "font.ttf"), font.argv)
        self.assertEqual(runner.plan("setshell", choices), [Command(("chsh", "-s", "nu"))])
        self.assertEqual(runner.plan("shell", choices)[0], Command(("pkg", "install", "-y", "nushell", "starship")))

    def test_ai_framework_arguments(self) -> None:
        runner = self._runner(SystemInfo(os="mac"))
        preset = UserChoices(ai_framework_preset="frontend", ai_tools=["claude", "codex"])
        custom = UserChoices(ai_framework_modules=["hooks", "mcp"], install_agent_teams_lite=True)

        (preset_cmd,) = runner.plan("aiframework", preset)
        (custom_cmd,) = runner.plan("aiframework", custom)

        self.assertEqual(preset_cmd.argv[2:], ("--preset", "frontend", "--tools", "claude,codex"))
        self.assertEqual(custom_cmd.argv[2:], ("--modules", "hooks,mcp", "--agent-teams-lite"))

    def test_ai_tools_ignore_unknown_ids(self) -> None:
        runner = self._runner(SystemInfo(os="mac"))

        actions = runner.plan("aitools", UserChoices(ai_tools=["gemini", "mystery"]))

        self.assertEqual(actions, [Command(("npm", "install", "-g", "@google/gemini-cli"))])

    def test_python_steps_and_unknown_step(self) -> None:
        runner = self._runner(SystemInfo(os="mac"))

        self.assertEqual(runner.plan("cleanup", UserChoices()), [])
        with self.assertRaises(StepError) as ctx:
            runner.plan("teleport", UserChoices())
        self.assertEqual(ctx.exception.step_id, "teleport")


class StepRunTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        self.home = root / "home"
        self.home.mkdir()
        self.cache = root / "cache"
        self.backups = root / "backups"
        self.lines: list[str] = []

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _runner(self, **kwargs) -> StepRunner:
        return StepRunner(
            SystemInfo(os="mac"),
            self.home,
            cache_dir=self.cache,
            backup_root=self.backups,
            **kwargs,
        )

    def test_dry_run_echoes_commands_without_touching_disk(self) -> None:
        runner = self._runner(dry_run=True)

        runner.run(InstallStep("clone", "Clone", ""), UserChoices(), self.lines.append)

        self.assertEqual(len(self.lines), 1)
        self.assertTrue(self.lines[0].startswith("$ git clone --depth 1 "))
        self.assertFalse(self.cache.exists())

    def test_copies_config_out_of_checkout(self) -> None:
        source = self.cache / "Gentleman.Dots" / "GentlemanTmux" / ".tmux.conf"
        source.parent.mkdir(parents=True)
        source.write_text("set -g mouse on\n", encoding="utf-8")
        (self.home / ".tmux.conf").write_text("old\n", encoding="utf-8")
        runner = self._runner()

        with mock.patch("dotwizard.services.installer.stream_command") as stream_mock:
            runner.run(InstallStep("wm", "Window manager", ""), UserChoices(os="mac", window_manager="tmux"), self.lines.append)

        stream_mock.assert_called_once()
        self.assertEqual(stream_mock.call_args.args[0], ("brew", "install", "tmux"))
        self.assertEqual((self.home / ".tmux.conf").read_text(encoding="utf-8"), "set -g mouse on\n")
        self.assertEqual(self.lines, ["Copying GentlemanTmux/.tmux.conf -> ~/.tmux.conf"])

    def test_missing_config_source_fails_the_step(self) -> None:
        runner = self._runner()

        with mock.patch("dotwizard.services.installer.stream_command"):
            with self.assertRaisesRegex(StepError, "config not found in checkout"):
                runner.run(InstallStep("nvim", "Neovim", ""), UserChoices(os="mac"), self.lines.append)

    def test_command_failure_becomes_step_error(self) -> None:
        runner = self._runner()
        failure = CommandError(["brew"], "brew install fish exited with status 1")

        with mock.patch("dotwizard.services.installer.stream_command", side_effect=failure):
            with self.assertRaises(StepError) as ctx:
                runner.run(InstallStep("shell", "Shell", ""), UserChoices(os="mac", shell="fish"), self.lines.append)

        self.assertEqual(ctx.exception.step_id, "shell")
        self.assertIn("exited with status 1", str(ctx.exception))

    def test_interactive_steps_run_attached(self) -> None:
        runner = self._runner()
        step = InstallStep("setshell", "Set shell", "", interactive=True)

        with mock.patch("dotwizard.services.installer.run_attached") as attached_mock, mock.patch(
            "dotwizard.services.installer.stream_command"
        ) as stream_mock:
            runner.run(step, UserChoices(os="mac", shell="fish"), self.lines.append)

        attached_mock.assert_called_once()
        self.assertEqual(attached_mock.call_args.args[0][:2], ("chsh", "-s"))
        stream_mock.assert_not_called()

    def test_backup_step_copies_existing_configs(self) -> None:
        (self.home / ".zshrc").write_text("export A=1\n", encoding="utf-8")
        runner = self._runner()

        runner.run(InstallStep("backup", "Backup", ""), UserChoices(), self.lines.append, (".zshrc",))

        (backup_dir,) = list(self.backups.iterdir())
        self.assertEqual((backup_dir / "files" / ".zshrc").read_text(encoding="utf-8"), "export A=1\n")
        self.assertTrue(self.lines[0].startswith("Backed up 1 items to "))

    def test_cleanup_removes_downloads(self) -> None:
        downloads = self.cache / "downloads"
        downloads.mkdir(parents=True)
        (downloads / "IosevkaTerm.zip").write_bytes(b"zip")

        self._runner().run(InstallStep("cleanup", "Cleanup", ""), UserChoices(), self.lines.append)

        self.assertFalse(downloads.exists())
        self.assertEqual(self.lines, ["Removing temporary downloads"])


if __name__ == "__main__":
    unittest.main()
