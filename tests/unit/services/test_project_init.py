"""Tests for project init script arguments and execution."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dotwizard.services.process import CommandError
from dotwizard.services.project_init import ProjectInitError, init_arguments, run_project_init
from dotwizard.wizard.choices import UserChoices


class InitArgumentsTests(unittest.TestCase):
    def test_all_flags(self) -> None:
        choices = UserChoices(
            project_stack="python",
            project_memory="obsidian-brain",
            project_ci="github",
            project_engram=True,
            install_obsidian=True,
        )

        self.assertEqual(
            init_arguments(choices),
            [
                "--non-interactive",
                "--stack=python",
                "--memory=obsidian-brain",
                "--ci=github",
                "--engram",
                "--install-obsidian",
            ],
        )

    def test_unknown_stack_is_omitted(self) -> None:
        self.assertEqual(init_arguments(UserChoices(project_ci="none")), ["--non-interactive", "--ci=none"])


class RunProjectInitTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.lines: list[str] = []
        self.choices = UserChoices(project_path=str(self.root), project_stack="python")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_requires_a_path(self) -> None:
        with self.assertRaisesRegex(ProjectInitError, "no project path"):
            run_project_init(UserChoices(), self.lines.append)

    def test_dry_run_fetches_then_runs_script(self) -> None:
        starter = self.root / "starter"

        run_project_init(self.choices, self.lines.append, starter_dir=starter, dry_run=True)

        self.assertEqual(self.lines[0], "Fetching project starter framework...")
        self.assertTrue(self.lines[1].startswith("$ git clone --depth 1 "))
        self.assertEqual(self.lines[2], "Running init-project.sh...")
        self.assertEqual(
            self.lines[3],
            f"$ bash {starter / 'init-project.sh'} --non-interactive --stack=python",
        )
        self.assertFalse(starter.exists())

    def test_configured_script_runs_in_project_dir(self) -> None:
        script = self.root / "init.sh"
        script.write_text("#!/bin/bash\n", encoding="utf-8")

        with mock.patch("dotwizard.services.project_init.stream_command") as stream_mock:
            run_project_init(self.choices, self.lines.append, script=str(script))

        argv = stream_mock.call_args.args[0]
        self.assertEqual(argv[:2], ("bash", str(script)))
        self.assertEqual(stream_mock.call_args.kwargs["cwd"], str(self.root))

    def test_missing_configured_script(self) -> None:
        with self.assertRaisesRegex(ProjectInitError, "init script not found"):
            run_project_init(self.choices, self.lines.append, script=str(self.root / "missing.sh"))

    def test_script_failure(self) -> None:
        script = self.root / "init.sh"
        script.write_text("exit 1\n", encoding="utf-8")
        failure = CommandError(["bash"], "bash init.sh exited with status 1")

        with mock.patch("dotwizard.services.project_init.stream_command", side_effect=failure):
            with self.assertRaisesRegex(ProjectInitError, "exited with status 1"):
                run_project_init(self.choices, self.lines.append, script=str(script))


if __name__ == "__main__":
    unittest.main()
