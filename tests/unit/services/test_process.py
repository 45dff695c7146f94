"""Tests for streamed and attached command execution."""

from __future__ import annotations

import subprocess
import sys
import unittest
from unittest import mock

from dotwizard.services.process import CommandError, run_attached, stream_command


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class StreamCommandTests(unittest.TestCase):
    def test_dry_run_only_echoes_the_command(self) -> None:
        lines: list[str] = []
        with mock.patch("dotwizard.services.process.subprocess.Popen") as popen_mock:
            stream_command(["brew", "install", "fish shell"], lines.append, dry_run=True)

        popen_mock.assert_not_called()
        self.assertEqual(lines, ["$ brew install 'fish shell'"])

    def test_streams_non_empty_lines(self) -> None:
        lines: list[str] = []

        stream_command(_python("print('one'); print(''); print('two  ')"), lines.append)

        self.assertEqual(lines, ["one", "two"])

    def test_failure_carries_output_tail(self) -> None:
        code = "import sys\nfor i in range(7): print(f'line {i}')\nsys.exit(3)"

        with self.assertRaises(CommandError) as ctx:
            stream_command(_python(code), lambda line: None)

        message = str(ctx.exception)
        self.assertIn("exited with status 3", message)
        self.assertTrue(message.endswith("line 2\nline 3\nline 4\nline 5\nline 6"))
        self.assertNotIn("line 1", message)

    def test_missing_binary(self) -> None:
        with self.assertRaisesRegex(CommandError, "^dotwizard-no-such-binary: "):
            stream_command(["dotwizard-no-such-binary"], lambda line: None)


class RunAttachedTests(unittest.TestCase):
    def test_dry_run_skips_execution(self) -> None:
        with mock.patch("dotwizard.services.process.subprocess.run") as run_mock:
            run_attached(["chsh", "-s", "/usr/bin/fish"], dry_run=True)

        run_mock.assert_not_called()

    def test_non_zero_exit_raises(self) -> None:
        failed = subprocess.CompletedProcess(["chsh"], 1)
        with mock.patch("dotwizard.services.process.subprocess.run", return_value=failed):
            with self.assertRaisesRegex(CommandError, "chsh -s fish exited with status 1"):
                run_attached(["chsh", "-s", "fish"])


if __name__ == "__main__":
    unittest.main()
