"""Tests for path splitting, candidate listing and completion splicing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dotwizard.pathinput.completion import (
    CompletionState,
    find_candidates,
    splice_completion,
    split_path_for_completion,
)


class SplitPathTests(unittest.TestCase):
    def test_empty_text_lists_home(self) -> None:
        self.assertEqual(split_path_for_completion("", "/home/me"), ("/home/me", ""))

    def test_trailing_separator_lists_the_directory_itself(self) -> None:
        self.assertEqual(split_path_for_completion("/usr/", "/home/me"), ("/usr", ""))

    def test_last_component_is_the_prefix(self) -> None:
        self.assertEqual(split_path_for_completion("/usr/lo", "/home/me"), ("/usr", "lo"))

    def test_tilde_expands_against_home(self) -> None:
        self.assertEqual(split_path_for_completion("~/pro", "/home/me"), ("/home/me", "pro"))


class SpliceTests(unittest.TestCase):
    def test_replaces_prefix_after_last_separator(self) -> None:
        self.assertEqual(splice_completion("/home/me/pr", "projects", "/home/me"), "/home/me/projects/")

    def test_empty_text_joins_home(self) -> None:
        self.assertEqual(splice_completion("", "code", "/home/me"), "/home/me/code/")


class CompletionStateTests(unittest.TestCase):
    def test_move_clamps_without_wrapping(self) -> None:
        state = CompletionState(["a", "b"])
        state.move(-1)
        self.assertEqual(state.highlighted, 0)
        state.move(5)
        self.assertEqual(state.highlighted, 1)
        self.assertEqual(state.current, "b")

    def test_empty_candidates_have_no_current(self) -> None:
        state = CompletionState([])
        state.move(1)
        self.assertIsNone(state.current)


class FindCandidatesTests(unittest.TestCase):
    def test_matches_directories_case_insensitively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "Projects").mkdir()
            (root / "photos").mkdir()
            (root / "plain.txt").write_text("x", encoding="utf-8")

            self.assertEqual(find_candidates(os.path.join(tmp, "p"), "/nowhere", False), ["Projects", "photos"])


if __name__ == "__main__":
    unittest.main()
