"""Key-level behavior of the project path editor: typing, completion and browsing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dotwizard.input.keys import BACKSPACE, CTRL_B, CTRL_U, CTRL_W, DOWN, ENTER, ESC, HOME, TAB, Key
from dotwizard.pathinput.browser import FIXED_ROWS, PARENT_ROW
from dotwizard.pathinput.completion import NO_MATCHES_MESSAGE
from dotwizard.pathinput.editor import (
    EMPTY_PATH_MESSAGE,
    PathEditor,
    PathEditorState,
    PathMode,
    validate_directory,
)


def _type(editor: PathEditor, text: str) -> None:
    for ch in text:
        editor.handle_key(Key.rune(ch))


class PathEditorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "alpha").mkdir()
        (self.root / "alpine").mkdir()
        (self.root / "beta").mkdir()
        (self.root / ".secret").mkdir()
        (self.root / "notes.txt").write_text("x", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _editor(self, text: str = "", show_hidden: bool = False) -> PathEditor:
        return PathEditor(PathEditorState.with_text(text, show_hidden), str(self.root))

    def test_typing_clears_error(self) -> None:
        editor = self._editor()
        editor.state.error = "old"
        _type(editor, "/x")

        self.assertEqual(editor.state.text, "/x")
        self.assertEqual(editor.state.error, "")

    def test_single_candidate_completes_inline(self) -> None:
        editor = self._editor(os.path.join(str(self.root), "b"))
        editor.handle_key(TAB)

        self.assertEqual(editor.state.text, os.path.join(str(self.root), "beta") + "/")
        self.assertIs(editor.state.mode, PathMode.TYPING)

    def test_multiple_candidates_open_dropdown_and_commit(self) -> None:
        editor = self._editor(os.path.join(str(self.root), "al"))
        editor.handle_key(TAB)

        self.assertIs(editor.state.mode, PathMode.COMPLETION)
        self.assertEqual(editor.state.completion.candidates, ["alpha", "alpine"])

        editor.handle_key(DOWN)
        editor.handle_key(ENTER)

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertEqual(editor.state.text, os.path.join(str(self.root), "alpine") + "/")

    def test_no_candidates_sets_error(self) -> None:
        editor = self._editor(os.path.join(str(self.root), "zzz"))
        editor.handle_key(TAB)

        self.assertEqual(editor.state.error, NO_MATCHES_MESSAGE)
        self.assertIs(editor.state.mode, PathMode.TYPING)

    def test_escape_in_dropdown_keeps_buffer(self) -> None:
        text = os.path.join(str(self.root), "al")
        editor = self._editor(text)
        editor.handle_key(TAB)
        editor.handle_key(ESC)

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertEqual(editor.state.text, text)

    def test_printable_key_in_dropdown_closes_it_and_types(self) -> None:
        text = os.path.join(str(self.root), "al")
        editor = self._editor(text)
        editor.handle_key(TAB)
        editor.handle_key(Key.rune("p"))

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertEqual(editor.state.text, text + "p")

    def test_submit_empty_reports_error(self) -> None:
        editor = self._editor("   ")
        result = editor.handle_key(ENTER)

        self.assertIsNone(result.submitted)
        self.assertEqual(editor.state.error, EMPTY_PATH_MESSAGE)

    def test_submit_valid_directory_normalizes_buffer(self) -> None:
        editor = self._editor(os.path.join(str(self.root), "alpha") + "/")
        result = editor.handle_key(ENTER)

        self.assertEqual(result.submitted, os.path.join(str(self.root), "alpha"))
        self.assertEqual(editor.state.text, result.submitted)
        self.assertEqual(editor.state.error, "")

    def test_submit_file_is_rejected(self) -> None:
        absolute, error = validate_directory(os.path.join(str(self.root), "notes.txt"), str(self.root))

        self.assertIsNone(absolute)
        self.assertTrue(error.startswith("Path is not a directory"))

    def test_ctrl_u_clears_buffer(self) -> None:
        editor = self._editor("/some/path")
        editor.handle_key(CTRL_U)

        self.assertEqual(editor.state.text, "")

    def test_browser_lists_visible_directories_and_selects_root(self) -> None:
        editor = self._editor(str(self.root))
        editor.handle_key(CTRL_B)

        browser = editor.state.browser
        self.assertIs(editor.state.mode, PathMode.BROWSER)
        self.assertEqual(browser.entries, ["alpha", "alpine", "beta"])

        editor.handle_key(ENTER)

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertEqual(editor.state.text, str(self.root))

    def test_browser_drills_into_entry_and_back_to_parent(self) -> None:
        editor = self._editor(str(self.root))
        editor.handle_key(CTRL_B)
        for _ in range(FIXED_ROWS):
            editor.handle_key(DOWN)
        editor.handle_key(ENTER)

        self.assertEqual(editor.state.browser.root, os.path.join(str(self.root), "alpha"))

        editor.state.browser.cursor = PARENT_ROW
        editor.handle_key(ENTER)

        self.assertEqual(editor.state.browser.root, str(self.root))

    def test_browser_dot_toggles_hidden_and_reports_change(self) -> None:
        editor = self._editor(str(self.root))
        editor.handle_key(CTRL_B)
        result = editor.handle_key(Key.rune("."))

        self.assertTrue(result.show_hidden_changed)
        self.assertTrue(editor.state.show_hidden)
        self.assertIn(".secret", editor.state.browser.entries)

    def test_ctrl_w_at_buffer_start_does_nothing(self) -> None:
        editor = self._editor("/tmp/foo")
        editor.handle_key(HOME)
        editor.handle_key(CTRL_W)

        self.assertEqual(editor.state.text, "/tmp/foo")
        self.assertEqual(editor.state.buffer.cursor, 0)

    def test_ctrl_w_removes_last_segment(self) -> None:
        editor = self._editor("/tmp/foo/bar")
        editor.handle_key(CTRL_W)

        self.assertEqual(editor.state.text, "/tmp/foo/")

    def test_backspace_past_start_leaves_empty_buffer(self) -> None:
        editor = self._editor("ab")
        for _ in range(5):
            editor.handle_key(BACKSPACE)

        self.assertEqual(editor.state.text, "")
        self.assertEqual(editor.state.buffer.cursor, 0)

    def test_escape_after_drilling_in_keeps_typed_buffer(self) -> None:
        typed = str(self.root) + "/"
        editor = self._editor(typed)
        editor.handle_key(CTRL_B)
        for _ in range(FIXED_ROWS):
            editor.handle_key(DOWN)
        editor.handle_key(ENTER)
        self.assertEqual(editor.state.browser.root, os.path.join(str(self.root), "alpha"))

        editor.handle_key(ESC)

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertIsNone(editor.state.browser)
        self.assertEqual(editor.state.text, typed)
        self.assertEqual(editor.state.buffer.cursor, len(typed))

    def test_shared_prefix_lists_every_match(self) -> None:
        (self.root / "projects").mkdir()
        (self.root / "prometheus").mkdir()
        (self.root / "pr.txt").write_text("x", encoding="utf-8")
        editor = self._editor(os.path.join(str(self.root), "pro"))

        editor.handle_key(TAB)

        self.assertIs(editor.state.mode, PathMode.COMPLETION)
        self.assertEqual(editor.state.completion.candidates, ["projects", "prometheus"])
        self.assertEqual(editor.state.completion.highlighted, 0)

        editor.handle_key(TAB)

        self.assertIs(editor.state.mode, PathMode.TYPING)
        self.assertEqual(editor.state.text, os.path.join(str(self.root), "projects") + "/")

    def test_close_overlay_reports_whether_anything_closed(self) -> None:
        editor = self._editor(str(self.root))
        self.assertFalse(editor.close_overlay())

        editor.handle_key(CTRL_B)
        self.assertTrue(editor.close_overlay())
        self.assertIsNone(editor.state.browser)


if __name__ == "__main__":
    unittest.main()
