"""Tests for ANSI-aware display width and clipping."""

from __future__ import annotations

import unittest

from dotwizard.render.ansi import clip_ansi_line, display_width, strip_ansi


class DisplayWidthTests(unittest.TestCase):
    def test_escapes_are_zero_width_and_wide_chars_are_two(self) -> None:
        self.assertEqual(display_width("\x1b[1;38;5;81mab\x1b[0m"), 2)
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)
        self.assertEqual(display_width("ab\tc"), 9)

    def test_strip(self) -> None:
        self.assertEqual(strip_ansi("\x1b[7m x \x1b[0m"), " x ")


class ClipAnsiLineTests(unittest.TestCase):
    def test_keeps_trailing_reset_after_clip(self) -> None:
        self.assertEqual(clip_ansi_line("\x1b[31mabcdef\x1b[0m", 3), "\x1b[31mabc\x1b[0m")

    def test_does_not_split_wide_characters(self) -> None:
        self.assertEqual(clip_ansi_line("a日本", 2), "a")

    def test_tabs_become_spaces(self) -> None:
        self.assertEqual(clip_ansi_line("ab\tc", 9), "ab      c")
        self.assertEqual(clip_ansi_line("\tb", 4), "")

    def test_non_positive_width(self) -> None:
        self.assertEqual(clip_ansi_line("abc", 0), "")


if __name__ == "__main__":
    unittest.main()
