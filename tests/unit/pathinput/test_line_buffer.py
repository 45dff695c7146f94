"""Cursor and editing rules of the rune line buffer behind the path prompt."""

from __future__ import annotations

import unittest

from dotwizard.pathinput.buffer import LineBuffer
from dotwizard.pathinput.completion import splice_completion


class LineBufferTests(unittest.TestCase):
    def test_from_text_places_cursor_at_end(self) -> None:
        buffer = LineBuffer.from_text("héllo")

        self.assertEqual(buffer.cursor, 5)
        self.assertEqual(len(buffer), 5)

    def test_insert_in_the_middle(self) -> None:
        buffer = LineBuffer.from_text("/tmp")
        buffer.move_home()
        buffer.move_right()
        buffer.insert("xy")

        self.assertEqual(buffer.text, "/xytmp")
        self.assertEqual(buffer.cursor, 3)

    def test_backspace_and_delete_are_noops_at_the_edges(self) -> None:
        buffer = LineBuffer.from_text("ab")
        buffer.delete()
        self.assertEqual(buffer.text, "ab")

        buffer.move_home()
        buffer.backspace()
        self.assertEqual(buffer.text, "ab")
        self.assertEqual(buffer.cursor, 0)

        buffer.delete()
        self.assertEqual(buffer.text, "b")

    def test_cursor_moves_are_clamped(self) -> None:
        buffer = LineBuffer.from_text("a")
        buffer.move_right()
        buffer.move_right()
        self.assertEqual(buffer.cursor, 1)
        buffer.move_left()
        buffer.move_left()
        self.assertEqual(buffer.cursor, 0)

    def test_out_of_range_cursor_is_clamped_on_construction(self) -> None:
        self.assertEqual(LineBuffer(list("abc"), cursor=10).cursor, 3)
        self.assertEqual(LineBuffer(list("abc"), cursor=-4).cursor, 0)

    def test_delete_word_stops_at_previous_separator(self) -> None:
        buffer = LineBuffer.from_text("/home/user/projects")
        buffer.delete_word()
        self.assertEqual(buffer.text, "/home/user/")

        buffer.delete_word()
        self.assertEqual(buffer.text, "/home/")

    def test_delete_word_on_plain_word_clears_it(self) -> None:
        buffer = LineBuffer.from_text("projects")
        buffer.delete_word()

        self.assertEqual(buffer.text, "")
        self.assertEqual(buffer.cursor, 0)

    def test_delete_word_at_start_is_a_noop(self) -> None:
        buffer = LineBuffer.from_text("/tmp/foo")
        buffer.move_home()
        buffer.delete_word()

        self.assertEqual((buffer.text, buffer.cursor), ("/tmp/foo", 0))

    def test_delete_word_keeps_separator_before_last_segment(self) -> None:
        buffer = LineBuffer.from_text("/tmp/foo/bar")
        buffer.delete_word()

        self.assertEqual((buffer.text, buffer.cursor), ("/tmp/foo/", 9))

    def test_delete_word_skips_trailing_separators_first(self) -> None:
        buffer = LineBuffer.from_text("/tmp/foo//")
        buffer.delete_word()

        self.assertEqual(buffer.text, "/tmp/")

    def test_backspace_until_empty(self) -> None:
        buffer = LineBuffer.from_text("ab/é")
        for _ in range(10):
            buffer.backspace()

        self.assertEqual((buffer.text, buffer.cursor), ("", 0))

    def test_clear_empties_buffer(self) -> None:
        buffer = LineBuffer.from_text("abc")
        buffer.clear()

        self.assertEqual((buffer.text, buffer.cursor), ("", 0))


class LineBufferSequenceTests(unittest.TestCase):
    def _assert_cursor_in_bounds(self, buffer: LineBuffer, step: str) -> None:
        self.assertGreaterEqual(buffer.cursor, 0, step)
        self.assertLessEqual(buffer.cursor, len(buffer.text), step)

    def test_cursor_stays_in_bounds_across_mixed_edits(self) -> None:
        buffer = LineBuffer()
        steps = [
            ("insert", lambda: buffer.insert("/home/usér/pro")),
            ("left", buffer.move_left),
            ("left", buffer.move_left),
            ("delete", buffer.delete),
            ("backspace", buffer.backspace),
            ("end", buffer.move_end),
            ("splice", lambda: buffer.set_text(splice_completion(buffer.text, "projects", "/home/usér"))),
            ("right", buffer.move_right),
            ("delete_word", buffer.delete_word),
            ("home", buffer.move_home),
            ("left", buffer.move_left),
            ("backspace", buffer.backspace),
            ("delete_word", buffer.delete_word),
            ("insert", lambda: buffer.insert("~")),
            ("end", buffer.move_end),
            ("delete", buffer.delete),
            ("delete_word", buffer.delete_word),
            ("delete_word", buffer.delete_word),
            ("delete_word", buffer.delete_word),
            ("delete_word", buffer.delete_word),
            ("backspace", buffer.backspace),
            ("right", buffer.move_right),
            ("clear", buffer.clear),
            ("delete_word", buffer.delete_word),
        ]

        for index, (name, step) in enumerate(steps):
            step()
            self._assert_cursor_in_bounds(buffer, f"{index}:{name}")

        self.assertEqual((buffer.text, buffer.cursor), ("", 0))


if __name__ == "__main__":
    unittest.main()
