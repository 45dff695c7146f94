"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and tilde sequences, control chords and UTF-8 runes.
"""

import os
import time
import unittest

from dotwizard import input as input_mod
from dotwizard.input.keys import (
    BACKSPACE,
    CTRL_B,
    CTRL_C,
    DELETE,
    ENTER,
    ESC,
    PAGE_DOWN,
    SPACE,
    TAB,
    UP,
    Key,
)
from dotwizard.input.reader import decode_control_byte


def _read_all(payload: bytes, count: int) -> list:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        [key] = _read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(key, ESC)
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequence_is_recognized(self) -> None:
        self.assertEqual(_read_all(b"\x1b[A", 1), [UP])

    def test_tilde_sequences_map_to_named_keys(self) -> None:
        self.assertEqual(_read_all(b"\x1b[3~\x1b[6~", 2), [DELETE, PAGE_DOWN])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        first, second = _read_all(b"\x1ba", 2)

        self.assertEqual(first, ESC)
        self.assertEqual(second, Key.rune("a"))

    def test_multibyte_rune_is_decoded_whole(self) -> None:
        self.assertEqual(_read_all("é".encode("utf-8"), 1), [Key.rune("é")])

    def test_timeout_returns_none(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertIsNone(input_mod.read_key(read_fd, timeout_ms=5))
        finally:
            os.close(read_fd)
            os.close(write_fd)


class ControlByteTests(unittest.TestCase):
    def test_whitespace_and_editing_bytes(self) -> None:
        self.assertEqual(decode_control_byte(b"\t"), TAB)
        self.assertEqual(decode_control_byte(b"\r"), ENTER)
        self.assertEqual(decode_control_byte(b"\n"), ENTER)
        self.assertEqual(decode_control_byte(b"\x7f"), BACKSPACE)
        self.assertEqual(decode_control_byte(b" "), SPACE)

    def test_control_letters_become_chords(self) -> None:
        self.assertEqual(decode_control_byte(b"\x03"), CTRL_C)
        self.assertEqual(decode_control_byte(b"\x02"), CTRL_B)

    def test_printable_byte_is_not_a_control(self) -> None:
        self.assertIsNone(decode_control_byte(b"x"))


if __name__ == "__main__":
    unittest.main()
