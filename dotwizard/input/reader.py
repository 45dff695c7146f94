"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``Key`` values.
Handles ESC-sequence timing, control chords, and multi-byte UTF-8 runes.
"""

from __future__ import annotations

import os
import select

from .keys import (
    BACKSPACE,
    DELETE,
    DOWN,
    END,
    ENTER,
    ESC,
    HOME,
    LEFT,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    SPACE,
    TAB,
    UP,
    Key,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, Key] = {
    b"A": UP,
    b"B": DOWN,
    b"C": RIGHT,
    b"D": LEFT,
    b"H": HOME,
    b"F": END,
}

_CSI_TILDE_KEYS: dict[bytes, Key] = {
    b"1": HOME,
    b"7": HOME,
    b"4": END,
    b"8": END,
    b"3": DELETE,
    b"5": PAGE_UP,
    b"6": PAGE_DOWN,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    """Return total byte length of a UTF-8 sequence from its lead byte."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_rune(fd: int, first: bytes) -> Key:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return Key.rune(data.decode("utf-8", errors="replace"))


def decode_control_byte(ch: bytes) -> Key | None:
    """Map a single C0 control byte to its key, or ``None`` if not a control byte."""
    code = ch[0]
    if ch == b"\t":
        return TAB
    if ch in {b"\r", b"\n"}:
        return ENTER
    if ch in {b"\x08", b"\x7f"}:
        return BACKSPACE
    if ch == b" ":
        return SPACE
    if 1 <= code <= 26:
        return Key.control(chr(ord("a") + code - 1))
    return None


def _decode_escape(fd: int) -> Key:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return ESC
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return ESC
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return ESC
    if final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    if seq == b"[" and final in _CSI_TILDE_KEYS:
        tail = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if tail == b"~":
            return _CSI_TILDE_KEYS[final]
        if tail == b";":
            # Modified arrows (ESC [ 1 ; 5 C) fall back to the bare arrow.
            _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            arrow = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if arrow is not None and arrow in _CSI_FINAL_KEYS:
                return _CSI_FINAL_KEYS[arrow]
    return ESC


def read_key(fd: int, timeout_ms: int | None = None) -> Key | None:
    """Read one key from ``fd``; ``None`` on timeout or EOF."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None

        ch = os.read(fd, 1)
        if not ch:
            return None

    if ch == b"\x1b":
        return _decode_escape(fd)
    control = decode_control_byte(ch)
    if control is not None:
        return control
    return _decode_rune(fd, ch)


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "decode_control_byte", "read_key"]
