"""Terminal control helpers for the wizard session.

Owns raw-mode lifecycle and alternate-screen switching, and releases the
terminal to child processes that need to prompt the user.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty
from collections.abc import Callable


class TerminalController:
    """Manage terminal mode transitions around the wizard UI."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._active = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._active = False

    def size(self) -> tuple[int, int]:
        """Current terminal size as ``(columns, lines)``."""
        size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def suspended(self, work: Callable[[], None]) -> None:
        """Run ``work`` with the terminal in cooked mode, then re-enter raw mode.

        Used for child processes that talk to the user directly (sudo
        prompts, package manager confirmations, ``chsh``).
        """
        was_active = self._active
        if was_active:
            self.disable_tui_mode()
        try:
            work()
        finally:
            if was_active:
                self.enable_tui_mode()

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
