"""Terminal control helpers for the picker session.

Owns the cbreak-mode lifecycle (no echo, no line buffering, one-byte reads),
cursor visibility, and the raw byte I/O the scrollable list draws through.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from . import ansi
from .input import READ_CHUNK_BYTES, read_input

DEFAULT_TERMINAL_SIZE = (80, 24)


def terminal_rows() -> int:
    """Return the current row count without touching tty modes."""
    return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).lines


class TerminalController:
    """Bind stdin/stdout descriptors and manage their terminal state."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_cbreak_mode(self) -> None:
        """Disable echo and canonical input, then hide the cursor."""
        tty.setcbreak(self.stdin_fd, termios.TCSANOW)
        self.execute(ansi.CURSOR_INVISIBLE)

    def disable_cbreak_mode(self) -> None:
        """Show the cursor and restore the captured tty state."""
        self.execute(ansi.CURSOR_VISIBLE)
        termios.tcsetattr(self.stdin_fd, termios.TCSANOW, self._saved_tty_state)

    @contextlib.contextmanager
    def cbreak_mode(self):
        """Context manager that brackets code with cbreak enter/exit calls."""
        try:
            self.enable_cbreak_mode()
            yield
        finally:
            self.disable_cbreak_mode()

    def rows(self) -> int:
        return terminal_rows()

    def columns(self) -> int:
        return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).columns

    def read_input(self, max_bytes: int = READ_CHUNK_BYTES) -> bytes:
        return read_input(self.stdin_fd, max_bytes)

    def write(self, data: bytes) -> None:
        os.write(self.stdout_fd, data)

    def execute(self, code: str) -> None:
        """Write one CSI sequence immediately."""
        self.write(ansi.csi(code).encode("ascii"))

    def clear_screen(self) -> None:
        self.execute(ansi.SCREEN_CLEAR)
        self.execute(ansi.CURSOR_HOME)
