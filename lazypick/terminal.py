"""Terminal control helpers for the chooser session.

Owns raw-mode lifecycle and alternate-screen switching on the controlling tty.
Choices arrive on stdin, so keys and drawing go through ``/dev/tty`` instead.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

TTY_PATH = "/dev/tty"


def open_tty(path: str = TTY_PATH) -> int:
    """Open the controlling terminal for reading keys and writing frames."""
    return os.open(path, os.O_RDWR | os.O_NOCTTY)


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty settings."""
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, payload: bytes) -> None:
        os.write(self.stdout_fd, payload)

    def size(self) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the tty, falling back to 80x24."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError:
            term = shutil.get_terminal_size((80, 24))
        return term.columns, term.lines

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
