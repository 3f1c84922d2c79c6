"""Terminal control helpers for the reader session.

Owns raw-mode lifecycle, alternate-screen switching, and mouse reporting.
Capturing the tty state fails with ``termios.error`` when stdin is not a
terminal; that is a startup-fatal condition and is left to propagate.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

_ENTER_TUI = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"
_EXIT_TUI = b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions around the interactive loop."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with mouse reporting enabled."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, hidden cursor, click + wheel reporting in SGR form.
        os.write(self.stdout_fd, _ENTER_TUI)

    def disable_tui_mode(self) -> None:
        """Restore the main screen and the tty state captured at startup."""
        os.write(self.stdout_fd, _EXIT_TUI)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
