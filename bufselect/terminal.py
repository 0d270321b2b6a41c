"""Terminal control for single-key prompts.

Owns the cbreak-mode lifecycle and raw one-character reads from a tty file
descriptor, plus the bell and input flush used after a rejected key.
"""

from __future__ import annotations

import contextlib
import os
import select
import termios
import tty

BELL = b"\x07"


def _utf8_length(lead: int) -> int:
    """Return encoded length implied by a UTF-8 lead byte (1 for invalid leads)."""
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    return 1


def read_char(fd: int, timeout_ms: int | None = None) -> str:
    """Read one character from ``fd``.

    Multi-byte UTF-8 sequences are decoded into a single character. Returns
    ``""`` on end of input or when ``timeout_ms`` expires first.
    """
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return ""
    first = os.read(fd, 1)
    if not first:
        return ""
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        more = os.read(fd, 1)
        if not more:
            break
        data += more
    return data.decode("utf-8", errors="replace")[:1]


class TerminalController:
    """Manage terminal mode for one prompt and write prompt text."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Bind stdin/stdout file descriptors; tty state is captured lazily."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None

    def is_interactive(self) -> bool:
        """Return whether stdin is a terminal."""
        return os.isatty(self.stdin_fd)

    def write(self, text: str) -> None:
        """Write ``text`` to the output descriptor."""
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def bell(self) -> None:
        """Ring the terminal bell."""
        os.write(self.stdout_fd, BELL)

    def flush_input(self) -> None:
        """Discard bytes typed ahead but not yet read."""
        if self.is_interactive():
            termios.tcflush(self.stdin_fd, termios.TCIFLUSH)
            return
        while read_char(self.stdin_fd, timeout_ms=0):
            pass

    def enable_key_mode(self) -> None:
        """Enter cbreak mode so one keypress is delivered without Enter.

        Signal keys are disabled too, so Ctrl+C and Ctrl+Z arrive as characters.
        """
        if not self.is_interactive():
            return
        self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
        tty.setcbreak(self.stdin_fd, termios.TCSANOW)
        mode = termios.tcgetattr(self.stdin_fd)
        mode[tty.LFLAG] &= ~termios.ISIG
        termios.tcsetattr(self.stdin_fd, termios.TCSANOW, mode)

    def disable_key_mode(self) -> None:
        """Restore the terminal state captured by ``enable_key_mode``."""
        if self._saved_tty_state is None:
            return
        termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, self._saved_tty_state)
        self._saved_tty_state = None

    @contextlib.contextmanager
    def key_mode(self):
        """Context manager that brackets code with key-mode enter/exit calls."""
        try:
            self.enable_key_mode()
            yield
        finally:
            self.disable_key_mode()

    def read_char(self) -> str:
        """Block for one character from the input descriptor."""
        return read_char(self.stdin_fd)
