"""Terminal-backed host over an in-memory workspace."""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Sequence

from .errors import Abort
from .host import LiveTarget
from .render import render_help_modal
from .terminal import TerminalController
from .workspace import Buffer, Workspace

log = logging.getLogger(__name__)

HELP_BUFFER_NAME = "*Select Help*"
QUIT_CHARS = frozenset({"\x03", "\x07"})


class ConsoleHost:
    """``Host`` implementation drawing prompts and messages on a terminal."""

    def __init__(self, workspace: Workspace, terminal: TerminalController, *, no_color: bool = False) -> None:
        self.workspace = workspace
        self.terminal = terminal
        self.no_color = no_color

    def list_live_targets(self) -> Sequence[LiveTarget]:
        return self.workspace.live_targets()

    def is_live(self, target: object) -> bool:
        return isinstance(target, Buffer) and target.live

    def is_visible(self, target: object) -> bool:
        return isinstance(target, Buffer) and self.workspace.is_visible(target)

    def target_name(self, target: object) -> str:
        return target.name if isinstance(target, Buffer) else str(target)

    def focus_window_showing(self, target: object) -> None:
        self.workspace.focus_window_showing(target)

    def open_in_new_window(self, target: object) -> None:
        self.workspace.open_in_new_window(target)

    def switch_to(self, target: object) -> None:
        self.workspace.switch_to(target)

    def render_help_view(self, lines: Sequence[str]) -> None:
        """Fill the read-only help buffer with ``lines`` and draw it."""
        help_buffer = self.workspace.get_or_create(HELP_BUFFER_NAME)
        help_buffer.lines = list(lines)
        help_buffer.read_only = True
        if self.terminal.is_interactive():
            size = shutil.get_terminal_size((80, 24))
            self.terminal.write(render_help_modal(list(lines), size.columns, size.lines, no_color=self.no_color))
            self.terminal.write(f"\033[{size.lines};1H")
        else:
            self.terminal.write("\n".join(lines) + "\n")

    def read_char(self, prompt: str) -> str:
        """Prompt and read one key; end of input and Ctrl+G/Ctrl+C abort."""
        self.terminal.write(f"\r\033[K{prompt}" if self.terminal.is_interactive() else prompt)
        with self.terminal.key_mode():
            char = self.terminal.read_char()
        self.terminal.write("\n")
        if not char or char in QUIT_CHARS:
            log.debug("prompt cancelled with %r", char)
            raise Abort()
        return char

    def message(self, text: str) -> None:
        self.terminal.write(text + "\n")

    def alert(self) -> None:
        self.terminal.bell()

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)

    def discard_input(self) -> None:
        self.terminal.flush_input()

    def active_session_target(self) -> object | None:
        session = self.workspace.active_session
        return session if session is not None and session.live else None

    def named_target(self, name: str, create: bool = False) -> object | None:
        if create:
            return self.workspace.get_or_create(name)
        return self.workspace.get_buffer(name)
