"""Boundary between the selector core and the editor hosting it.

The core never inspects targets directly; everything it needs to know about
buffers and windows goes through a ``Host``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class LiveTarget:
    """One row of the host's live-target enumeration."""

    target: object
    name: str
    kinds: frozenset[str] = frozenset()
    visible: bool = False


class Host(Protocol):
    """Operations the dispatcher and built-in methods require from an editor."""

    def list_live_targets(self) -> Sequence[LiveTarget]:
        """Return open targets, most recently used first."""
        ...

    def is_live(self, target: object) -> bool:
        """Return whether ``target`` still exists."""
        ...

    def is_visible(self, target: object) -> bool:
        """Return whether ``target`` is shown in some window."""
        ...

    def target_name(self, target: object) -> str:
        """Return a display name for ``target``."""
        ...

    def focus_window_showing(self, target: object) -> None:
        """Select the window already displaying ``target``."""
        ...

    def open_in_new_window(self, target: object) -> None:
        """Display ``target`` in another window and select it."""
        ...

    def switch_to(self, target: object) -> None:
        """Replace the current window's content with ``target``."""
        ...

    def render_help_view(self, lines: Sequence[str]) -> None:
        """Show ``lines`` in a read-only view."""
        ...

    def read_char(self, prompt: str) -> str:
        """Show ``prompt`` and block for exactly one character."""
        ...

    def message(self, text: str) -> None:
        """Show ``text`` on the message line."""
        ...

    def alert(self) -> None:
        """Ring the bell or flash the screen."""
        ...

    def pause(self, seconds: float) -> None:
        """Wait briefly so a message can be read."""
        ...

    def discard_input(self) -> None:
        """Drop any typed-ahead input."""
        ...

    def active_session_target(self) -> object | None:
        """Return the REPL target of the current connection, if any."""
        ...

    def named_target(self, name: str, create: bool = False) -> object | None:
        """Return the target called ``name``, creating it when asked."""
        ...
