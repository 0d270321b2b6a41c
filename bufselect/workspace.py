"""In-memory buffers and windows.

Buffers are kept most-recently-used first. Every buffer switch moves the
buffer to the front, the way editors order their buffer lists.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .host import LiveTarget

FUNDAMENTAL_MODE = "fundamental-mode"


@dataclass(eq=False)
class Buffer:
    """One named buffer; identity-compared."""

    name: str
    mode: str = FUNDAMENTAL_MODE
    kinds: frozenset[str] | None = None
    read_only: bool = False
    lines: list[str] = field(default_factory=list)
    live: bool = True


@dataclass(eq=False)
class Window:
    """A window displaying exactly one buffer."""

    buffer: Buffer


class Workspace:
    """Buffer list plus window layout with a selected window."""

    def __init__(self, kinds_for_mode: Callable[[str], frozenset[str]] | None = None) -> None:
        self._kinds_for_mode = kinds_for_mode if kinds_for_mode is not None else (lambda _mode: frozenset())
        self.buffers: list[Buffer] = []
        self.windows: list[Window] = []
        self.selected_window: Window | None = None
        self.active_session: Buffer | None = None

    @property
    def current_buffer(self) -> Buffer | None:
        """Buffer shown in the selected window."""
        return self.selected_window.buffer if self.selected_window is not None else None

    def add_buffer(
        self,
        name: str,
        mode: str = FUNDAMENTAL_MODE,
        *,
        kinds: Sequence[str] | None = None,
        visible: bool = False,
        read_only: bool = False,
    ) -> Buffer:
        """Append a new buffer at the least-recent end, optionally in a new window."""
        if self.get_buffer(name) is not None:
            raise ValueError(f"buffer already exists: {name!r}")
        buffer = Buffer(
            name=name,
            mode=mode,
            kinds=frozenset(kinds) if kinds is not None else None,
            read_only=read_only,
        )
        self.buffers.append(buffer)
        if visible:
            window = Window(buffer)
            self.windows.append(window)
            if self.selected_window is None:
                self.selected_window = window
        return buffer

    def get_buffer(self, name: str) -> Buffer | None:
        """Return the live buffer called ``name``."""
        for buffer in self.buffers:
            if buffer.name == name:
                return buffer
        return None

    def get_or_create(self, name: str, mode: str = FUNDAMENTAL_MODE) -> Buffer:
        """Return the buffer called ``name``, creating an empty one if missing."""
        buffer = self.get_buffer(name)
        if buffer is None:
            buffer = self.add_buffer(name, mode)
        return buffer

    def kill_buffer(self, buffer: Buffer) -> None:
        """Remove ``buffer``; windows showing it fall back to another buffer or close."""
        if buffer not in self.buffers:
            return
        self.buffers.remove(buffer)
        buffer.live = False
        if self.active_session is buffer:
            self.active_session = None
        for window in list(self.windows):
            if window.buffer is not buffer:
                continue
            replacement = self._replacement_for(window)
            if replacement is None:
                self.windows.remove(window)
            else:
                window.buffer = replacement
        if self.selected_window not in self.windows:
            self.selected_window = self.windows[0] if self.windows else None

    def _replacement_for(self, window: Window) -> Buffer | None:
        """Pick the most recent buffer not already displayed elsewhere."""
        shown = {id(other.buffer) for other in self.windows if other is not window}
        for candidate in self.buffers:
            if id(candidate) not in shown:
                return candidate
        return self.buffers[0] if self.buffers else None

    def window_showing(self, buffer: Buffer) -> Window | None:
        """Return the first window displaying ``buffer``."""
        for window in self.windows:
            if window.buffer is buffer:
                return window
        return None

    def is_visible(self, buffer: Buffer) -> bool:
        return self.window_showing(buffer) is not None

    def kinds_of(self, buffer: Buffer) -> frozenset[str]:
        """Return explicit kinds, else kinds derived from the buffer's current mode."""
        if buffer.kinds is not None:
            return buffer.kinds
        return self._kinds_for_mode(buffer.mode)

    def live_targets(self) -> list[LiveTarget]:
        """Enumerate buffers most recently used first."""
        return [
            LiveTarget(
                target=buffer,
                name=buffer.name,
                kinds=self.kinds_of(buffer),
                visible=self.is_visible(buffer),
            )
            for buffer in self.buffers
        ]

    def _touch(self, buffer: Buffer) -> None:
        """Move ``buffer`` to the most-recent end."""
        self.buffers.remove(buffer)
        self.buffers.insert(0, buffer)

    def switch_to(self, buffer: Buffer) -> None:
        """Show ``buffer`` in the selected window, creating one if none exist."""
        if self.selected_window is None:
            self.selected_window = Window(buffer)
            self.windows.append(self.selected_window)
        else:
            self.selected_window.buffer = buffer
        self._touch(buffer)

    def open_in_new_window(self, buffer: Buffer) -> None:
        """Split off a new window showing ``buffer`` and select it."""
        window = Window(buffer)
        if self.selected_window is None:
            self.windows.append(window)
        else:
            self.windows.insert(self.windows.index(self.selected_window) + 1, window)
        self.selected_window = window
        self._touch(buffer)

    def focus_window_showing(self, buffer: Buffer) -> None:
        """Select the window already displaying ``buffer``."""
        window = self.window_showing(buffer)
        if window is None:
            raise ValueError(f"buffer is not displayed: {buffer.name!r}")
        self.selected_window = window
        self._touch(buffer)
