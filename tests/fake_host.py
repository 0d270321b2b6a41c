"""Scripted in-memory host used by dispatcher and method tests."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bufselect.host import LiveTarget
from bufselect.workspace import Buffer, Workspace


class FakeHost:
    """Host over a ``Workspace`` that replays keys and records every call."""

    def __init__(self, workspace: Workspace, keys: Iterable[str] = ()) -> None:
        self.workspace = workspace
        self.keys = list(keys)
        self.calls: list[tuple] = []
        self.prompts: list[str] = []
        self.messages: list[str] = []
        self.help_views: list[list[str]] = []
        self.list_calls = 0

    def list_live_targets(self) -> Sequence[LiveTarget]:
        self.list_calls += 1
        return self.workspace.live_targets()

    def is_live(self, target: object) -> bool:
        return isinstance(target, Buffer) and target.live

    def is_visible(self, target: object) -> bool:
        return isinstance(target, Buffer) and self.workspace.is_visible(target)

    def target_name(self, target: object) -> str:
        return target.name if isinstance(target, Buffer) else str(target)

    def focus_window_showing(self, target: object) -> None:
        self.calls.append(("focus", target.name))
        self.workspace.focus_window_showing(target)

    def open_in_new_window(self, target: object) -> None:
        self.calls.append(("other_window", target.name))
        self.workspace.open_in_new_window(target)

    def switch_to(self, target: object) -> None:
        self.calls.append(("switch", target.name))
        self.workspace.switch_to(target)

    def render_help_view(self, lines: Sequence[str]) -> None:
        self.calls.append(("help",))
        self.help_views.append(list(lines))

    def read_char(self, prompt: str) -> str:
        self.calls.append(("prompt",))
        self.prompts.append(prompt)
        if not self.keys:
            raise AssertionError("dispatcher prompted with no scripted keys left")
        return self.keys.pop(0)

    def message(self, text: str) -> None:
        self.calls.append(("message", text))
        self.messages.append(text)

    def alert(self) -> None:
        self.calls.append(("alert",))

    def pause(self, seconds: float) -> None:
        self.calls.append(("pause", seconds))

    def discard_input(self) -> None:
        self.calls.append(("discard",))

    def active_session_target(self) -> object | None:
        return self.workspace.active_session

    def named_target(self, name: str, create: bool = False) -> object | None:
        if create:
            return self.workspace.get_or_create(name)
        return self.workspace.get_buffer(name)

    def view_calls(self) -> list[tuple]:
        """Return only the calls that change which buffer is shown."""
        return [call for call in self.calls if call[0] in {"focus", "other_window", "switch"}]
