"""Workspace loading from JSON session descriptions.

A session file looks like::

    {"buffers": [{"name": "app.py", "mode": "python-mode", "visible": true}],
     "active_session": "*repl*"}

Buffers are listed most recently used first.
"""

from __future__ import annotations

import json
from pathlib import Path

from .config import SelectorSettings
from .errors import SessionFileError
from .workspace import FUNDAMENTAL_MODE, Workspace

DEMO_SESSION: dict[str, object] = {
    "buffers": [
        {"name": "server.py", "mode": "python-mode", "visible": True},
        {"name": "*repl*", "mode": "repl-mode"},
        {"name": "models.py", "mode": "python-mode"},
        {"name": "init.el", "mode": "emacs-lisp-mode"},
        {"name": " *temp*", "mode": "python-mode"},
        {"name": "*session-events*"},
        {"name": "*documentation*"},
    ],
    "active_session": "*repl*",
}


def build_workspace(data: object, settings: SelectorSettings) -> Workspace:
    """Build a workspace from a decoded session description."""
    if not isinstance(data, dict):
        raise SessionFileError("session must be a JSON object")
    raw_buffers = data.get("buffers")
    if not isinstance(raw_buffers, list):
        raise SessionFileError("session needs a 'buffers' list")

    workspace = Workspace(kinds_for_mode=settings.kinds_for_mode)
    for index, raw in enumerate(raw_buffers):
        if not isinstance(raw, dict):
            raise SessionFileError(f"buffer #{index} must be an object")
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise SessionFileError(f"buffer #{index} needs a non-empty 'name'")
        mode = raw.get("mode", FUNDAMENTAL_MODE)
        if not isinstance(mode, str):
            raise SessionFileError(f"buffer {name!r} has a non-string 'mode'")
        kinds = raw.get("kinds")
        if kinds is not None and (not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds)):
            raise SessionFileError(f"buffer {name!r} has invalid 'kinds'")
        try:
            workspace.add_buffer(name, mode, kinds=kinds, visible=raw.get("visible") is True)
        except ValueError as exc:
            raise SessionFileError(str(exc)) from exc

    if not workspace.windows and workspace.buffers:
        workspace.switch_to(workspace.buffers[0])

    active = data.get("active_session")
    if active is not None:
        if not isinstance(active, str) or workspace.get_buffer(active) is None:
            raise SessionFileError(f"active_session names no buffer: {active!r}")
        workspace.active_session = workspace.get_buffer(active)
    return workspace


def load_workspace(path: Path, settings: SelectorSettings) -> Workspace:
    """Read ``path`` and build its workspace."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SessionFileError(f"cannot read session file {path}: {exc.strerror}") from exc
    except ValueError as exc:
        raise SessionFileError(f"invalid JSON in session file {path}: {exc}") from exc
    return build_workspace(data, settings)


def demo_workspace(settings: SelectorSettings) -> Workspace:
    """Return the built-in sample workspace."""
    return build_workspace(DEMO_SESSION, settings)
