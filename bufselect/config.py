"""Persistent JSON settings.

Stores the invalid-key pause, the hidden-name marker, and mode-to-kind tags.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .dispatcher import DEFAULT_INVALID_KEY_PAUSE
from .recency import HIDDEN_NAME_PREFIX

APP_NAME = "bufselect"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

MAX_INVALID_KEY_PAUSE = 10.0

DEFAULT_MODE_KINDS: dict[str, tuple[str, ...]] = {
    "lisp-mode": ("primary",),
    "python-mode": ("primary",),
    "emacs-lisp-mode": ("scripting",),
    "sh-mode": ("scripting",),
    "repl-mode": ("repl",),
    "debugger-mode": ("debugger",),
}


@dataclass(frozen=True)
class SelectorSettings:
    """Resolved runtime settings for one selector process."""

    invalid_key_pause: float = DEFAULT_INVALID_KEY_PAUSE
    hidden_prefix: str = HIDDEN_NAME_PREFIX
    mode_kinds: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_MODE_KINDS))

    def kinds_for_mode(self, mode: str) -> frozenset[str]:
        """Return kind tags for a buffer mode; unknown modes have none."""
        return frozenset(self.mode_kinds.get(mode, ()))


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never interrupts
    a selection.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_invalid_key_pause() -> float:
    """Return the pause after an unrecognized key, clamped to ``[0, 10]`` seconds.

    Booleans, non-numbers, and non-finite values fall back to the default.
    """
    value = load_config().get("invalid_key_pause")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_INVALID_KEY_PAUSE
    if not math.isfinite(value):
        return DEFAULT_INVALID_KEY_PAUSE
    return max(0.0, min(MAX_INVALID_KEY_PAUSE, float(value)))


def load_hidden_prefix() -> str:
    """Return the hidden-name marker; empty or non-string values use the default."""
    value = load_config().get("hidden_prefix")
    if not isinstance(value, str) or not value:
        return HIDDEN_NAME_PREFIX
    return value


def load_mode_kinds() -> dict[str, tuple[str, ...]]:
    """Return mode-to-kind tags with user entries merged over the defaults.

    A user entry must map a mode name to a list of non-empty strings; an
    empty list removes the mode's tags. Anything else is dropped.
    """
    merged = dict(DEFAULT_MODE_KINDS)
    value = load_config().get("mode_kinds")
    if not isinstance(value, dict):
        return merged
    for mode, raw_kinds in value.items():
        if not isinstance(mode, str) or not mode:
            continue
        if not isinstance(raw_kinds, list):
            continue
        if not all(isinstance(kind, str) and kind for kind in raw_kinds):
            continue
        merged[mode] = tuple(raw_kinds)
    return merged


def load_settings() -> SelectorSettings:
    """Build ``SelectorSettings`` from the persisted config."""
    return SelectorSettings(
        invalid_key_pause=load_invalid_key_pause(),
        hidden_prefix=load_hidden_prefix(),
        mode_kinds=load_mode_kinds(),
    )
