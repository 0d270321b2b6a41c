"""Exception taxonomy for key dispatch and target search.

``Abort`` is intentionally outside the ``SelectorError`` hierarchy: it is a
user-requested cancellation, not a failure.
"""

from __future__ import annotations

from collections.abc import Iterable


class SelectorError(Exception):
    """Base class for recoverable selector failures."""


class UnrecognizedKey(SelectorError):
    """Raised when the entered key has no registered method."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No method for character: ?\\{key}")
        self.key = key


class NoTargetAvailable(SelectorError):
    """A method ran but produced no live target to switch to."""

    def __init__(self, key: str, what: str) -> None:
        super().__init__(f"No such buffer: {what}")
        self.key = key
        self.what = what


class NotFound(SelectorError):
    """Recency search found no live target of the requested kinds."""

    def __init__(self, kinds: Iterable[str]) -> None:
        self.kinds = tuple(kinds)
        label = ", ".join(self.kinds) if self.kinds else "matching"
        super().__init__(f"No {label} buffer")


class SessionFileError(SelectorError):
    """Session description file could not be loaded."""


class Abort(Exception):
    """Cancel the enclosing interactive operation."""
