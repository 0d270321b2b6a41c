"""Two-pass "most relevant recently used" search over live targets.

The first pass prefers targets that are not on screen; if nothing qualifies
the same scan runs once more with visible targets allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .errors import NotFound
from .host import Host, LiveTarget

log = logging.getLogger(__name__)

HIDDEN_NAME_PREFIX = " "

KindPredicate = Callable[[LiveTarget], bool]


@dataclass(frozen=True, init=False)
class KindMatcher:
    """Predicate matching live targets tagged with any of ``kinds``."""

    kinds: tuple[str, ...]

    def __init__(self, *kinds: str) -> None:
        object.__setattr__(self, "kinds", tuple(kinds))

    def __call__(self, live: LiveTarget) -> bool:
        return any(kind in live.kinds for kind in self.kinds)


def is_hidden_name(name: str, hidden_prefix: str = HIDDEN_NAME_PREFIX) -> bool:
    """Return whether ``name`` marks an internal target."""
    return bool(hidden_prefix) and name.startswith(hidden_prefix)


def _scan(
    host: Host,
    kind_predicate: KindPredicate,
    consider_visible: bool,
    hidden_prefix: str,
) -> object | None:
    """Return the first acceptable target of one pass, or ``None``."""
    for live in host.list_live_targets():
        if is_hidden_name(live.name, hidden_prefix):
            continue
        if not kind_predicate(live):
            continue
        if live.visible and not consider_visible:
            continue
        return live.target
    return None


def find_recent(
    host: Host,
    kind_predicate: KindPredicate,
    consider_visible: bool = False,
    *,
    hidden_prefix: str = HIDDEN_NAME_PREFIX,
) -> object:
    """Return the most recently used target accepted by ``kind_predicate``.

    Raises ``NotFound`` when no non-hidden live target matches at all.
    """
    passes = (True,) if consider_visible else (False, True)
    for allow_visible in passes:
        found = _scan(host, kind_predicate, allow_visible, hidden_prefix)
        log.debug("recency pass consider_visible=%s -> %r", allow_visible, found)
        if found is not None:
            return found
    raise NotFound(getattr(kind_predicate, "kinds", ()))
