"""Ordered single-key method table.

Entries are kept sorted by key. Every registration swaps in a fresh tuple so
callers holding ``all()`` never observe a table mid-update.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodEntry:
    """One selectable method bound to a single input character."""

    key: str
    description: str
    resolve: Callable[..., object]


class MethodRegistry:
    """Key-sorted method table with last-registration-wins semantics."""

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._entries: tuple[MethodEntry, ...] = ()

    def register(self, key: str, description: str, resolve: Callable[..., object]) -> None:
        """Insert or replace the entry for ``key`` and keep the table sorted."""
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"method key must be a single character, got {key!r}")
        entry = MethodEntry(key=key, description=description, resolve=resolve)
        kept = [existing for existing in self._entries if existing.key != key]
        if len(kept) != len(self._entries):
            log.debug("replacing method for key %r", key)
        kept.append(entry)
        self._entries = tuple(sorted(kept, key=lambda item: item.key))

    def lookup(self, key: str) -> MethodEntry | None:
        """Return the entry bound to ``key`` or ``None``."""
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def all(self) -> tuple[MethodEntry, ...]:
        """Return the current sorted table."""
        return self._entries

    def keys(self) -> str:
        """Return registered keys concatenated in table order."""
        return "".join(entry.key for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry.key == key for entry in self._entries)

    def __iter__(self) -> Iterator[MethodEntry]:
        return iter(self._entries)
