"""Interactive single-key dispatcher.

Prompts for one character, resolves it through the method registry, and
switches the view to whatever target the method produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import NoTargetAvailable, UnrecognizedKey
from .host import Host
from .recency import HIDDEN_NAME_PREFIX, KindPredicate, find_recent
from .registry import MethodEntry, MethodRegistry
from .render import prompt_hint, render_help_lines

log = logging.getLogger(__name__)

DEFAULT_INVALID_KEY_PAUSE = 1.0


class _Reprompt:
    """Resolver result asking the dispatcher to prompt again."""

    def __repr__(self) -> str:
        return "REPROMPT"


REPROMPT = _Reprompt()


@dataclass
class SelectionSession:
    """State for one ``Dispatcher.select`` call."""

    prefer_other_window: bool = False


@dataclass
class SelectionContext:
    """Everything a resolver may use: host, session, and the registry."""

    host: Host
    registry: MethodRegistry
    session: SelectionSession = field(default_factory=SelectionSession)
    hidden_prefix: str = HIDDEN_NAME_PREFIX

    def find_recent(self, kind_predicate: KindPredicate, consider_visible: bool = False) -> object:
        """Run recency search against this context's host."""
        return find_recent(
            self.host,
            kind_predicate,
            consider_visible,
            hidden_prefix=self.hidden_prefix,
        )

    def show_help(self) -> None:
        """Render the help view for the current registry."""
        self.host.render_help_view(render_help_lines(self.registry))


class Dispatcher:
    """Prompt-resolve-switch loop over a ``MethodRegistry``."""

    def __init__(
        self,
        registry: MethodRegistry,
        host: Host,
        *,
        invalid_key_pause: float = DEFAULT_INVALID_KEY_PAUSE,
        hidden_prefix: str = HIDDEN_NAME_PREFIX,
    ) -> None:
        self.registry = registry
        self.host = host
        self.invalid_key_pause = invalid_key_pause
        self.hidden_prefix = hidden_prefix

    def select(self, other_window: bool = False) -> object | None:
        """Run one selection and return the target switched to.

        Unrecognized keys are reported and prompted for again. A method that
        yields no live target is reported and ends the selection with
        ``None``. ``Abort`` raised by a method propagates to the caller.
        """
        context = SelectionContext(
            host=self.host,
            registry=self.registry,
            session=SelectionSession(prefer_other_window=other_window),
            hidden_prefix=self.hidden_prefix,
        )
        while True:
            key = self.host.read_char(prompt_hint(self.registry))
            try:
                entry = self._lookup(key)
            except UnrecognizedKey as exc:
                self._reject(exc)
                continue

            log.debug("dispatching key %r to %r", key, entry.description)
            result = entry.resolve(context)
            if result is REPROMPT:
                continue
            try:
                return self._activate(entry, result, context.session)
            except NoTargetAvailable as exc:
                self.host.message(str(exc))
                self.host.alert()
                return None

    def _lookup(self, key: str) -> MethodEntry:
        """Return the entry bound to ``key`` or raise ``UnrecognizedKey``."""
        entry = self.registry.lookup(key)
        if entry is None:
            raise UnrecognizedKey(key)
        return entry

    def _reject(self, exc: UnrecognizedKey) -> None:
        """Report an unrecognized key and clear typed-ahead input."""
        log.debug("unrecognized key %r", exc.key)
        self.host.message(str(exc))
        self.host.alert()
        self.host.pause(self.invalid_key_pause)
        self.host.discard_input()

    def _activate(self, entry: MethodEntry, target: object, session: SelectionSession) -> object:
        """Show ``target``; an already-visible window wins over other-window placement."""
        if target is None or not self.host.is_live(target):
            what = self.host.target_name(target) if target is not None else entry.description
            raise NoTargetAvailable(entry.key, what)
        if self.host.is_visible(target):
            self.host.focus_window_showing(target)
        elif session.prefer_other_window:
            self.host.open_in_new_window(target)
        else:
            self.host.switch_to(target)
        return target
