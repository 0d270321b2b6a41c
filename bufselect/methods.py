"""Built-in selector methods.

Each method is a thin resolver: it either runs a recency search, returns a
fixed named buffer, or steers the dispatcher (help, other window, quit).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .dispatcher import REPROMPT, SelectionContext
from .errors import Abort, NotFound
from .recency import KindMatcher
from .registry import MethodRegistry

log = logging.getLogger(__name__)

EVENTS_BUFFER_NAME = "*session-events*"
PROFILE_BUFFER_NAME = "*profile-report*"
DOCUMENTATION_BUFFER_NAME = "*documentation*"
SCRATCH_BUFFER_NAME = "*scratch*"
CONNECTIONS_BUFFER_NAME = "*connections*"
THREADS_BUFFER_NAME = "*threads*"
ERROR_REPORT_BUFFER_NAME = "*error-report*"

PRIMARY_KIND = "primary"
SCRIPTING_KIND = "scripting"
REPL_KIND = "repl"
DEBUGGER_KIND = "debugger"

Resolver = Callable[[SelectionContext], object]


def register_method(registry: MethodRegistry, key: str, description: str) -> Callable[[Resolver], Resolver]:
    """Decorator registering the wrapped resolver under ``key``."""

    def decorator(resolve: Resolver) -> Resolver:
        registry.register(key, description, resolve)
        return resolve

    return decorator


def recent_of_kind(*kinds: str) -> Resolver:
    """Build a resolver returning the most relevant recent buffer of ``kinds``."""
    matcher = KindMatcher(*kinds)

    def resolve(context: SelectionContext) -> object:
        try:
            return context.find_recent(matcher)
        except NotFound as exc:
            log.debug("%s", exc)
            return None

    return resolve


def named_buffer(name: str, *, create: bool = False) -> Resolver:
    """Build a resolver returning the buffer called ``name``."""

    def resolve(context: SelectionContext) -> object:
        return context.host.named_target(name, create=create)

    return resolve


def show_help(context: SelectionContext) -> object:
    """Render the help view, then prompt again."""
    context.show_help()
    return REPROMPT


def select_other_window(context: SelectionContext) -> object:
    """Place the next selection in another window."""
    context.session.prefer_other_window = True
    return REPROMPT


def abort(_context: SelectionContext) -> object:
    """Cancel the whole selection."""
    raise Abort()


def session_repl(context: SelectionContext) -> object:
    """REPL of the active connection, else the most recent REPL buffer."""
    target = context.host.active_session_target()
    if target is not None:
        return target
    return recent_of_kind(REPL_KIND)(context)


def error_report(context: SelectionContext) -> object:
    """Most recent debugger buffer, else the fixed error-report buffer."""
    try:
        return context.find_recent(KindMatcher(DEBUGGER_KIND))
    except NotFound as exc:
        log.debug("%s", exc)
        return context.host.named_target(ERROR_REPORT_BUFFER_NAME)


def install_default_methods(registry: MethodRegistry) -> MethodRegistry:
    """Register the standard method set on ``registry`` and return it."""
    registry.register("?", "Selector help buffer.", show_help)
    registry.register("4", "Select in other window.", select_other_window)
    registry.register("q", "Abort.", abort)
    registry.register("l", "Most recent primary language-mode buffer.", recent_of_kind(PRIMARY_KIND))
    registry.register("e", "Most recent scripting-mode buffer.", recent_of_kind(SCRIPTING_KIND))
    registry.register("r", "Session REPL buffer for the active connection.", session_repl)
    registry.register("v", "Session event log buffer.", named_buffer(EVENTS_BUFFER_NAME))
    registry.register("d", "Most recent error-report (debugger) buffer.", error_report)
    registry.register("p", "Profiling report buffer.", named_buffer(PROFILE_BUFFER_NAME))
    registry.register("i", "Documentation buffer.", named_buffer(DOCUMENTATION_BUFFER_NAME))
    registry.register("s", "Scratch buffer.", named_buffer(SCRATCH_BUFFER_NAME, create=True))
    registry.register("c", "Connections list buffer.", named_buffer(CONNECTIONS_BUFFER_NAME))
    registry.register("t", "Threads list buffer.", named_buffer(THREADS_BUFFER_NAME))
    return registry
