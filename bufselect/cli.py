"""Command-line front door for bufselect.

Parses CLI options, loads the workspace, and builds the method registry.
Then runs one interactive selection on the terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import SelectorSettings, load_settings
from .console import ConsoleHost
from .dispatcher import Dispatcher
from .errors import Abort, SessionFileError
from .log import create_logger
from .methods import install_default_methods
from .registry import MethodRegistry
from .render import render_help_lines
from .session import demo_workspace, load_workspace
from .terminal import TerminalController
from .workspace import Buffer, Workspace

ABORT_EXIT_STATUS = 130


def build_registry() -> MethodRegistry:
    """Return a registry holding the default method set."""
    return install_default_methods(MethodRegistry())


def run_selector(
    workspace: Workspace,
    settings: SelectorSettings,
    other_window: bool,
    no_color: bool,
) -> Buffer | None:
    """Prompt on the controlling terminal and return the selected buffer."""
    terminal = TerminalController(sys.stdin.fileno(), sys.stderr.fileno())
    host = ConsoleHost(workspace, terminal, no_color=no_color)
    dispatcher = Dispatcher(
        build_registry(),
        host,
        invalid_key_pause=settings.invalid_key_pause,
        hidden_prefix=settings.hidden_prefix,
    )
    return dispatcher.select(other_window=other_window)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one selection.

    The selected buffer's name is printed on stdout; prompts and messages go
    to stderr so the result can be captured by a calling script.
    """
    parser = argparse.ArgumentParser(
        description="Pick a buffer with a single keypress."
    )
    parser.add_argument("session", nargs="?", default=None, help="JSON session file. Defaults to a demo workspace.")
    parser.add_argument("--other-window", action="store_true", help="Open the selection in another window.")
    parser.add_argument("--keys", action="store_true", help="Print the method table and exit.")
    parser.add_argument("--no-color", action="store_true", help="Disable color in the help view.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dispatch decisions to stderr.")
    args = parser.parse_args(argv)

    create_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.keys:
        sys.stdout.write("\n".join(render_help_lines(build_registry())) + "\n")
        return

    settings = load_settings()
    try:
        if args.session is None:
            workspace = demo_workspace(settings)
        else:
            workspace = load_workspace(Path(args.session), settings)
    except SessionFileError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        selected = run_selector(workspace, settings, args.other_window, args.no_color)
    except (Abort, KeyboardInterrupt):
        raise SystemExit(ABORT_EXIT_STATUS) from None
    if selected is not None:
        sys.stdout.write(selected.name + "\n")


if __name__ == "__main__":
    main()
