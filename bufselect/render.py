"""Help text, prompt hint, and help modal rendering.

Everything here returns strings; writing to the terminal is the caller's job.
"""

from __future__ import annotations

from .registry import MethodRegistry

HELP_TITLE = "Select Methods:"
HELP_DISMISS_HINT = "Type a key at the prompt to select"

HELP_HEADING_STYLE = "\033[1;38;5;81m"
HELP_KEY_STYLE = "\033[38;5;229m"
HELP_DIM_STYLE = "\033[2;38;5;250m"
HELP_BORDER_STYLE = "\033[38;5;45m"
RESET = "\033[0m"


def prompt_hint(registry: MethodRegistry) -> str:
    """Return the one-line prompt listing every registered key in order."""
    return f"Select [{registry.keys()}]: "


def render_help_lines(registry: MethodRegistry) -> list[str]:
    """Return plain help lines: a header, a blank line, then ``key:\\tdescription``."""
    lines = [HELP_TITLE, ""]
    for entry in registry.all():
        lines.append(f"{entry.key}:\t{entry.description}")
    return lines


def _clip(text: str, max_cols: int) -> str:
    """Expand tabs and trim ``text`` to ``max_cols`` columns."""
    if max_cols <= 0:
        return ""
    return text.expandtabs(4)[:max_cols]


def _styled_help_line(line: str) -> str:
    """Colorize one plain help line for the modal."""
    if line == HELP_TITLE:
        return f"{HELP_HEADING_STYLE}{line}{RESET}"
    key, sep, description = line.partition(":")
    if sep and len(key) == 1:
        return f"{HELP_KEY_STYLE}{key}{RESET}{sep}{description}"
    return line


def render_help_modal(lines: list[str], width: int, height: int, *, no_color: bool = False) -> str:
    """Render ``lines`` in a centered framed box and return the escape stream."""
    out: list[str] = ["\033[H\033[J"]

    modal_w = min(72, max(36, width - 10))
    modal_h = min(max(len(lines) + 4, 8), max(8, height - 2))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    inner_h = max(1, modal_h - 2)

    border = "" if no_color else HELP_BORDER_STYLE
    reset = "" if no_color else RESET
    out.append(f"\033[{y + 1};{x + 1}H{border}╭")
    out.append("─" * inner_w)
    out.append(f"╮{reset}")
    for i in range(inner_h):
        out.append(f"\033[{y + 2 + i};{x + 1}H{border}│{reset}")
        out.append(" " * inner_w)
        out.append(f"{border}│{reset}")
    out.append(f"\033[{y + modal_h};{x + 1}H{border}╰")
    out.append("─" * inner_w)
    out.append(f"╯{reset}")

    body = list(lines) + ["", HELP_DISMISS_HINT]
    body_rows = min(len(body), inner_h)
    for i in range(body_rows):
        text = _clip(body[i], inner_w - 2)
        if not no_color:
            if body[i] == HELP_DISMISS_HINT:
                text = f"{HELP_DIM_STYLE}{text}{RESET}"
            else:
                text = _styled_help_line(text)
        out.append(f"\033[{y + 2 + i};{x + 3}H")
        out.append(text)
        out.append(RESET if not no_color else "")
    return "".join(out)
