"""Help-line, prompt-hint, and help-modal rendering tests."""

from __future__ import annotations

import unittest

from bufselect.registry import MethodRegistry
from bufselect.render import HELP_DISMISS_HINT, prompt_hint, render_help_lines, render_help_modal


def _registry() -> MethodRegistry:
    registry = MethodRegistry()
    registry.register("r", "REPL.", lambda _ctx: None)
    registry.register("?", "Help.", lambda _ctx: None)
    registry.register("c", "Connections.", lambda _ctx: None)
    return registry


class RenderHelpTests(unittest.TestCase):
    def test_help_lines_follow_key_order(self) -> None:
        self.assertEqual(
            render_help_lines(_registry()),
            ["Select Methods:", "", "?:\tHelp.", "c:\tConnections.", "r:\tREPL."],
        )

    def test_prompt_hint_lists_keys(self) -> None:
        self.assertEqual(prompt_hint(_registry()), "Select [?cr]: ")

    def test_empty_registry_renders_header_only(self) -> None:
        self.assertEqual(render_help_lines(MethodRegistry()), ["Select Methods:", ""])

    def test_modal_contains_every_description_and_key_styling(self) -> None:
        rendered = render_help_modal(render_help_lines(_registry()), width=100, height=30)

        self.assertTrue(rendered.startswith("\033[H\033[J"))
        for text in ("Select Methods:", "Help.", "Connections.", "REPL.", HELP_DISMISS_HINT):
            self.assertIn(text, rendered)
        self.assertIn("\033[38;5;229mc\033[0m", rendered)
        self.assertIn("╭", rendered)

    def test_modal_without_color_has_no_sgr_sequences(self) -> None:
        rendered = render_help_modal(render_help_lines(_registry()), width=100, height=30, no_color=True)

        self.assertNotIn("\033[38;5;", rendered)
        self.assertNotIn("\033[0m", rendered)
        self.assertIn("c:  Connections.", rendered)

    def test_modal_clips_long_descriptions_to_box_width(self) -> None:
        lines = ["Select Methods:", "", "x:\t" + "y" * 500]

        rendered = render_help_modal(lines, width=40, height=20, no_color=True)

        self.assertNotIn("y" * 100, rendered)


if __name__ == "__main__":
    unittest.main()
