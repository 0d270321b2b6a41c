"""Tests for settings persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from bufselect import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("bufselect.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                settings = config.load_settings()

        self.assertEqual(settings.invalid_key_pause, 1.0)
        self.assertEqual(settings.hidden_prefix, " ")
        self.assertEqual(settings.kinds_for_mode("python-mode"), frozenset({"primary"}))
        self.assertEqual(settings.kinds_for_mode("text-mode"), frozenset())

    def test_malformed_config_is_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("bufselect.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("bufselect.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_invalid_key_pause_is_read_and_clamped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("bufselect.config.CONFIG_PATH", config_path):
                config.save_config({"invalid_key_pause": 0.3})
                self.assertEqual(config.load_invalid_key_pause(), 0.3)

                config.save_config({"invalid_key_pause": 99})
                self.assertEqual(config.load_invalid_key_pause(), 10.0)

                config.save_config({"invalid_key_pause": -1})
                self.assertEqual(config.load_invalid_key_pause(), 0.0)

                config.save_config({"invalid_key_pause": True})
                self.assertEqual(config.load_invalid_key_pause(), 1.0)

                config.save_config({"invalid_key_pause": "fast"})
                self.assertEqual(config.load_invalid_key_pause(), 1.0)

    def test_hidden_prefix_rejects_empty_and_non_string_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("bufselect.config.CONFIG_PATH", config_path):
                config.save_config({"hidden_prefix": "."})
                self.assertEqual(config.load_hidden_prefix(), ".")
                config.save_config({"hidden_prefix": ""})
                self.assertEqual(config.load_hidden_prefix(), " ")
                config.save_config({"hidden_prefix": 3})
                self.assertEqual(config.load_hidden_prefix(), " ")

    def test_mode_kinds_merge_over_defaults_and_drop_bad_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("bufselect.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "mode_kinds": {
                            "rust-mode": ["primary"],
                            "python-mode": [],
                            "bad-shape": "primary",
                            "bad-item": ["primary", 4],
                            "": ["primary"],
                        }
                    }
                )
                kinds = config.load_mode_kinds()

        self.assertEqual(kinds["rust-mode"], ("primary",))
        self.assertEqual(kinds["python-mode"], ())
        self.assertEqual(kinds["lisp-mode"], ("primary",))
        self.assertNotIn("bad-shape", kinds)
        self.assertNotIn("bad-item", kinds)
        self.assertNotIn("", kinds)

    def test_save_config_ignores_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("bufselect.config.CONFIG_PATH", blocker / "config.json"):
                config.save_config({"hidden_prefix": "."})


if __name__ == "__main__":
    unittest.main()
