from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from moyu import config


class ConfigBehaviorTests(unittest.TestCase):
    def _load_with(self, payload: str) -> config.ReaderSettings:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(payload, encoding="utf-8")
            with mock.patch("moyu.config.CONFIG_PATH", config_path):
                return config.load_settings()

    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("moyu.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_settings(), config.ReaderSettings())

    def test_valid_values_are_applied(self) -> None:
        settings = self._load_with(
            json.dumps({"feed_advance_chance": 0.9, "view_height": 5, "theme": "Amber", "log_level": "debug"})
        )
        self.assertEqual(settings, config.ReaderSettings(0.9, 5, "amber", "DEBUG"))

    def test_invalid_values_fall_back_per_field(self) -> None:
        settings = self._load_with(
            json.dumps({"feed_advance_chance": 3, "view_height": 40, "theme": 7, "log_level": "LOUD"})
        )
        self.assertEqual(settings.feed_advance_chance, 0.4)
        self.assertEqual(settings.view_height, 12)
        self.assertEqual(settings.theme, "default")
        self.assertEqual(settings.log_level, "WARNING")

    def test_malformed_config_yields_defaults(self) -> None:
        self.assertEqual(self._load_with("{oops"), config.ReaderSettings())
        self.assertEqual(self._load_with("[]"), config.ReaderSettings())

    def test_deeply_nested_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[" * 200000, encoding="utf-8")
            with mock.patch("moyu.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_settings(), config.ReaderSettings())


if __name__ == "__main__":
    unittest.main()
