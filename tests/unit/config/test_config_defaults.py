from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

                config_path.write_text("{not json", encoding="utf-8")
                with self.assertLogs("dirtree.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_default_root_round_trips_and_expands_home(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_default_root())

                config.save_default_root(Path(tmp))
                self.assertEqual(config.load_default_root(), Path(tmp))

                config.save_config({"default_root": "~/projects"})
                self.assertEqual(config.load_default_root(), Path.home() / "projects")

                config.save_config({"default_root": 42})
                self.assertIsNone(config.load_default_root())

    def test_theme_name_must_be_a_string(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "ocean"})
                self.assertEqual(config.load_theme_name(), "ocean")

                config.save_config({"theme": ["ocean"]})
                self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
