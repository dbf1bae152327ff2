"""
Unit tests for environment-driven configuration.
"""

import os
import unittest
from unittest import mock

from coursebrowser.config import get_app_config


class TestConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = get_app_config()
        self.assertEqual(config, {"log_level": "WARNING", "default_file": None})

    def test_debug_switches_log_level(self) -> None:
        env = {"COURSEBROWSER_DEBUG": "true", "COURSEBROWSER_LOG_LEVEL": "error"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = get_app_config()
        self.assertEqual(config["log_level"], "DEBUG")
        self.assertNotIn("debug", config)

    def test_level_and_file_from_env(self) -> None:
        env = {"COURSEBROWSER_LOG_LEVEL": "info", "COURSEBROWSER_FILE": "courses.json"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = get_app_config()
        self.assertEqual(config["log_level"], "INFO")
        self.assertEqual(config["default_file"], "courses.json")


if __name__ == "__main__":
    unittest.main()
