import json
import os
import tempfile
import unittest
from unittest.mock import patch

from feedextractor.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, load_config


class TestLoadConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = load_config()
        self.assertEqual(config["user_agent"], DEFAULT_USER_AGENT)
        self.assertEqual(config["timeout"], DEFAULT_TIMEOUT)

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_file_keeps_defaults(self):
        with self.assertLogs("feedextractor.config", level="WARNING"):
            config = load_config("/nonexistent/feedextractor.json")
        self.assertEqual(config["timeout"], DEFAULT_TIMEOUT)

    @patch.dict(os.environ, {}, clear=True)
    def test_file_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"user_agent": "feed-bot/1.0", "timeout": 5}, f)

            config = load_config(path)
            self.assertEqual(config["user_agent"], "feed-bot/1.0")
            self.assertEqual(config["timeout"], 5)

            with patch.dict(os.environ, {"FEEDEXTRACTOR_CONFIG": path}):
                self.assertEqual(load_config()["user_agent"], "feed-bot/1.0")

    def test_env_overrides(self):
        env = {"FEEDEXTRACTOR_USER_AGENT": "env-agent", "FEEDEXTRACTOR_TIMEOUT": "2.5"}
        with patch.dict(os.environ, env, clear=True):
            config = load_config()
        self.assertEqual(config["user_agent"], "env-agent")
        self.assertEqual(config["timeout"], 2.5)


if __name__ == "__main__":
    unittest.main()
