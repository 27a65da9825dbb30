import io
import json
import os
import unittest
from unittest.mock import MagicMock, patch

from feedextractor.__main__ import build_parser, main

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


class TestCli(unittest.TestCase):
    def test_requires_a_source(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([])

    def test_file_source(self):
        path = os.path.join(DATA_DIR, "rss-feed-standard-realworld.xml")
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["--file", path, "--iso-dates"])
        self.assertEqual(code, 0)
        feed = json.loads(out.getvalue())
        self.assertEqual(feed["published"], "2022-07-28T03:39:57.000Z")
        self.assertEqual(len(feed["entries"]), 2)

    def test_json_file_without_normalization(self):
        path = os.path.join(DATA_DIR, "json-feed-standard-realworld.json")
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["--file", path, "--no-normalization"])
        self.assertEqual(code, 0)
        self.assertIn("favicon", json.loads(out.getvalue()))

    @patch("requests.get")
    def test_url_source(self, mock_get):
        resp = MagicMock()
        resp.status_code = 200
        resp.text = '{"version": "https://jsonfeed.org/version/1.1", "title": "T", "items": []}'
        resp.headers = {"content-type": "application/feed+json"}
        mock_get.return_value = resp

        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(["https://example.com/feed.json", "--timeout", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue())["title"], "T")
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["timeout"], 3.0)

    @patch("requests.get")
    def test_failure_exit_code(self, mock_get):
        resp = MagicMock()
        resp.status_code = 500
        resp.headers = {}
        mock_get.return_value = resp

        with self.assertLogs("feedextractor.__main__", level="ERROR"):
            code = main(["https://example.com/broken"])
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
