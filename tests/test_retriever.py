"""Unit tests for the retriever."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from feedextractor.errors import RetrievalError
from feedextractor.services.retriever import Retriever, fetch

CONFIG = {"user_agent": "TestAgent/1.0", "timeout": 5}


def make_response(status=200, text="", content_type="application/xml"):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    resp.headers = {"content-type": content_type}
    return resp


class TestRetriever(unittest.TestCase):
    @patch("requests.get")
    def test_bad_status(self, mock_get):
        mock_get.return_value = make_response(500, "Error 500", "text/html")
        with self.assertRaises(RetrievalError) as ctx:
            Retriever(CONFIG).fetch("https://some.where/bad/page")
        self.assertEqual(str(ctx.exception), "Request failed with error code 500")
        self.assertEqual(ctx.exception.status_code, 500)

    @patch("requests.get")
    def test_bad_content_type(self, mock_get):
        mock_get.return_value = make_response(
            200, '<?xml version="1.0"?><tag>this is xml</tag>', "something/type"
        )
        with self.assertRaises(RetrievalError) as ctx:
            Retriever(CONFIG).fetch("https://some.where/bad/page")
        self.assertEqual(str(ctx.exception), "Invalid content type: something/type")

    @patch("requests.get")
    def test_good_source(self, mock_get):
        mock_get.return_value = make_response(200, "<div>this is content</div>", "application/rss+xml")
        result = Retriever(CONFIG).fetch("https://some.where/good/page")
        self.assertEqual(result, {"type": "xml", "text": "<div>this is content</div>"})

        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["headers"]["User-Agent"], "TestAgent/1.0")
        self.assertEqual(kwargs["timeout"], 5)

    @patch("requests.get")
    def test_trims_whitespace_around_root(self, mock_get):
        mock_get.return_value = make_response(
            200, "\n\r\r\n\n<div>this is content</div>\n\r\r\n\n", "text/xml; charset=utf-8"
        )
        result = Retriever(CONFIG).fetch("https://some.where/good/page")
        self.assertEqual(result["text"], "<div>this is content</div>")

    @patch("requests.get")
    def test_json_content_type(self, mock_get):
        mock_get.return_value = make_response(200, '{"a": 1}', "application/feed+json")
        result = Retriever(CONFIG).fetch("https://some.where/feed.json")
        self.assertEqual(result, {"type": "json", "text": '{"a": 1}'})

    @patch("requests.get")
    def test_proxy(self, mock_get):
        mock_get.return_value = make_response(
            200, '<?xml version="1.0"?><tag>this is xml</tag>', "text/xml"
        )
        result = Retriever(CONFIG).fetch(
            "https://some.where/good/source-with-proxy",
            {"proxy": {"target": "https://proxy-server.com/api/proxy?url=", "headers": {"X-Key": "k"}}},
        )
        self.assertEqual(result["type"], "xml")
        args, kwargs = mock_get.call_args
        self.assertEqual(
            args[0],
            "https://proxy-server.com/api/proxy?url=https%3A%2F%2Fsome.where%2Fgood%2Fsource-with-proxy",
        )
        self.assertEqual(kwargs["headers"]["X-Key"], "k")

    @patch("requests.get")
    def test_custom_headers_and_timeout(self, mock_get):
        mock_get.return_value = make_response(200, "<a/>")
        Retriever(CONFIG).fetch(
            "https://some.where/page", {"headers": {"User-Agent": "Custom"}, "timeout": 1}
        )
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["headers"]["User-Agent"], "Custom")
        self.assertEqual(kwargs["timeout"], 1)

    @patch("requests.get")
    def test_transport_errors_propagate(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(requests.ConnectionError):
            Retriever(CONFIG).fetch("https://some.where/page")

    @patch("requests.get")
    def test_module_level_fetch(self, mock_get):
        mock_get.return_value = make_response(200, "<a/>")
        self.assertEqual(fetch("https://some.where/page")["type"], "xml")


if __name__ == "__main__":
    unittest.main()
