"""
JSON Feed parser (https://jsonfeed.org/version/1.1).
"""

from typing import Any, Dict

from feedextractor.models import Dialect
from feedextractor.parsers.base import MappedFeedParser
from feedextractor.utils.text import get_text


class JsonFeedParser(MappedFeedParser):
    """Parses JSON Feed documents."""

    dialect = Dialect.JSONFEED
    entries_key = "items"

    FEED_FIELDS = {
        "title": [("title",)],
        "description": [("description",)],
        "generator": [("generator",)],
        "language": [("language",)],
        # JSON Feed has no feed-level date
        "published": [],
    }
    ENTRY_FIELDS = {
        "id": [("id",)],
        "title": [("title",)],
        "description": [("summary",), ("content_text",), ("content_html",)],
        "published": [("date_published",), ("date_modified",)],
    }

    def container(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        return tree

    def feed_link(self, channel: Dict[str, Any]) -> str:
        return get_text(channel.get("home_page_url"))

    def entry_link(self, item: Dict[str, Any]) -> str:
        return get_text(item.get("url")) or get_text(item.get("external_url"))
