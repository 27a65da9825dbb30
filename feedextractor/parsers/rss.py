"""
RSS 2.0 parser.

Maps <rss><channel> documents, including the many 0.9x-era variants that
still publish under an <rss> root.
"""

from typing import Any, Dict

from feedextractor.models import Dialect
from feedextractor.parsers.base import MappedFeedParser, as_node
from feedextractor.utils.linker import is_valid_url, select_link
from feedextractor.utils.text import get_text


class RssParser(MappedFeedParser):
    """Parses RSS 2.0 feeds."""

    dialect = Dialect.RSS2
    entries_key = "item"

    FEED_FIELDS = {
        "title": [("title",)],
        "description": [("description",)],
        "generator": [("generator",)],
        "language": [("language",), ("dc:language",)],
        "published": [("lastBuildDate",), ("pubDate",), ("dc:date",)],
    }
    ENTRY_FIELDS = {
        "id": [("guid",)],
        "title": [("title",)],
        "description": [("description",), ("content:encoded",)],
        "published": [("pubDate",), ("dc:date",)],
    }

    def container(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        return as_node(as_node(tree.get("rss")).get("channel"))

    def feed_link(self, channel: Dict[str, Any]) -> str:
        # <atom:link rel="self"> points at the feed document, not the site
        return select_link(channel.get("atom:link"), alternate_only=True) or select_link(
            channel.get("link")
        )

    def entry_link(self, item: Dict[str, Any]) -> str:
        link = select_link(item.get("link"))
        if link:
            return link
        return self._permalink(item.get("guid"))

    @staticmethod
    def _permalink(guid: Any) -> str:
        """Returns the guid when it is flagged (or defaults) as a permalink URL."""
        if isinstance(guid, dict) and get_text(guid.get("@_isPermaLink")).lower() == "false":
            return ""
        value = get_text(guid)
        return value if is_valid_url(value) else ""
