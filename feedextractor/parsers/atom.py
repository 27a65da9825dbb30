"""
Atom parser.

Atom links are <link rel="..." href="..."/> elements, any number of them;
the alternate one is the page the feed or entry describes.
"""

from typing import Any, Dict

from feedextractor.models import Dialect
from feedextractor.parsers.base import MappedFeedParser, as_node


class AtomParser(MappedFeedParser):
    """Parses Atom 1.0 (and 0.3) feeds."""

    dialect = Dialect.ATOM
    entries_key = "entry"

    FEED_FIELDS = {
        "title": [("title",)],
        "description": [("subtitle",), ("tagline",)],
        "generator": [("generator",)],
        "language": [("@_xml:lang",), ("language",)],
        "published": [("updated",), ("published",), ("modified",)],
    }
    ENTRY_FIELDS = {
        "id": [("id",)],
        "title": [("title",)],
        "description": [("summary",), ("content",)],
        "published": [("published",), ("updated",), ("issued",), ("modified",)],
    }

    def container(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        return as_node(tree.get("feed"))
