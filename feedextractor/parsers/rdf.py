"""
RSS 1.0 (RDF) parser.

In RDF feeds the <item> elements are siblings of <channel> under the
<rdf:RDF> root, and identifiers live in rdf:about attributes.
"""

from typing import Any, Dict

from feedextractor.models import Dialect
from feedextractor.parsers.base import MappedFeedParser, as_node
from feedextractor.utils.linker import select_link
from feedextractor.utils.text import get_text


class RdfParser(MappedFeedParser):
    """Parses RSS 1.0 / RDF feeds."""

    dialect = Dialect.RSS1_RDF
    entries_key = "item"

    FEED_FIELDS = {
        "title": [("title",), ("dc:title",)],
        "description": [("description",), ("dc:description",)],
        "generator": [("admin:generatorAgent", "@_rdf:resource"), ("generator",)],
        "language": [("dc:language",), ("language",)],
        "published": [("dc:date",), ("pubDate",)],
    }
    ENTRY_FIELDS = {
        "id": [("@_rdf:about",), ("dc:identifier",)],
        "title": [("title",), ("dc:title",)],
        "description": [("description",), ("content:encoded",), ("dc:description",)],
        "published": [("dc:date",), ("pubDate",)],
    }

    def container(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        return as_node(tree.get("rdf:RDF"))

    def channel(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        return as_node(self.container(tree).get("channel"))

    def feed_link(self, channel: Dict[str, Any]) -> str:
        return select_link(channel.get("link")) or get_text(channel.get("@_rdf:about"))

    def entry_link(self, item: Dict[str, Any]) -> str:
        return select_link(item.get("link")) or get_text(item.get("@_rdf:about"))
