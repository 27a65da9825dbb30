"""Dialect parsers, one per supported feed format."""

from typing import Dict

from feedextractor.models import Dialect
from feedextractor.parsers.atom import AtomParser
from feedextractor.parsers.base import FeedParser
from feedextractor.parsers.jsonfeed import JsonFeedParser
from feedextractor.parsers.rdf import RdfParser
from feedextractor.parsers.rss import RssParser

PARSERS: Dict[Dialect, FeedParser] = {
    Dialect.RSS2: RssParser(),
    Dialect.RSS1_RDF: RdfParser(),
    Dialect.ATOM: AtomParser(),
    Dialect.JSONFEED: JsonFeedParser(),
}


def get_parser(dialect: Dialect) -> FeedParser:
    """Returns the parser for a dialect."""
    return PARSERS[dialect]
