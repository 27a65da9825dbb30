"""
Feed dialect detection.
"""

import logging
from typing import Any

from feedextractor.errors import UnrecognizedFormat
from feedextractor.models import Dialect
from feedextractor.services import xmlparser

logger = logging.getLogger(__name__)

JSONFEED_VERSION_PREFIXES = (
    "https://jsonfeed.org/version/",
    "http://jsonfeed.org/version/",
)
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RSS1_NAMESPACE = "http://purl.org/rss/1.0/"


def is_json_feed(tree: Any) -> bool:
    """Checks for a decoded JSON Feed document by its version marker."""
    if not isinstance(tree, dict):
        return False
    version = tree.get("version")
    return isinstance(version, str) and version.startswith(JSONFEED_VERSION_PREFIXES)


def _is_namespaced_rdf(tree: Any) -> bool:
    if not xmlparser.is_rdf(tree):
        return False
    root = tree["rdf:RDF"]
    return root.get("@_xmlns:rdf") == RDF_NAMESPACE or root.get("@_xmlns") == RSS1_NAMESPACE


def detect_dialect(tree: Any, from_json: bool = False) -> Dialect:
    """
    Classifies a raw tree into one of the supported dialects.

    Rules are checked in a fixed order and the first match wins.

    Raises:
        UnrecognizedFormat: if no rule matches.
    """
    if from_json:
        if is_json_feed(tree):
            return Dialect.JSONFEED
    elif xmlparser.is_atom(tree):
        return Dialect.ATOM
    elif _is_namespaced_rdf(tree):
        return Dialect.RSS1_RDF
    elif xmlparser.is_rss(tree):
        return Dialect.RSS2

    root = ", ".join(tree) if isinstance(tree, dict) else type(tree).__name__
    logger.debug("No dialect matched document root: %s", root)
    raise UnrecognizedFormat()
