"""
Extracts RSS, RDF, Atom and JSON feeds into one normalized structure.
"""

from feedextractor.errors import (
    EmptyContent,
    FeedExtractorError,
    InvalidInput,
    MalformedJson,
    MalformedXml,
    RetrievalError,
    UnrecognizedFormat,
)
from feedextractor.extractor import extract, extract_from_json, extract_from_xml, read
from feedextractor.models import CanonicalEntry, CanonicalFeed, Dialect, ExtractOptions
from feedextractor.utils.dates import normalize_date

__all__ = [
    "CanonicalEntry",
    "CanonicalFeed",
    "Dialect",
    "EmptyContent",
    "ExtractOptions",
    "FeedExtractorError",
    "InvalidInput",
    "MalformedJson",
    "MalformedXml",
    "RetrievalError",
    "UnrecognizedFormat",
    "extract",
    "extract_from_json",
    "extract_from_xml",
    "normalize_date",
    "read",
]
