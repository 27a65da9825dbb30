"""
Data models for the feed extractor.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, TypedDict

logger = logging.getLogger(__name__)

ExtraFieldsHook = Callable[[Dict[str, Any]], Optional[Mapping[str, Any]]]


class Dialect(enum.Enum):
    """The wire formats a feed can be published in."""

    RSS2 = "rss2"
    RSS1_RDF = "rdf"
    ATOM = "atom"
    JSONFEED = "jsonfeed"


class CanonicalEntry(TypedDict):
    """Type definition for a normalized feed entry."""

    id: str
    title: str
    link: str
    description: str
    published: str


class CanonicalFeed(TypedDict):
    """Type definition for a normalized feed."""

    title: str
    link: str
    description: str
    generator: str
    language: str
    published: str
    entries: List[CanonicalEntry]


class FetchResult(TypedDict):
    """What the retriever hands back: the payload kind and its text."""

    type: str  # "xml" or "json"
    text: str


# camelCase names accepted in option mappings
_OPTION_ALIASES = {
    "useISODateFormat": "use_iso_date_format",
    "baseUrl": "base_url",
    "getExtraFeedFields": "get_extra_feed_fields",
    "getExtraEntryFields": "get_extra_entry_fields",
}


@dataclass(frozen=True)
class ExtractOptions:
    """
    Per-call extraction settings.

    Instances are immutable and threaded through every stage of the
    pipeline, so concurrent calls never share configuration.
    """

    normalization: bool = True
    use_iso_date_format: bool = False
    base_url: Optional[str] = None
    get_extra_feed_fields: Optional[ExtraFieldsHook] = None
    get_extra_entry_fields: Optional[ExtraFieldsHook] = None

    @classmethod
    def from_value(cls, value: Any = None) -> "ExtractOptions":
        """Builds options from None, an ExtractOptions or a plain mapping."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"options must be a mapping, got {type(value).__name__}")

        known = cls.__dataclass_fields__  # pylint: disable=no-member
        kwargs: Dict[str, Any] = {}
        for key, val in value.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown option: %s", key)
                continue
            kwargs[name] = val
        return cls(**kwargs)
