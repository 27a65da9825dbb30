"""
Base classes and interfaces for feed parsers.

This module defines the contract that all dialect parsers follow, and the
table-driven mapping they share. Each parser only declares where its dialect
keeps things; the lookup, link and date handling live here.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, cast

from feedextractor.hooks import apply_hook
from feedextractor.models import CanonicalEntry, CanonicalFeed, Dialect, ExtractOptions
from feedextractor.utils.dates import format_date, parse_date
from feedextractor.utils.linker import resolve_link, select_link
from feedextractor.utils.text import clean_html, get_text, hash_id

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


def lookup(node: Any, path: Path) -> Any:
    """Follows a path of keys through a raw tree; None if any step is missing."""
    value = node
    for key in path:
        if isinstance(value, list):
            value = value[0] if value else None
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, dict)):
        return bool(value)
    return True


def first_present(node: Any, paths: Sequence[Path]) -> Any:
    """Returns the value at the first path that holds something, else None."""
    for path in paths:
        value = lookup(node, path)
        if _is_present(value):
            return value
    return None


def as_list(value: Any) -> List[Any]:
    """Coerces a one-or-many container into a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def as_node(value: Any) -> Dict[str, Any]:
    """Returns the first mapping in a one-or-many value, or an empty one."""
    for node in as_list(value):
        if isinstance(node, dict):
            return node
    return {}


def canonical_link(link: str, base_url: Optional[str]) -> str:
    """Resolves a selected link, falling back to base_url when nothing is left."""
    resolved = resolve_link(link, base_url)
    if not resolved and base_url:
        return base_url
    return resolved


class FeedParser(Protocol):
    """
    Protocol for dialect parsers.

    Classes implementing this protocol turn the raw tree of one dialect into
    either the canonical feed or the dialect-native shape.
    """

    dialect: Dialect

    def parse(self, tree: Dict[str, Any], options: ExtractOptions) -> CanonicalFeed:
        """Maps a raw tree to the canonical feed."""

    def flatten(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        """Returns the dialect-native feed object with entries as a list."""


class MappedFeedParser:
    """
    Table-driven implementation of FeedParser.

    Subclasses fill in FEED_FIELDS / ENTRY_FIELDS with candidate paths per
    canonical attribute, tried in order, and say where the feed node and the
    entries live. Links are dialect-specific and come from feed_link() and
    entry_link().
    """

    dialect: Dialect
    entries_key: str = "item"

    FEED_FIELDS: Mapping[str, Sequence[Path]] = {}
    ENTRY_FIELDS: Mapping[str, Sequence[Path]] = {}

    def container(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        """The node holding the entries; also what flatten() returns."""
        raise NotImplementedError

    def channel(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        """The node holding feed-level metadata."""
        return self.container(tree)

    def entry_nodes(self, tree: Dict[str, Any]) -> List[Any]:
        return as_list(self.container(tree).get(self.entries_key))

    def feed_link(self, channel: Dict[str, Any]) -> str:
        return select_link(channel.get("link"))

    def entry_link(self, item: Dict[str, Any]) -> str:
        return select_link(item.get("link"))

    def _field(self, table: Mapping[str, Sequence[Path]], node: Any, name: str) -> Any:
        return first_present(node, table.get(name, ()))

    def parse(self, tree: Dict[str, Any], options: ExtractOptions) -> CanonicalFeed:
        channel = self.channel(tree)
        # Entries are a list from here on, whatever the source cardinality
        items = [item for item in self.entry_nodes(tree) if isinstance(item, dict)]
        logger.debug("Mapping %s feed with %d entries", self.dialect.value, len(items))

        def text(name: str) -> str:
            return get_text(self._field(self.FEED_FIELDS, channel, name))

        feed: Dict[str, Any] = {
            "title": text("title"),
            "link": canonical_link(self.feed_link(channel), options.base_url),
            "description": clean_html(self._field(self.FEED_FIELDS, channel, "description")),
            "generator": text("generator"),
            "language": text("language"),
            "published": format_date(text("published"), options.use_iso_date_format),
            "entries": [self.map_entry(item, options) for item in items],
        }
        apply_hook(feed, options.get_extra_feed_fields, channel)
        return cast(CanonicalFeed, feed)

    def map_entry(self, item: Dict[str, Any], options: ExtractOptions) -> CanonicalEntry:
        """Maps one raw entry node to a canonical entry."""

        def text(name: str) -> str:
            return get_text(self._field(self.ENTRY_FIELDS, item, name))

        published = text("published")
        link = resolve_link(self.entry_link(item), options.base_url)
        entry: Dict[str, Any] = {
            "id": text("id") or self.fallback_id(link, published),
            "title": text("title"),
            "link": link or (options.base_url or ""),
            "description": clean_html(self._field(self.ENTRY_FIELDS, item, "description")),
            "published": format_date(published, options.use_iso_date_format),
        }
        apply_hook(entry, options.get_extra_entry_fields, item)
        return cast(CanonicalEntry, entry)

    @staticmethod
    def fallback_id(link: str, published: str) -> str:
        """Derives a stable id from the link and the publication time."""
        if not link:
            return ""
        dt = parse_date(published)
        if dt is None:
            return hash_id(link)
        return f"{hash_id(link)}-{int(dt.timestamp() * 1000)}"

    def flatten(self, tree: Dict[str, Any]) -> Dict[str, Any]:
        container = dict(self.container(tree))
        if self.entries_key in container:
            container[self.entries_key] = as_list(container[self.entries_key])
        return container
