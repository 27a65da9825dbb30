"""
Date normalization.

Feeds publish dates as RFC 822 strings, RFC 3339 strings with any number of
fractional-second digits, or something malformed. These helpers reconcile
all of them into one ISO-8601 shape without ever raising.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from dateutil import parser as dateutil_parser
# feedparser has no public single-date entry point; _parse_date is the
# dispatcher behind its registered date handlers (stable across 6.x)
from feedparser.datetimes import _parse_date as feedparser_parse_date  # type: ignore

logger = logging.getLogger(__name__)

# Common timezone abbreviations
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "UT": timezone.utc,
    "Z": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
    "CET": timezone(timedelta(hours=1)),
    "CEST": timezone(timedelta(hours=2)),
}

# Two defaults that differ in year, month and day
_DEFAULTS = (datetime(1900, 1, 1), datetime(1904, 2, 2))

_YEAR_RE = re.compile(r"\d{4}")


def parse_date(value: str) -> Optional[datetime]:
    """
    Parses a feed date string into an aware UTC datetime.

    ISO strings go through dateutil's strict ISO parser first, which keeps
    microsecond precision and drops anything finer. Everything else goes
    through dateutil's generic parser and, failing that, feedparser's
    handlers for the odder RFC 822 and W3DTF variants.

    Returns:
        The instant, or None when the value cannot be understood.
    """
    value = value.strip()
    if not value:
        return None

    dt: Optional[datetime] = None
    for parse in (dateutil_parser.isoparse, _parse_loose):
        try:
            dt = parse(value)
            break
        except (ValueError, OverflowError, TypeError):
            continue

    if dt is None:
        dt = _parse_feedparser(value)
        if dt is None:
            logger.debug("Unparseable date: %r", value)
            return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        return None


def _parse_loose(value: str) -> datetime:
    # dateutil fills missing fields from its default; a date whose calendar
    # part depends on the default was never in the input
    first, second = (
        dateutil_parser.parse(value, default=default, tzinfos=TZINFOS)
        for default in _DEFAULTS
    )
    if first.date() != second.date():
        raise ValueError(f"incomplete date: {value!r}")
    return first


def _parse_feedparser(value: str) -> Optional[datetime]:
    # Its ISO 8601 handler accepts bare centuries and fills the rest from
    # the clock, so only hand over values that carry a full year
    if not _YEAR_RE.search(value):
        return None
    parsed = feedparser_parse_date(value)
    if parsed is None:
        return None
    try:
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    except ValueError:
        return None


def normalize_date(value: Any) -> str:
    """Formats a date string as YYYY-MM-DDTHH:MM:SS.mmmZ, or "" if unparseable."""
    if not isinstance(value, str):
        return ""
    dt = parse_date(value)
    if dt is None:
        return ""
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )


to_iso_date_string = normalize_date


def format_date(value: Any, use_iso: bool = False) -> str:
    """Returns the source date unchanged, or its ISO form when use_iso is set."""
    if use_iso:
        return normalize_date(value)
    if not isinstance(value, str):
        return ""
    return value.strip()
