"""
Text helpers shared by the dialect parsers.
"""

import hashlib
import html
import re
from typing import Any

_TAG_RE = re.compile(r"<[^>]*>")


def raw_text(value: Any) -> str:
    """
    Returns the text carried by a raw tree value, untouched.

    Leaf elements are plain strings; elements with attributes keep their
    text under "#text". For repeated elements the first one wins.
    """
    if isinstance(value, list):
        return raw_text(value[0]) if value else ""
    if isinstance(value, dict):
        value = value.get("#text", "")
    if value is None or isinstance(value, (dict, list)):
        return ""
    if not isinstance(value, str):
        # JSON Feed may carry numbers (e.g. ids)
        return str(value)
    return value


def get_text(value: Any) -> str:
    """Returns the entity-decoded, trimmed text of a raw tree value."""
    return html.unescape(raw_text(value)).strip()


def clean_html(raw_html: Any) -> str:
    """Removes HTML tags from a string."""
    text = html.unescape(raw_text(raw_html))
    if not text:
        return ""
    text = _TAG_RE.sub(" ", text)
    return " ".join(text.split())


def hash_id(value: str) -> str:
    """Creates a deterministic hash of a string."""
    return hashlib.md5(value.encode("utf-8")).hexdigest()
