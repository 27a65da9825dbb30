"""
Link selection and absolutization.

Feeds often carry several competing links (Atom allows any number of
<link rel=... href=...> elements), relative references, or no link at all.
Nothing here raises on malformed input: a link that cannot be made valid
becomes the empty string.
"""

from typing import Any, List, Optional
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from feedextractor.utils.text import raw_text

# Query parameters that only carry tracking information
TRACKING_PARAMS = frozenset(
    [
        "fbclid",
        "gclid",
        "dclid",
        "msclkid",
        "mc_cid",
        "mc_eid",
        "igshid",
        "yclid",
        "_hsenc",
        "_hsmi",
        "__hssc",
        "__hstc",
        "__hsfp",
        "hsCtaTracking",
    ]
)


def is_valid_url(url: Any) -> bool:
    """Checks that a string is an absolute http(s) URL, by syntax only."""
    if not isinstance(url, str) or not url:
        return False
    try:
        parts = urlsplit(url.strip())
        # Accessing .port validates the netloc
        _ = parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def _is_tracking_param(key: str) -> bool:
    return key.startswith("utm_") or key in TRACKING_PARAMS


def purify(url: str) -> str:
    """Strips tracking query parameters from a URL; "" if the URL is invalid."""
    if not is_valid_url(url):
        return ""
    parts = urlsplit(url.strip())
    params = parse_qsl(parts.query, keep_blank_values=True)
    query = [(key, val) for key, val in params if not _is_tracking_param(key)]
    if len(query) == len(params):
        return url.strip()
    return urlunsplit(parts._replace(query=urlencode(query)))


def absolutify(base_url: str, url: str) -> str:
    """Resolves url against base_url; "" if the result is not a valid URL."""
    try:
        result = urljoin(base_url.strip(), url.strip())
    except ValueError:
        return ""
    return result if is_valid_url(result) else ""


def _candidates(value: Any) -> List[Any]:
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return [v for v in value if v is not None and v != ""]
    return [value]


def _href(candidate: Any) -> str:
    if isinstance(candidate, dict):
        href = candidate.get("@_href", candidate.get("href"))
        if href is not None:
            return raw_text(href).strip()
    return raw_text(candidate).strip()


def _rel(candidate: Any) -> str:
    if isinstance(candidate, dict):
        rel = candidate.get("@_rel", candidate.get("rel"))
        if rel:
            return raw_text(rel).strip().lower()
    return "alternate"


def select_link(value: Any, alternate_only: bool = False) -> str:
    """
    Picks one href among the link candidates found in a raw tree.

    A bare string is a candidate as-is. Mapping candidates carry their URL in
    "@_href" (Atom) or "#text" (RSS with attributes). A candidate without a
    relation counts as "alternate", as in Atom.

    Args:
        value: a raw tree value: string, mapping, or a list of either.
        alternate_only: return "" instead of falling back to the first
            candidate when none is marked alternate.

    Returns:
        The selected href, or "".
    """
    candidates = [c for c in _candidates(value) if _href(c)]
    for candidate in candidates:
        if _rel(candidate) == "alternate":
            return _href(candidate)
    if candidates and not alternate_only:
        return _href(candidates[0])
    return ""


def resolve_link(url: str, base_url: Optional[str] = None) -> str:
    """
    Canonicalizes a selected link.

    Absolute URLs are purified. Relative references are resolved against
    base_url when one is given, and kept as they are otherwise. Malformed
    and non-http URLs become "".
    """
    url = (url or "").strip()
    if not url:
        return ""
    if is_valid_url(url):
        return purify(url)
    try:
        parts = urlsplit(url)
    except ValueError:
        return ""
    if parts.scheme:
        # Absolute, but not a usable http(s) URL
        return ""
    if base_url:
        return purify(absolutify(base_url, url))
    return "" if parts.netloc else url
