"""
Feed retrieval.

This module provides the Retriever class, which downloads a feed over HTTP
and tells the caller whether the payload is XML or JSON.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from feedextractor.config import load_config
from feedextractor.errors import RetrievalError
from feedextractor.models import FetchResult

logger = logging.getLogger(__name__)

_XML_TYPE_RE = re.compile(r"(\+|/)(xml|html)")
_JSON_TYPE_RE = re.compile(r"(\+|/)json")


class Retriever:
    """
    Downloads feeds with requests.

    Retriever options (all optional):
        headers: extra request headers, merged over the default User-Agent.
        timeout: seconds before the request is abandoned.
        proxy: {"target": ..., "headers": {...}}; the URL-encoded feed URL
            is appended to target and that address is fetched instead.
        proxies: passed to requests unchanged.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else load_config()

    def _request(self, url: str, options: Mapping[str, Any]) -> requests.Response:
        headers = {"User-Agent": self.config["user_agent"]}
        headers.update(options.get("headers") or {})
        timeout = options.get("timeout", self.config["timeout"])
        proxies = options.get("proxies")

        proxy = options.get("proxy") or {}
        target = proxy.get("target")
        if target:
            headers.update(proxy.get("headers") or {})
            url = target + quote(url, safe="!~*'()")
            logger.debug("Fetching through proxy: %s", url)

        return requests.get(url, headers=headers, timeout=timeout, proxies=proxies)

    def fetch(self, url: str, options: Optional[Mapping[str, Any]] = None) -> FetchResult:
        """
        Fetches a feed.

        Raises:
            RetrievalError: on an HTTP status of 400 or above, or a content
                type that is neither XML nor JSON.
            requests.RequestException: on transport failures, unmodified.
        """
        try:
            resp = self._request(url, options or {})
        except requests.RequestException as req_err:
            logger.error("Network error fetching %s: %s", url, req_err)
            raise

        status = resp.status_code
        if status >= 400:
            raise RetrievalError(
                f"Request failed with error code {status}", status_code=status
            )

        content_type = resp.headers.get("content-type", "") or ""
        if _XML_TYPE_RE.search(content_type):
            kind = "xml"
        elif _JSON_TYPE_RE.search(content_type):
            kind = "json"
        else:
            raise RetrievalError(
                f"Invalid content type: {content_type}", content_type=content_type
            )

        if "charset" not in content_type.lower() and kind == "xml":
            # requests falls back to ISO-8859-1 for text/*; sniff instead
            resp.encoding = resp.apparent_encoding
        text = resp.text.strip()
        logger.debug("Fetched %s (%s, %d chars)", url, kind, len(text))
        return {"type": kind, "text": text}


def fetch(url: str, options: Optional[Mapping[str, Any]] = None) -> FetchResult:
    """Fetches a feed with a default-configured Retriever."""
    return Retriever().fetch(url, options)
