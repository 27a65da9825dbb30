"""
Feed extraction entry points.

Wires the retriever, the XML tree builder, dialect detection and the dialect
parsers together. Every call works on its own input and options; nothing is
cached or shared between calls.
"""

import asyncio
import json
import logging
import warnings
from typing import Any, Dict, Mapping, Optional, Union

from feedextractor.detector import detect_dialect
from feedextractor.errors import EmptyContent, InvalidInput, MalformedJson, MalformedXml
from feedextractor.models import ExtractOptions
from feedextractor.parsers import get_parser
from feedextractor.services import retriever, xmlparser
from feedextractor.utils.linker import is_valid_url

logger = logging.getLogger(__name__)

OptionsArg = Union[ExtractOptions, Mapping[str, Any], None]


def _run(tree: Dict[str, Any], options: ExtractOptions, from_json: bool) -> Dict[str, Any]:
    dialect = detect_dialect(tree, from_json=from_json)
    logger.debug("Detected %s feed", dialect.value)
    parser = get_parser(dialect)
    if not options.normalization:
        return parser.flatten(tree)
    return dict(parser.parse(tree, options))


def extract_from_xml(xml_text: str, options: OptionsArg = None) -> Dict[str, Any]:
    """
    Extracts a feed from RSS, RDF or Atom text.

    Raises:
        EmptyContent: if the text is blank.
        MalformedXml: if the text is not well-formed XML.
        UnrecognizedFormat: if the document is not a supported feed.
    """
    opts = ExtractOptions.from_value(options)
    if not isinstance(xml_text, str) or not xml_text.strip():
        raise EmptyContent("input")
    if not xmlparser.validate(xml_text):
        raise MalformedXml()
    tree = xmlparser.xml2obj(xml_text)
    return _run(tree, opts, from_json=False)


def extract_from_json(json_value: Any, options: OptionsArg = None) -> Dict[str, Any]:
    """
    Extracts a feed from a JSON Feed document.

    json_value is normally the decoded object; JSON text is decoded first.

    Raises:
        MalformedJson: if JSON text cannot be decoded.
        UnrecognizedFormat: if the document is not a JSON Feed.
    """
    opts = ExtractOptions.from_value(options)
    if isinstance(json_value, (str, bytes, bytearray)):
        json_value = _decode_json(json_value)
    return _run(json_value, opts, from_json=True)


def _decode_json(text: Union[str, bytes, bytearray]) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug("JSON decoding failed: %s", e)
        raise MalformedJson() from e


async def extract(
    url: Any,
    options: OptionsArg = None,
    retriever_options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Downloads a feed and extracts it.

    The download runs in a worker thread; the rest is the same pipeline as
    extract_from_xml() / extract_from_json().

    Raises:
        InvalidInput: if url is not a valid http(s) URL. No request is made.
        RetrievalError: if the server answers with an error status or a
            content type that is neither XML nor JSON.
        EmptyContent: if the body is blank.
        MalformedXml, MalformedJson, UnrecognizedFormat: as for the
            synchronous entry points.
    """
    if not isinstance(url, str) or not is_valid_url(url):
        raise InvalidInput()
    opts = ExtractOptions.from_value(options)

    data = await asyncio.to_thread(retriever.fetch, url, retriever_options)
    text = (data.get("text") or "").strip()
    if not text:
        raise EmptyContent(url)

    if data["type"] == "json":
        return extract_from_json(_decode_json(text), opts)
    return extract_from_xml(text, opts)


async def read(
    url: Any,
    options: OptionsArg = None,
    retriever_options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Deprecated alias of extract()."""
    warnings.warn(
        "read() is deprecated, use extract() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return await extract(url, options, retriever_options)
