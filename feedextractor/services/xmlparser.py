"""
XML tree builder.

Turns feed XML into plain nested dicts the dialect parsers can read without
knowing anything about lxml:

- element names keep the prefix used in the source ("dc:creator");
- attributes become "@_"-prefixed keys ("@_href", "@_rdf:about");
- namespace declarations become "@_xmlns" / "@_xmlns:<prefix>" keys;
- text next to attributes or child elements is kept under "#text";
- an Atom type="xhtml" element also gets its markup's text under "#text";
- repeated sibling elements are collected into a list;
- a leaf element with no attributes is just its text.
"""

import logging
from typing import Any, Dict, Optional

from lxml import etree

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

ATOM_NAMESPACES = (
    "http://www.w3.org/2005/Atom",
    "http://purl.org/atom/ns#",  # Atom 0.3
)


def _make_parser() -> etree.XMLParser:
    # A fresh parser per call; lxml parsers are not thread-safe
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
    )


def _to_element(text: str) -> etree._Element:
    # The text is already decoded, so any encoding declaration is overridden
    return etree.fromstring(text.strip().encode("utf-8"), parser=_make_parser())


def validate(text: Any) -> bool:
    """Checks whether text is a well-formed XML document."""
    if not isinstance(text, str) or not text.strip():
        return False
    try:
        _to_element(text)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.debug("XML validation failed: %s", e)
        return False
    return True


def _qualified_name(
    name: str, nsmap: Dict[Optional[str], str], prefix: Optional[str] = None
) -> str:
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    if prefix is None:
        # Attributes do not know their prefix; find it from the scope
        for key, uri in nsmap.items():
            if uri == qname.namespace and key:
                prefix = key
                break
    return f"{prefix}:{qname.localname}" if prefix else qname.localname


def _element_key(element: etree._Element, bare_namespace: Optional[str]) -> str:
    qname = etree.QName(element)
    if bare_namespace is not None and qname.namespace == bare_namespace:
        return qname.localname
    return _qualified_name(element.tag, element.nsmap, element.prefix)


def _element_to_value(
    element: etree._Element, parent_nsmap: Dict, bare_namespace: Optional[str] = None
) -> Any:
    node: Dict[str, Any] = {}
    nsmap = element.nsmap

    for prefix, uri in nsmap.items():
        if parent_nsmap.get(prefix) != uri:
            node["@_xmlns" if prefix is None else f"@_xmlns:{prefix}"] = uri

    for name, val in element.attrib.items():
        node["@_" + _qualified_name(name, nsmap)] = val

    for child in element:
        if not isinstance(child.tag, str):
            continue
        key = _element_key(child, bare_namespace)
        value = _element_to_value(child, nsmap, bare_namespace)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]

    text = element.text or ""
    if len(element):
        # Mixed content: gather every text fragment around the children
        text += "".join(child.tail or "" for child in element)
        text = text.strip()

    if not node:
        return text
    if element.get("type") == "xhtml" and len(element):
        # Atom XHTML text construct: the text lives in the nested markup
        text = " ".join("".join(element.itertext()).split())
    if text:
        node["#text"] = text
    return node


def xml2obj(text: str) -> Dict[str, Any]:
    """
    Parses XML text into a nested dict keyed by the root element's name.

    Raises:
        lxml.etree.XMLSyntaxError: if the text is not well-formed.
    """
    root = _to_element(text)
    # An Atom document is keyed by local names whatever prefix it binds
    bare_namespace = None
    qname = etree.QName(root)
    if qname.localname == "feed" and qname.namespace in ATOM_NAMESPACES:
        bare_namespace = qname.namespace
    key = _element_key(root, bare_namespace)
    return {key: _element_to_value(root, {}, bare_namespace)}


def _root(tree: Any, name: str) -> Any:
    if not isinstance(tree, dict):
        return None
    return tree.get(name)


def is_rss(tree: Any) -> bool:
    """Checks for an RSS 2.0 tree: an <rss> root holding a <channel>."""
    root = _root(tree, "rss")
    return isinstance(root, dict) and "channel" in root


def is_rdf(tree: Any) -> bool:
    """Checks for an RSS 1.0 tree: an <rdf:RDF> root holding a <channel>."""
    root = _root(tree, "rdf:RDF")
    return isinstance(root, dict) and "channel" in root


def find_atom_root(tree: Any) -> Optional[Dict[str, Any]]:
    """Returns the <feed> node of an Atom tree, or None."""
    node = _root(tree, "feed")
    if not isinstance(node, dict):
        return None
    declared = node.get("@_xmlns")
    if declared in ATOM_NAMESPACES:
        return node
    if declared is None and any(
        key.startswith("@_xmlns:") and uri in ATOM_NAMESPACES for key, uri in node.items()
    ):
        return node
    # Feeds without a namespace still count if they carry entries
    if declared is None and "entry" in node:
        return node
    return None


def is_atom(tree: Any) -> bool:
    """Checks for an Atom tree."""
    return find_atom_root(tree) is not None
