"""SVG parser — facade over lxml.

Converts raw SVG text → Document. The body is parsed as a fragment so any
number of top-level nodes survives parsing; validating the root shape is the
re-rooting pass's job, not the parser's.
"""

from __future__ import annotations

import logging
import re

from lxml import etree

from iconpaths.errors import ParseError
from iconpaths.svg.collections import TEXT_ELEMS
from iconpaths.svg.tree import Comment, Doctype, Document, Element, Instruction, Node, Text

logger = logging.getLogger(__name__)

_XML_DECL_RE = re.compile(r"^\s*<\?xml\s+(?P<body>.*?)\?>", re.DOTALL)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE\s+(?P<body>(?:[^\[>]|\[.*?\])*)>", re.DOTALL | re.IGNORECASE)
# Comments and processing instructions allowed ahead of a doctype
_MISC_RE = re.compile(r"<!--.*?-->|<\?.*?\?>", re.DOTALL)

_FRAGMENT_TAG = "iconpaths-fragment"
_XML_NS = "http://www.w3.org/XML/1998/namespace"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        encoding="utf-8",
        remove_comments=False,
        remove_pis=False,
        load_dtd=False,
        no_network=True,
        huge_tree=False,
    )


def parse_svg(svg_text: str) -> Document:
    """Parse raw SVG text into a Document.

    Raises ParseError when the markup is not well-formed.
    """
    doc = Document()
    text = svg_text.removeprefix("\ufeff")

    decl = _XML_DECL_RE.match(text)
    if decl:
        doc.children.append(Instruction("xml", decl.group("body").strip()))
        text = text[decl.end():]

    prolog = ""
    doctype = _DOCTYPE_RE.search(text)
    if doctype and not _MISC_RE.sub("", text[: doctype.start()]).strip():
        doc.children.append(Doctype(doctype.group("body").strip()))
        prolog = text[: doctype.end()]
        text = text[doctype.end():]

    source = f"{prolog}<{_FRAGMENT_TAG}>{text}</{_FRAGMENT_TAG}>"
    try:
        fragment = etree.fromstring(source.encode("utf-8"), _make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed SVG markup: {e.msg} (line {e.lineno})") from e

    doc.children.extend(_convert_children(fragment, {}, preserve=False))
    logger.debug("Parsed SVG: %d top-level nodes", len(doc.children))
    return doc


def _qualified(clark: str, nsmap: dict[str | None, str]) -> str:
    """``{uri}local`` → ``prefix:local`` using the element's in-scope namespaces."""
    if not clark.startswith("{"):
        return clark
    uri, local = clark[1:].split("}", 1)
    if uri == _XML_NS:
        return f"xml:{local}"
    for prefix, ns in nsmap.items():
        if prefix is not None and ns == uri:
            return f"{prefix}:{local}"
    return local


def _convert_element(el: etree._Element, inherited: dict[str | None, str], preserve: bool) -> Element:
    nsmap = dict(el.nsmap)
    attributes: dict[str, str] = {}
    for prefix, uri in nsmap.items():
        if inherited.get(prefix) != uri:
            attributes["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
    for name, value in el.attrib.items():
        attributes[_qualified(name, nsmap)] = value

    local = etree.QName(el).localname
    name = f"{el.prefix}:{local}" if el.prefix else local

    keep_space = preserve or local in TEXT_ELEMS or attributes.get("xml:space") == "preserve"
    node = Element(name=name, attributes=attributes)
    node.children = _convert_children(el, nsmap, keep_space)
    return node


def _convert_children(el: etree._Element, nsmap: dict[str | None, str], preserve: bool) -> list[Node]:
    nodes: list[Node] = []

    def add_text(value: str | None) -> None:
        if not value:
            return
        if not preserve and not value.strip():
            return
        if nodes and isinstance(nodes[-1], Text):
            nodes[-1].value += value
        else:
            nodes.append(Text(value))

    add_text(el.text)
    for child in el:
        if child.tag is etree.Comment:
            nodes.append(Comment(child.text or ""))
        elif child.tag is etree.ProcessingInstruction:
            nodes.append(Instruction(child.target, child.text or ""))
        elif child.tag is etree.Entity:
            add_text(child.text)
        else:
            nodes.append(_convert_element(child, nsmap, preserve))
        add_text(child.tail)
    return nodes
