"""Re-rooting pass — discard the <svg> wrapper and keep its drawable children.

With more than one child, each element child is marked for list output: a
``key`` attribute holding its position and a ``SVGChild:`` name prefix the
translator later turns into list separators.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from iconpaths.errors import RootShapeError
from iconpaths.svg.parser import parse_svg
from iconpaths.svg.serializer import serialize
from iconpaths.svg.tree import Document, Element

logger = logging.getLogger(__name__)

CHILD_PREFIX = "SVGChild:"


class RerootResult(NamedTuple):
    text: str
    multiple_children: bool


def reroot(svg_text: str) -> RerootResult:
    """Replace the single ``svg`` root by its children.

    Raises:
        ParseError: ``svg_text`` is not well-formed.
        RootShapeError: the document is not exactly one ``svg`` element.
    """
    doc = parse_svg(svg_text)
    if len(doc.children) > 1:
        raise RootShapeError("Expected a single child of the root")
    svg = doc.children[0] if doc.children else None
    if not isinstance(svg, Element) or svg.name != "svg":
        raise RootShapeError("Expected an svg element as the root child")

    multiple_children = len(svg.children) > 1
    if multiple_children:
        for index, child in enumerate(svg.children):
            if isinstance(child, Element):
                child.attributes["key"] = str(index)
                child.name = f"{CHILD_PREFIX}{child.name}"
        logger.debug("Re-rooted %d children as a keyed list", len(svg.children))

    return RerootResult(serialize(Document(children=svg.children)), multiple_children)
