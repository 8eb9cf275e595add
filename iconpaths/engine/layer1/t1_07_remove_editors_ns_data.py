"""T1.07 — Remove Editor Namespace Data.

Inkscape, Illustrator, Sketch, Figma and friends leave their own namespaces
behind. Drop the declarations plus every element and attribute using them.
"""

from __future__ import annotations

import logging

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import EDITOR_NAMESPACES
from iconpaths.svg.tree import detach, walk

logger = logging.getLogger(__name__)


@transform(id="T1.07", layer=Layer.METADATA, description="Remove editor namespaces and their data")
def remove_editors_ns_data(ctx: OptimizeContext) -> None:
    prefixes: set[str] = set()
    for el, _ in walk(ctx.document):
        for name, value in list(el.attributes.items()):
            if name.startswith("xmlns:") and value in EDITOR_NAMESPACES:
                prefixes.add(name[len("xmlns:"):])
                del el.attributes[name]
    if not prefixes:
        return

    logger.debug("Removing editor namespaces: %s", sorted(prefixes))
    for el, parent in walk(ctx.document):
        if el.prefix in prefixes:
            detach(parent, el)
            continue
        for name in list(el.attributes):
            if ":" in name and name.split(":", 1)[0] in prefixes:
                del el.attributes[name]
