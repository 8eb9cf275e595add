"""T2.07 — Remove Empty Containers.

Runs children-first so nested empty groups disappear in one go. An empty
<svg>, a <pattern> with attributes, a <mask> with an id, a filtered <g> and
anything directly inside <switch> are kept.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import CONTAINER_ELEMS
from iconpaths.svg.tree import Element, detach, walk_post_order


def _removable(el: Element, parent) -> bool:
    if el.name not in CONTAINER_ELEMS or el.children or el.name == "svg":
        return False
    if el.name == "pattern" and el.attributes:
        return False
    if el.name == "mask" and "id" in el.attributes:
        return False
    if el.name == "g" and "filter" in el.attributes:
        return False
    return not (isinstance(parent, Element) and parent.name == "switch")


@transform(
    id="T2.07",
    layer=Layer.VISIBILITY,
    dependencies=["T2.01", "T2.05", "T2.06"],
    description="Remove containers left without children",
)
def remove_empty_containers(ctx: OptimizeContext) -> None:
    for el, parent in walk_post_order(ctx.document):
        if _removable(el, parent):
            detach(parent, el)
