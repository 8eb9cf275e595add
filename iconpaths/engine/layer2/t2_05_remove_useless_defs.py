"""T2.05 — Remove Useless Defs.

Inside <defs> (and id-less non-rendering containers) only content something
can point at is worth keeping: elements with an id, and <style>. Anything
else is lifted out of the way; a container left with nothing is removed.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import NON_RENDERING_ELEMS
from iconpaths.svg.tree import Element, Node, detach, walk


def _useful_nodes(el: Element) -> list[Node]:
    useful: list[Node] = []
    for child in el.elements:
        if "id" in child.attributes or child.name == "style":
            useful.append(child)
        else:
            useful.extend(_useful_nodes(child))
    return useful


@transform(
    id="T2.05",
    layer=Layer.VISIBILITY,
    dependencies=["T2.01"],
    description="Remove <defs> content nothing can reference",
)
def remove_useless_defs(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name != "defs" and not (el.name in NON_RENDERING_ELEMS and "id" not in el.attributes):
            continue
        useful = _useful_nodes(el)
        if not useful:
            detach(parent, el)
        else:
            el.children = useful
