"""T5.02 — Move Group Transform to Elements.

A group transform is pushed down onto its children when all of them are
paths, groups or text without ids, so the group itself can collapse.
Groups referencing clip paths, masks or filters keep their transform.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import PATH_ELEMS, REFERENCE_ATTRS
from iconpaths.svg.style import has_url_reference
from iconpaths.svg.transform_list import multiply
from iconpaths.svg.tree import Element, walk

_ACCEPTING_ELEMS = PATH_ELEMS | {"g", "text"}


def _pushable(el: Element) -> bool:
    if el.name != "g" or not el.children or "transform" not in el.attributes:
        return False
    if any(
        has_url_reference(value)
        for name, value in el.attributes.items()
        if name in REFERENCE_ATTRS
    ):
        return False
    return all(
        isinstance(child, Element)
        and child.name in _ACCEPTING_ELEMS
        and "id" not in child.attributes
        for child in el.children
    )


@transform(
    id="T5.02",
    layer=Layer.STRUCTURE,
    dependencies=["T5.01"],
    description="Push group transforms down to children",
)
def move_group_attrs_to_elems(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        if not _pushable(el):
            continue
        group_transform = el.attributes.pop("transform")
        for child in el.elements:
            child.attributes["transform"] = multiply(
                group_transform, child.attributes.get("transform", "")
            )
