"""T5.01 — Move Element Attributes to Group.

When every child of a <g> carries the same inheritable attribute (or the
same transform), hoist it onto the group once. Transforms shared only by
paths stay put: path data can absorb them. Runs children-first so
hoisted attributes can keep climbing.

Skipped while the document still holds <style> or <script>.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import INHERITABLE_ATTRS, PATH_ELEMS
from iconpaths.svg.transform_list import multiply
from iconpaths.svg.tree import Element, walk_post_order


def common_attrs(children: list[Element]) -> dict[str, str]:
    common = {
        name: value
        for name, value in children[0].attributes.items()
        if name in INHERITABLE_ATTRS or name == "transform"
    }
    for child in children[1:]:
        common = {k: v for k, v in common.items() if child.attributes.get(k) == v}
    return common


@transform(
    id="T5.01",
    layer=Layer.STRUCTURE,
    description="Hoist attributes shared by all children onto the group",
)
def move_elems_attrs_to_group(ctx: OptimizeContext) -> None:
    for el, _ in walk_post_order(ctx.document):
        if el.name != "g" or len(el.children) <= 1:
            continue
        children = el.elements
        if len(children) != len(el.children):
            continue
        common = common_attrs(children)
        if "clip-path" in el.attributes or "mask" in el.attributes or "filter" in el.attributes:
            common.pop("transform", None)
        if all(child.name in PATH_ELEMS for child in children):
            common.pop("transform", None)
        if not common:
            continue
        for name, value in common.items():
            if name == "transform":
                el.attributes["transform"] = multiply(el.attributes.get("transform", ""), value)
            else:
                el.attributes[name] = value
            for child in children:
                del child.attributes[name]
