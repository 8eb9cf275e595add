"""T5.03 — Collapse Groups.

Children-first:
1. A group with exactly one element child hands its attributes down to that
   child (transforms compose, inheritable attributes yield to the child's own
   value). A conflicting non-inheritable attribute stops the hand-off.
2. A group left without attributes is replaced by its children, unless an
   animation element inside would lose its target.

Groups at the top level or inside <switch> are never touched.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import ANIMATION_ELEMS, INHERITABLE_ATTRS
from iconpaths.svg.transform_list import multiply
from iconpaths.svg.tree import Element, replace_with_children, walk_post_order


def _animates(el: Element, name: str) -> bool:
    return any(
        child.name in ANIMATION_ELEMS and child.attributes.get("attributeName") == name
        for child in el.elements
    )


def _can_hand_down(group: Element, child: Element) -> bool:
    a = group.attributes
    if "id" in child.attributes or "filter" in a:
        return False
    if "class" in a and "class" in child.attributes:
        return False
    if "clip-path" in a or "mask" in a:
        return child.name == "g" and "transform" not in a and "transform" not in child.attributes
    return True


def hand_down_attrs(group: Element, child: Element) -> None:
    for name, value in list(group.attributes.items()):
        if _animates(child, name):
            return
        current = child.attributes.get(name)
        if current is None:
            child.attributes[name] = value
        elif name == "transform":
            child.attributes[name] = multiply(value, current)
        elif current == "inherit":
            child.attributes[name] = value
        elif name not in INHERITABLE_ATTRS and current != value:
            return
        del group.attributes[name]


@transform(
    id="T5.03",
    layer=Layer.STRUCTURE,
    dependencies=["T5.01", "T5.02"],
    description="Collapse useless groups",
)
def collapse_groups(ctx: OptimizeContext) -> None:
    for el, parent in walk_post_order(ctx.document):
        if el.name != "g" or not isinstance(parent, Element) or parent.name == "switch":
            continue
        if not el.children:
            continue
        if el.attributes and len(el.children) == 1:
            child = el.children[0]
            if isinstance(child, Element) and _can_hand_down(el, child):
                hand_down_attrs(el, child)
        if not el.attributes and not any(c.name in ANIMATION_ELEMS for c in el.elements):
            replace_with_children(parent, el)
