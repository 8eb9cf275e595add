"""T2.01 — Remove Hidden Elements.

Elements that can never paint a pixel:
- display="none", or opacity="0" outside a <clipPath>
- visibility="hidden" with no visible descendant
- zero-sized circles, ellipses, rects, patterns and images
- paths without path data, polylines and polygons without points
- non-rendering elements (gradients, clip paths...) nobody references

A path whose data is only a moveto is kept: it is still valid output.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import NON_RENDERING_ELEMS
from iconpaths.svg.references import referenced_ids
from iconpaths.svg.tree import Element, Parent, detach, walk, walk_with_ancestors
from iconpaths.utils.numbers import to_float


def _is_zero(value: str | None) -> bool:
    return to_float(value) == 0


def _has_visible_descendant(el: Element) -> bool:
    return any(child.attributes.get("visibility") == "visible" for child, _ in walk(el))


def _zero_sized(el: Element) -> bool:
    a = el.attributes
    if el.name == "circle":
        return _is_zero(a.get("r"))
    if el.name == "ellipse":
        return _is_zero(a.get("rx")) or _is_zero(a.get("ry"))
    if el.name in ("rect", "pattern", "image"):
        return _is_zero(a.get("width")) or _is_zero(a.get("height"))
    return False


def _missing_geometry(el: Element) -> bool:
    if el.name == "path":
        return not el.attributes.get("d", "").strip()
    if el.name in ("polyline", "polygon"):
        return not el.attributes.get("points", "").strip()
    return False


def is_hidden(el: Element, ancestors: tuple[Element, ...], referenced: set[str]) -> bool:
    a = el.attributes
    if a.get("display") == "none":
        return True
    if a.get("opacity") == "0" and not any(anc.name == "clipPath" for anc in ancestors):
        return True
    if a.get("visibility") == "hidden" and not _has_visible_descendant(el):
        return True
    if _zero_sized(el) or _missing_geometry(el):
        return True
    if el.name in NON_RENDERING_ELEMS and a.get("id") not in referenced:
        return True
    return False


@transform(
    id="T2.01",
    layer=Layer.VISIBILITY,
    description="Remove elements that cannot render",
)
def remove_hidden_elems(ctx: OptimizeContext) -> None:
    referenced = referenced_ids(ctx.document)
    for el, ancestors in walk_with_ancestors(ctx.document):
        if is_hidden(el, ancestors, referenced):
            parent: Parent = ancestors[-1] if ancestors else ctx.document
            detach(parent, el)
