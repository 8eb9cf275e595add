"""T3.04 — Merge Paths.

Adjacent sibling <path>s with identical attributes become one path when
their footprints do not overlap (overlap would change fill-rule results).
Paths with markers, clipping, masks or url() paint are never merged.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.geometry import paths_intersect
from iconpaths.svg.path_data import concat_path_data
from iconpaths.svg.style import computed_style, has_url_reference
from iconpaths.svg.tree import Element, Node, walk_with_ancestors
from iconpaths.utils.numbers import to_float

_BLOCKING_PROPS = ("marker-start", "marker-mid", "marker-end", "clip-path", "mask", "mask-image")
_URL_PROPS = ("fill", "filter", "stroke")


def _candidate(node: Node) -> bool:
    return (
        isinstance(node, Element)
        and node.name == "path"
        and not node.children
        and bool(node.attributes.get("d"))
    )


def _blocked(style: dict[str, str]) -> bool:
    if any(style.get(prop, "none") != "none" for prop in _BLOCKING_PROPS):
        return True
    return any(has_url_reference(style.get(prop, "")) for prop in _URL_PROPS)


def _same_attrs(a: Element, b: Element) -> bool:
    first = {k: v for k, v in a.attributes.items() if k != "d"}
    second = {k: v for k, v in b.attributes.items() if k != "d"}
    return first == second


def _stroke_width(style: dict[str, str]) -> float:
    if style.get("stroke", "none") == "none":
        return 0.0
    width = to_float(style.get("stroke-width", "1"))
    return width if width is not None else 1.0


@transform(
    id="T3.04",
    layer=Layer.GEOMETRY,
    dependencies=["T3.02", "T3.03"],
    description="Merge adjacent non-overlapping paths with equal attributes",
)
def merge_paths(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, ancestors in walk_with_ancestors(ctx.document):
        if len(el.children) <= 1:
            continue
        chain = ancestors + (el,)
        merged: list[Node] = []
        prev: Element | None = None
        for child in el.children:
            if not _candidate(child):
                merged.append(child)
                prev = None
                continue
            style = computed_style(child, chain)
            if _blocked(style):
                merged.append(child)
                prev = None
                continue
            if (
                prev is not None
                and _same_attrs(prev, child)
                and not paths_intersect(prev.attributes["d"], child.attributes["d"], _stroke_width(style))
            ):
                prev.attributes["d"] = concat_path_data(
                    prev.attributes["d"], child.attributes["d"], precision
                )
                continue
            merged.append(child)
            prev = child
        el.children = merged
