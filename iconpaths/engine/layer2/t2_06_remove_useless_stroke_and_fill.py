"""T2.06 — Remove Useless Stroke and Fill.

On shapes:
- no stroke (absent, "none", zero opacity or zero width) → drop every
  stroke-* attribute; write stroke="none" only to override an inherited stroke
- no fill ("none" or zero opacity) → drop fill-* attributes, keep fill="none"
  unless the parent already says so
- neither stroke nor fill → remove the shape

Subtrees of elements with an id are left alone (a <use> may restyle them).
Skipped while the document still holds <style> or <script>.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import SHAPE_ELEMS
from iconpaths.svg.style import computed_style, inherited_style
from iconpaths.svg.tree import detach, walk_with_ancestors


def _no_stroke(style: dict[str, str]) -> bool:
    stroke = style.get("stroke")
    return (
        stroke is None
        or stroke == "none"
        or style.get("stroke-opacity") == "0"
        or style.get("stroke-width") == "0"
    )


def _no_fill(style: dict[str, str]) -> bool:
    return style.get("fill") == "none" or style.get("fill-opacity") == "0"


@transform(
    id="T2.06",
    layer=Layer.VISIBILITY,
    dependencies=["T2.01"],
    description="Remove stroke and fill attributes that cannot paint",
)
def remove_useless_stroke_and_fill(ctx: OptimizeContext) -> None:
    for el, ancestors in walk_with_ancestors(ctx.document):
        if el.name not in SHAPE_ELEMS or "id" in el.attributes:
            continue
        if any("id" in anc.attributes for anc in ancestors):
            continue

        style = computed_style(el, ancestors)
        parent_style = inherited_style(ancestors)
        no_stroke = _no_stroke(style)
        no_fill = _no_fill(style)

        if no_stroke:
            for name in list(el.attributes):
                if name.startswith("stroke"):
                    del el.attributes[name]
            if parent_style.get("stroke", "none") != "none":
                el.attributes["stroke"] = "none"

        if no_fill:
            for name in list(el.attributes):
                if name.startswith("fill-"):
                    del el.attributes[name]
            if parent_style.get("fill") == "none":
                el.attributes.pop("fill", None)
            else:
                el.attributes["fill"] = "none"

        if no_stroke and style.get("fill") == "none":
            detach(ancestors[-1] if ancestors else ctx.document, el)
