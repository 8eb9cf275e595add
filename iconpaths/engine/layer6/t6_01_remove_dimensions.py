"""T6.01 — Remove Dimensions.

The component sizes the icon, so <svg> width/height go. When there is no
viewBox yet, a numeric width/height pair becomes one first.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk
from iconpaths.utils.numbers import format_number, to_float


@transform(id="T6.01", layer=Layer.COSMETIC, description="Replace width/height with a viewBox")
def remove_dimensions(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, _ in walk(ctx.document):
        if el.name != "svg":
            continue
        a = el.attributes
        if "viewBox" in a:
            a.pop("width", None)
            a.pop("height", None)
            continue
        width, height = to_float(a.get("width")), to_float(a.get("height"))
        if width is None or height is None:
            continue
        a["viewBox"] = f"0 0 {format_number(width, precision)} {format_number(height, precision)}"
        del a["width"]
        del a["height"]
