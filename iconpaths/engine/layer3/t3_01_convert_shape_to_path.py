"""T3.01 — Convert Shapes to Paths.

rect (square corners), line, polyline and polygon always; circle and ellipse
as two arcs when ``convert_arcs`` is on. Only unitless coordinates convert.
A polyline/polygon with fewer than two points draws nothing and is removed.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import Element, detach, walk
from iconpaths.utils.numbers import NUMBER_RE, format_number, to_float

_GEOMETRY_ATTRS = {
    "rect": ("x", "y", "width", "height"),
    "line": ("x1", "y1", "x2", "y2"),
    "polyline": ("points",),
    "polygon": ("points",),
    "circle": ("cx", "cy", "r"),
    "ellipse": ("cx", "cy", "rx", "ry"),
}


def _coords(el: Element, names: tuple[str, ...]) -> list[float] | None:
    values = []
    for name in names:
        value = to_float(el.attributes.get(name, "0"))
        if value is None:
            return None
        values.append(value)
    return values


def _path_for(el: Element, precision: int, convert_arcs: bool) -> str | None:
    def f(v: float) -> str:
        return format_number(v, precision)

    if el.name == "rect":
        if "rx" in el.attributes or "ry" in el.attributes:
            return None
        if "width" not in el.attributes or "height" not in el.attributes:
            return None
        xywh = _coords(el, ("x", "y", "width", "height"))
        if xywh is None:
            return None
        x, y, w, h = xywh
        return f"M{f(x)} {f(y)}H{f(x + w)}V{f(y + h)}H{f(x)}z"

    if el.name == "line":
        pts = _coords(el, ("x1", "y1", "x2", "y2"))
        if pts is None:
            return None
        x1, y1, x2, y2 = pts
        return f"M{f(x1)} {f(y1)}L{f(x2)} {f(y2)}"

    if el.name in ("circle", "ellipse") and convert_arcs:
        if el.name == "circle":
            vals = _coords(el, ("cx", "cy", "r"))
            if vals is None:
                return None
            cx, cy, rx = vals
            ry = rx
        else:
            vals = _coords(el, ("cx", "cy", "rx", "ry"))
            if vals is None:
                return None
            cx, cy, rx, ry = vals
        return (
            f"M{f(cx - rx)} {f(cy)}"
            f"A{f(rx)} {f(ry)} 0 1 0 {f(cx + rx)} {f(cy)}"
            f"A{f(rx)} {f(ry)} 0 1 0 {f(cx - rx)} {f(cy)}z"
        )
    return None


def _poly_path(el: Element, precision: int) -> str | None:
    """"" when there are too few points to draw anything."""
    numbers = [float(n) for n in NUMBER_RE.findall(el.attributes.get("points", ""))]
    if len(numbers) < 4:
        return ""
    pairs = [
        f"{format_number(numbers[i], precision)} {format_number(numbers[i + 1], precision)}"
        for i in range(0, len(numbers) - 1, 2)
    ]
    d = "M" + "L".join(pairs)
    return d + "z" if el.name == "polygon" else d


@transform(
    id="T3.01",
    layer=Layer.GEOMETRY,
    description="Convert basic shapes to <path>",
)
def convert_shape_to_path(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, parent in walk(ctx.document):
        if el.name not in _GEOMETRY_ATTRS:
            continue
        if el.name in ("polyline", "polygon"):
            d = _poly_path(el, precision)
            if d == "":
                detach(parent, el)
                continue
        else:
            d = _path_for(el, precision, ctx.config.convert_arcs)
        if d is None:
            continue
        for name in _GEOMETRY_ATTRS[el.name]:
            el.attributes.pop(name, None)
        el.name = "path"
        el.attributes["d"] = d
