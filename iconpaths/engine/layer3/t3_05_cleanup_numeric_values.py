"""T3.05 — Cleanup Numeric Values.

Round numeric attributes to ``float_precision``, strip "px", and turn other
absolute units into pixels when that is shorter. viewBox numbers are
rounded one by one.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk
from iconpaths.utils.numbers import NUMBER_RE, format_number

_NUMERIC_RE = re.compile(r"^([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)(px|pt|pc|mm|cm|m|in|ft|em|ex|%)?$")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")

# Units with a fixed pixel ratio (96 dpi)
ABSOLUTE_UNITS = {
    "cm": 96 / 2.54,
    "mm": 96 / 25.4,
    "in": 96.0,
    "pt": 4 / 3,
    "pc": 16.0,
    "px": 1.0,
}

_SKIPPED_ATTRS = {"id", "class", "version"}


def cleanup_number(value: str, precision: int) -> str:
    m = _NUMERIC_RE.match(value.strip())
    if not m:
        return value
    number = float(m.group(1))
    unit = m.group(2) or ""
    rounded = format_number(number, precision)
    if unit in ABSOLUTE_UNITS:
        in_px = format_number(number * ABSOLUTE_UNITS[unit], precision)
        if len(in_px) <= len(rounded) + len(unit):
            return in_px
    return rounded + unit


@transform(
    id="T3.05",
    layer=Layer.GEOMETRY,
    description="Round numeric attribute values and drop px units",
)
def cleanup_numeric_values(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, _ in walk(ctx.document):
        for name, value in list(el.attributes.items()):
            if name in _SKIPPED_ATTRS:
                continue
            if name == "viewBox":
                parts = _VIEWBOX_SPLIT_RE.split(value.strip())
                if all(NUMBER_RE.fullmatch(p) for p in parts):
                    el.attributes[name] = " ".join(format_number(float(p), precision) for p in parts)
                continue
            el.attributes[name] = cleanup_number(value, precision)
