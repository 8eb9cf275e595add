"""T3.06 — Cleanup List of Values.

Attributes holding lists of numbers (points, stroke-dasharray, dx/dy/x/y
lists on text) are rounded item by item and re-joined with single spaces.
Non-numeric items such as "new" are kept.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.layer3.t3_05_cleanup_numeric_values import cleanup_number
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk

_LIST_ATTRS = {"points", "enable-background", "stroke-dasharray", "dx", "dy", "x", "y"}
_SPLIT_RE = re.compile(r"[\s,]+")


@transform(
    id="T3.06",
    layer=Layer.GEOMETRY,
    dependencies=["T3.05"],
    description="Round numbers inside list-valued attributes",
)
def cleanup_list_of_values(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, _ in walk(ctx.document):
        for name in _LIST_ATTRS & el.attributes.keys():
            items = _SPLIT_RE.split(el.attributes[name].strip())
            if len(items) < 2:
                continue
            el.attributes[name] = " ".join(cleanup_number(item, precision) for item in items)
