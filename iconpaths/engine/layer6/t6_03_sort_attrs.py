"""T6.03 — Sort Attributes.

Stable attribute order makes output diffs readable:
1. ``xmlns``, then ``xmlns:*``, then other prefixed names
2. by the first dash-separated part, following ATTRIBUTE_ORDER
3. alphabetically
"""

from __future__ import annotations

from functools import cmp_to_key

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk

ATTRIBUTE_ORDER = [
    "id", "width", "height", "x", "x1", "x2", "y", "y1", "y2",
    "cx", "cy", "r", "fill", "stroke", "marker", "d", "points",
]


def _ns_priority(name: str) -> int:
    if name == "xmlns":
        return 3
    if name.startswith("xmlns:"):
        return 2
    if ":" in name:
        return 1
    return 0


def compare_attrs(a: str, b: str) -> int:
    priority = _ns_priority(b) - _ns_priority(a)
    if priority:
        return priority
    a_part, b_part = a.split("-", 1)[0], b.split("-", 1)[0]
    if a_part != b_part:
        a_index = ATTRIBUTE_ORDER.index(a_part) if a_part in ATTRIBUTE_ORDER else -1
        b_index = ATTRIBUTE_ORDER.index(b_part) if b_part in ATTRIBUTE_ORDER else -1
        if a_index != -1 and b_index != -1:
            return a_index - b_index
        if a_index != -1:
            return -1
        if b_index != -1:
            return 1
    return -1 if a < b else (1 if a > b else 0)


@transform(
    id="T6.03",
    layer=Layer.COSMETIC,
    dependencies=["T6.01", "T6.02"],
    description="Sort attributes into a stable order",
)
def sort_attrs(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        ordered = sorted(el.attributes, key=cmp_to_key(compare_attrs))
        el.attributes = {name: el.attributes[name] for name in ordered}
