"""T0.04 — Cleanup enable-background.

``enable-background`` only matters to filters. Without a <filter> it goes;
with one, a value that just restates the element's own size is dropped
from <svg> and shortened to "new" on <mask>/<pattern>.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import has_element, walk

_NUM = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"
_ENABLE_BACKGROUND_RE = re.compile(rf"^new\s0\s0\s({_NUM})\s({_NUM})$")


@transform(
    id="T0.04",
    layer=Layer.ATTRIBUTES,
    dependencies=["T0.03"],
    description="Remove or shorten enable-background",
)
def cleanup_enable_background(ctx: OptimizeContext) -> None:
    has_filter = has_element(ctx.document, "filter")
    for el, _ in walk(ctx.document):
        value = el.attributes.get("enable-background")
        if value is None:
            continue
        if not has_filter:
            del el.attributes["enable-background"]
            continue
        if el.name not in ("svg", "mask", "pattern"):
            continue
        m = _ENABLE_BACKGROUND_RE.match(value)
        if (
            m
            and m.group(1) == el.attributes.get("width")
            and m.group(2) == el.attributes.get("height")
        ):
            if el.name == "svg":
                del el.attributes["enable-background"]
            else:
                el.attributes["enable-background"] = "new"
