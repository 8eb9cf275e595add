"""T2.03 — Remove Raster Images.

Embedded or linked JPEG, PNG and GIF images cannot become path data.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk

_RASTER_RE = re.compile(r"(\.|image/)(jpe?g|png|gif)", re.IGNORECASE)


@transform(id="T2.03", layer=Layer.VISIBILITY, description="Remove raster <image> elements")
def remove_raster_images(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name != "image":
            continue
        href = el.attributes.get("xlink:href") or el.attributes.get("href") or ""
        if _RASTER_RE.search(href):
            detach(parent, el)
