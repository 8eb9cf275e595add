"""T1.06 — Remove Desc.

Empty descriptions and editor boilerplate ("Created with Sketch.") carry no
meaning. Hand-written descriptions are kept.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import Text, detach, walk

_EDITOR_DESC_RE = re.compile(r"^(Created with|Created using)")


@transform(id="T1.06", layer=Layer.METADATA, description="Remove empty or generated <desc> elements")
def remove_desc(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name != "desc":
            continue
        text = "".join(c.value for c in el.children if isinstance(c, Text))
        if not el.children or _EDITOR_DESC_RE.match(text):
            detach(parent, el)
