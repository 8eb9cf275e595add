"""T1.05 — Remove Title.

Icons are decorative; the accessible name comes from the component.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk


@transform(id="T1.05", layer=Layer.METADATA, description="Remove <title> elements")
def remove_title(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name == "title":
            detach(parent, el)
