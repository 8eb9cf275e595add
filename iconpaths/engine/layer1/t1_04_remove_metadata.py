"""T1.04 — Remove Metadata.

<metadata> blocks hold editor and licensing data that never renders.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk


@transform(id="T1.04", layer=Layer.METADATA, description="Remove <metadata> elements")
def remove_metadata(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name == "metadata":
            detach(parent, el)
