"""T1.09 — Remove Style Elements.

Icons are restyled by the component; embedded stylesheets would leak into
the host page.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk


@transform(id="T1.09", layer=Layer.METADATA, description="Remove <style> elements")
def remove_style_element(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name == "style":
            detach(parent, el)
