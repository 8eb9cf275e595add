"""T2.02 — Remove Empty Text.

Empty <text> and <tspan>, and <tref> without a link.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk_post_order


@transform(id="T2.02", layer=Layer.VISIBILITY, description="Remove empty text elements")
def remove_empty_text(ctx: OptimizeContext) -> None:
    for el, parent in walk_post_order(ctx.document):
        if el.name in ("text", "tspan") and not el.children:
            detach(parent, el)
        elif el.name == "tref" and "xlink:href" not in el.attributes:
            detach(parent, el)
