"""T1.03 — Remove Comments.

Comments starting with "!" are legal notices and survive.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import Comment, detach, iter_nodes


@transform(id="T1.03", layer=Layer.METADATA, description="Remove comments")
def remove_comments(ctx: OptimizeContext) -> None:
    for node, parent in iter_nodes(ctx.document):
        if isinstance(node, Comment) and not node.value.startswith("!"):
            detach(parent, node)
