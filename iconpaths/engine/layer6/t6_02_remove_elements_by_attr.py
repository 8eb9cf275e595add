"""T6.02 — Remove Elements by Attribute.

Drop elements whose id is in ``remove_ids`` or whose class list contains
one of ``remove_classes``. Both lists are empty by default.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, walk


@transform(id="T6.02", layer=Layer.COSMETIC, description="Remove elements by id or class")
def remove_elements_by_attr(ctx: OptimizeContext) -> None:
    ids = set(ctx.config.remove_ids)
    classes = set(ctx.config.remove_classes)
    if not ids and not classes:
        return
    for el, parent in walk(ctx.document):
        if el.attributes.get("id") in ids or classes & set(el.attributes.get("class", "").split()):
            detach(parent, el)
