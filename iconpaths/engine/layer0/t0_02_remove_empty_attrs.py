"""T0.02 — Remove Empty Attributes.

An attribute with an empty value means nothing, except the conditional
processing ones where "" makes the element never render.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import CONDITIONAL_ATTRS
from iconpaths.svg.tree import walk


@transform(
    id="T0.02",
    layer=Layer.ATTRIBUTES,
    dependencies=["T0.01"],
    description="Remove attributes with empty values",
)
def remove_empty_attrs(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        for name, value in list(el.attributes.items()):
            if value == "" and name not in CONDITIONAL_ATTRS:
                del el.attributes[name]
