"""T0.06 — Remove Non-Inheritable Group Attributes.

A presentation attribute on a <g> that neither inherits nor applies to
groups has no effect.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import (
    GROUP_ONLY_PRESENTATION_ATTRS,
    INHERITABLE_ATTRS,
    PRESENTATION_ATTRS,
)
from iconpaths.svg.tree import walk


@transform(
    id="T0.06",
    layer=Layer.ATTRIBUTES,
    dependencies=["T0.03"],
    description="Remove presentation attributes that do nothing on groups",
)
def remove_non_inheritable_group_attrs(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        if el.name != "g":
            continue
        for name in list(el.attributes):
            if (
                name in PRESENTATION_ATTRS
                and name not in INHERITABLE_ATTRS
                and name not in GROUP_ONLY_PRESENTATION_ATTRS
            ):
                del el.attributes[name]
