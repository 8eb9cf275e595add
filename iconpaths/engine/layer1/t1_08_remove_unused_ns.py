"""T1.08 — Remove Unused Namespaces."""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk


@transform(
    id="T1.08",
    layer=Layer.METADATA,
    dependencies=["T1.07"],
    description="Remove xmlns:* declarations no element or attribute uses",
)
def remove_unused_ns(ctx: OptimizeContext) -> None:
    used: set[str] = set()
    for el, _ in walk(ctx.document):
        if el.prefix:
            used.add(el.prefix)
        for name in el.attributes:
            if ":" in name and not name.startswith("xmlns:"):
                used.add(name.split(":", 1)[0])

    for el, _ in walk(ctx.document):
        for name in list(el.attributes):
            if name.startswith("xmlns:") and name[len("xmlns:"):] not in used:
                del el.attributes[name]
