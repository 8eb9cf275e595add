"""T1.01 — Remove Doctype."""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import Doctype


@transform(id="T1.01", layer=Layer.METADATA, description="Remove the DOCTYPE declaration")
def remove_doctype(ctx: OptimizeContext) -> None:
    doc = ctx.document
    doc.children = [c for c in doc.children if not isinstance(c, Doctype)]
