"""T1.02 — Remove XML Declaration.

Only the ``<?xml ...?>`` declaration goes; other processing instructions stay.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import Instruction


@transform(id="T1.02", layer=Layer.METADATA, description="Remove the XML declaration")
def remove_xml_proc_inst(ctx: OptimizeContext) -> None:
    doc = ctx.document
    doc.children = [
        c for c in doc.children if not (isinstance(c, Instruction) and c.name == "xml")
    ]
