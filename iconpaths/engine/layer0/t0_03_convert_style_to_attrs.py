"""T0.03 — Convert Style to Attributes.

Move presentation properties out of ``style="..."`` into attributes.
``!important`` declarations and non-presentation properties stay in the style.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import PRESENTATION_ATTRS
from iconpaths.svg.style import format_style, parse_style
from iconpaths.svg.tree import walk


@transform(
    id="T0.03",
    layer=Layer.ATTRIBUTES,
    dependencies=["T0.01"],
    description="Convert inline style declarations to presentation attributes",
)
def convert_style_to_attrs(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        style = el.attributes.get("style")
        if style is None:
            continue
        kept = []
        for decl in parse_style(style):
            if decl.name in PRESENTATION_ATTRS and not decl.important:
                el.attributes[decl.name] = decl.value
            else:
                kept.append(decl)
        if kept:
            el.attributes["style"] = format_style(kept)
        else:
            del el.attributes["style"]
