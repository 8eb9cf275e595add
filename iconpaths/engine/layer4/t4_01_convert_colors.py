"""T4.01 — Convert Colors.

Paint attributes adopt ``currentColor`` so the icon follows the surrounding
text color; whatever is left gets its shortest spelling.

Colors inside a ``<mask>`` are luminance values, not paint, and are only
shortened.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import COLOR_ATTRS
from iconpaths.svg.colors import convert_color, shorten_color
from iconpaths.svg.tree import walk_with_ancestors


@transform(
    id="T4.01",
    layer=Layer.COLOR,
    description="Adopt currentColor and shorten color values",
)
def convert_colors(ctx: OptimizeContext) -> None:
    rule = ctx.config.current_color
    for el, ancestors in walk_with_ancestors(ctx.document):
        in_mask = el.name == "mask" or any(a.name == "mask" for a in ancestors)
        for name in COLOR_ATTRS:
            value = el.attributes.get(name)
            if value is None:
                continue
            el.attributes[name] = shorten_color(value) if in_mask else convert_color(value, rule)
