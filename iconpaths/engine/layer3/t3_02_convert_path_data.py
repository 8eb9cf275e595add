"""T3.02 — Convert Path Data.

Rewrite every ``d`` in its shortest form: rounded coordinates, straight
curves as lines, redundant segments dropped, and per segment whichever of
absolute, relative or shorthand commands is shortest.

With ``apply_transforms`` on, a path's own transform is baked into its
coordinates when nothing else depends on the coordinate system: no stroke,
no id, no clip path, mask, filter or markers.
"""

from __future__ import annotations

import logging

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import PATH_ELEMS
from iconpaths.svg.path_data import (
    format_path_data,
    parse_path_data,
    round_segments,
    simplify_segments,
    transform_segments,
)
from iconpaths.svg.style import computed_style
from iconpaths.svg.transform_list import to_matrix
from iconpaths.svg.tree import Element, walk_with_ancestors

logger = logging.getLogger(__name__)

_COORDINATE_DEPENDENT = ("id", "clip-path", "mask", "filter", "marker-start", "marker-mid", "marker-end")


def _bakeable(el: Element, ancestors: tuple[Element, ...]) -> bool:
    if "transform" not in el.attributes:
        return False
    if any(name in el.attributes for name in _COORDINATE_DEPENDENT):
        return False
    return computed_style(el, ancestors).get("stroke", "none") == "none"


def _bake(el: Element, segments):
    try:
        m = to_matrix(el.attributes["transform"])
    except (ValueError, IndexError) as e:
        logger.debug("Keeping transform %r: %s", el.attributes["transform"], e)
        return segments
    matrix = (m[0][0], m[1][0], m[0][1], m[1][1], m[0][2], m[1][2])
    baked = transform_segments(segments, tuple(float(v) for v in matrix))
    if baked is None:
        return segments
    del el.attributes["transform"]
    return baked


@transform(
    id="T3.02",
    layer=Layer.GEOMETRY,
    dependencies=["T3.01", "T3.03"],
    description="Minify path data",
)
def convert_path_data(ctx: OptimizeContext) -> None:
    precision = ctx.config.float_precision
    for el, ancestors in walk_with_ancestors(ctx.document):
        if el.name not in PATH_ELEMS:
            continue
        d = el.attributes.get("d")
        if not d or not d.strip():
            continue
        segments = parse_path_data(d)
        if ctx.config.apply_transforms and _bakeable(el, ancestors):
            segments = _bake(el, segments)
        segments = simplify_segments(round_segments(segments, precision), precision)
        el.attributes["d"] = format_path_data(segments, precision)
