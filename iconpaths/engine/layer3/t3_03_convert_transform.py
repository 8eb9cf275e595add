"""T3.03 — Convert Transforms.

Collapse transform lists to the shortest equivalent; identities are removed.
Values svgpathtools cannot parse are left as written.
"""

from __future__ import annotations

import logging

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import TRANSFORM_ATTRS
from iconpaths.svg.transform_list import minify_transform
from iconpaths.svg.tree import walk

logger = logging.getLogger(__name__)


@transform(
    id="T3.03",
    layer=Layer.GEOMETRY,
    description="Minify transform attributes",
)
def convert_transform(ctx: OptimizeContext) -> None:
    config = ctx.config
    for el, _ in walk(ctx.document):
        for name in TRANSFORM_ATTRS:
            value = el.attributes.get(name)
            if value is None:
                continue
            try:
                minified = minify_transform(value, config.float_precision, config.transform_precision)
            except (ValueError, IndexError) as e:
                logger.debug("Keeping unparsable %s=%r: %s", name, value, e)
                continue
            if minified:
                el.attributes[name] = minified
            else:
                del el.attributes[name]
