"""T1.10 — Remove Scripts.

<script> elements, on* event handler attributes, and ``javascript:`` links.
A scripted <a> is replaced by its children.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import detach, replace_with_children, walk

_EVENT_ATTR_RE = re.compile(r"^on[a-z]+$")
_JAVASCRIPT_RE = re.compile(r"^\s*javascript:", re.IGNORECASE)


@transform(id="T1.10", layer=Layer.METADATA, description="Remove scripts and event handlers")
def remove_scripts(ctx: OptimizeContext) -> None:
    for el, parent in walk(ctx.document):
        if el.name == "script":
            detach(parent, el)
            continue
        for name in list(el.attributes):
            if _EVENT_ATTR_RE.match(name):
                del el.attributes[name]
        if el.name == "a" and any(
            _JAVASCRIPT_RE.match(el.attributes.get(attr, "")) for attr in ("href", "xlink:href")
        ):
            replace_with_children(parent, el)
