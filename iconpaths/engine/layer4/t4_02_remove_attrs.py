"""T4.02 — Remove Attributes by Pattern.

Patterns read ``element:attribute[:value]``; each part is a regular
expression matched against the whole name or value, and "*" means any.
A bare pattern without ":" matches attribute names on every element.
The default pattern drops every *opacity attribute.
"""

from __future__ import annotations

import re
from functools import lru_cache

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk

_SEPARATOR = ":"


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> tuple[re.Pattern[str], re.Pattern[str], re.Pattern[str]]:
    parts = pattern.split(_SEPARATOR)
    if len(parts) == 1:
        parts = [".*", parts[0], ".*"]
    elif len(parts) == 2:
        parts = parts + [".*"]
    elem, attr, value = (".*" if p == "*" else p for p in parts[:3])
    return re.compile(elem), re.compile(attr), re.compile(value)


@transform(
    id="T4.02",
    layer=Layer.COLOR,
    dependencies=["T4.01"],
    description="Remove attributes matching configured patterns",
)
def remove_attrs(ctx: OptimizeContext) -> None:
    patterns = [compile_pattern(p) for p in ctx.config.remove_attrs]
    if not patterns:
        return
    for el, _ in walk(ctx.document):
        for name, value in list(el.attributes.items()):
            for elem_re, attr_re, value_re in patterns:
                if (
                    elem_re.fullmatch(el.name)
                    and attr_re.fullmatch(name)
                    and value_re.fullmatch(value)
                ):
                    del el.attributes[name]
                    break
