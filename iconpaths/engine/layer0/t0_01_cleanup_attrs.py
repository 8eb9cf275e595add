"""T0.01 — Cleanup Attributes.

Collapse newlines and runs of whitespace inside attribute values.
A newline between two non-space characters becomes a single space.
"""

from __future__ import annotations

import re

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.tree import walk

_NEWLINE_BETWEEN_RE = re.compile(r"(\S)\r?\n(\S)")
_NEWLINE_RE = re.compile(r"\r?\n")
_SPACES_RE = re.compile(r"\s{2,}")


def cleanup_value(value: str) -> str:
    value = _NEWLINE_BETWEEN_RE.sub(r"\1 \2", value)
    value = _NEWLINE_RE.sub("", value)
    value = _SPACES_RE.sub(" ", value)
    return value.strip()


@transform(
    id="T0.01",
    layer=Layer.ATTRIBUTES,
    description="Collapse whitespace in attribute values",
)
def cleanup_attrs(ctx: OptimizeContext) -> None:
    for el, _ in walk(ctx.document):
        for name, value in list(el.attributes.items()):
            el.attributes[name] = cleanup_value(value)
