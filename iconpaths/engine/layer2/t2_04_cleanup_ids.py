"""T2.04 — Cleanup IDs.

Remove ids nothing references, then rename the referenced ones to the
shortest free names (a, b, ... Z, aa, ab, ...) in document order and rewrite
every url(#...), href and begin reference to match.

Skipped while the document still holds <style> or <script>.
"""

from __future__ import annotations

import logging
import string

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.references import referenced_ids, rename_references
from iconpaths.svg.tree import walk

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.ascii_uppercase


def generate_id(index: int) -> str:
    """0 → "a", 51 → "Z", 52 → "aa"."""
    name = ""
    index += 1
    while index > 0:
        index -= 1
        name = _ID_ALPHABET[index % len(_ID_ALPHABET)] + name
        index //= len(_ID_ALPHABET)
    return name


@transform(
    id="T2.04",
    layer=Layer.VISIBILITY,
    dependencies=["T2.01"],
    description="Remove unreferenced ids and minify the rest",
)
def cleanup_ids(ctx: OptimizeContext) -> None:
    referenced = referenced_ids(ctx.document)
    kept: list[str] = []
    for el, _ in walk(ctx.document):
        el_id = el.attributes.get("id")
        if el_id is None:
            continue
        if el_id not in referenced:
            del el.attributes["id"]
        elif el_id not in kept:
            kept.append(el_id)

    if not ctx.config.minify_ids or not kept:
        return

    taken = referenced - set(kept)
    mapping: dict[str, str] = {}
    index = 0
    for old in kept:
        new = generate_id(index)
        while new in taken:
            index += 1
            new = generate_id(index)
        index += 1
        if new != old:
            mapping[old] = new

    if not mapping:
        return
    logger.debug("Renaming ids: %s", mapping)
    for el, _ in walk(ctx.document):
        el_id = el.attributes.get("id")
        if el_id in mapping:
            el.attributes["id"] = mapping[el_id]
    rename_references(ctx.document, mapping)
