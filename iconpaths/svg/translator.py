"""Syntax translator — textual rewrites turning SVG markup into JSX children.

Each rewrite is a plain regex over the whole text, applied in order.
"""

from __future__ import annotations

import re

from iconpaths.svg.reroot import CHILD_PREFIX

# JSX spells these attributes in camelCase
ATTRIBUTE_RENAMES: tuple[tuple[str, str], ...] = (
    ("fill-opacity", "fillOpacity"),
    ("xlink:href", "xlinkHref"),
    ("clip-rule", "clipRule"),
    ("fill-rule", "fillRule"),
    ("stroke-width", "strokeWidth"),
)

_SELF_CLOSING_RE = re.compile(r"(?<! )/>")
_CLIP_PATH_ATTR_RE = re.compile(r' clip-path=".+?"')
_PREFIX = re.escape(CHILD_PREFIX)
_CLIP_PATH_BLOCK_RE = re.compile(
    rf"<(?:{_PREFIX})?clipPath\b[^>]*?/>|<(?:{_PREFIX})?clipPath\b.*?</(?:{_PREFIX})?clipPath>",
    re.DOTALL,
)
_KEYED_SELF_CLOSING_RE = re.compile(r'key="\d+" />')
_PREFIXED_CLOSE_RE = re.compile(rf"</{_PREFIX}([\w-]+)>")


def translate(svg_text: str, multiple_children: bool) -> str:
    """Rewrite re-rooted markup into JSX; a list literal when ``multiple_children``."""
    paths = _SELF_CLOSING_RE.sub(" />", svg_text)
    for kebab, camel in ATTRIBUTE_RENAMES:
        paths = paths.replace(f"{kebab}=", f"{camel}=")
    paths = _CLIP_PATH_ATTR_RE.sub("", paths)
    paths = _CLIP_PATH_BLOCK_RE.sub("", paths)

    if multiple_children:
        paths = _KEYED_SELF_CLOSING_RE.sub(r"\g<0>,", paths)
        paths = _PREFIXED_CLOSE_RE.sub(r"</\1>,", paths)
        paths = f"[{paths}]"

    return paths.replace(CHILD_PREFIX, "")
