"""Inline style parsing and computed presentation style."""

from __future__ import annotations

import re
from dataclasses import dataclass

from iconpaths.svg.collections import INHERITABLE_ATTRS, PRESENTATION_ATTRS
from iconpaths.svg.tree import Element

_CSS_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_URL_REF_RE = re.compile(r"\burl\(\s*['\"]?#(.+?)['\"]?\s*\)")


@dataclass
class Declaration:
    name: str
    value: str
    important: bool = False


def parse_style(style: str) -> list[Declaration]:
    """Split a ``style`` attribute into declarations; ``;`` inside parens or quotes is kept."""
    text = _CSS_COMMENT_RE.sub("", style)
    chunks: list[str] = []
    depth, quote, buf = 0, "", []
    for ch in text:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            chunks.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    chunks.append("".join(buf))

    declarations: list[Declaration] = []
    for chunk in chunks:
        if ":" not in chunk:
            continue
        name, value = chunk.split(":", 1)
        name, value = name.strip().lower(), value.strip()
        if not name or not value:
            continue
        important = bool(_IMPORTANT_RE.search(value))
        if important:
            value = _IMPORTANT_RE.sub("", value)
        declarations.append(Declaration(name, value, important))
    return declarations


def format_style(declarations: list[Declaration]) -> str:
    return ";".join(
        f"{d.name}:{d.value}{'!important' if d.important else ''}" for d in declarations
    )


def _own_style(el: Element) -> dict[str, str]:
    style: dict[str, str] = {
        name: value for name, value in el.attributes.items() if name in PRESENTATION_ATTRS
    }
    if "style" in el.attributes:
        for decl in parse_style(el.attributes["style"]):
            if decl.name in PRESENTATION_ATTRS:
                style[decl.name] = decl.value
    return style


def computed_style(el: Element, ancestors: tuple[Element, ...] | list[Element]) -> dict[str, str]:
    """Presentation properties in effect on ``el``: inherited from ancestors, then its own."""
    style = inherited_style(ancestors)
    style.update(_own_style(el))
    return style


def inherited_style(ancestors: tuple[Element, ...] | list[Element]) -> dict[str, str]:
    """Inheritable properties an element would receive from ``ancestors``."""
    style: dict[str, str] = {}
    for ancestor in ancestors:
        for name, value in _own_style(ancestor).items():
            if name in INHERITABLE_ATTRS:
                style[name] = value
    return style


def url_references(value: str) -> list[str]:
    """Ids referenced through ``url(#id)`` in a value."""
    return _URL_REF_RE.findall(value)


def has_url_reference(value: str) -> bool:
    return _URL_REF_RE.search(value) is not None
