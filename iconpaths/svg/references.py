"""Id references: ``url(#id)`` values, ``href="#id"`` links and ``begin="id.event"`` timings."""

from __future__ import annotations

import re
from collections.abc import Iterator

from iconpaths.svg.tree import Element, Parent, walk

_URL_RE = re.compile(r"\burl\(\s*(['\"]?)#(.+?)\1\s*\)")
_BEGIN_RE = re.compile(r"(^|;)(\s*)([^\s;.]+)\.")
_HREF_ATTRS = ("href", "xlink:href")


def _ids_in(name: str, value: str) -> list[str]:
    ids = [m.group(2) for m in _URL_RE.finditer(value)]
    if name in _HREF_ATTRS and value.startswith("#"):
        ids.append(value[1:])
    elif name == "begin":
        ids.extend(m.group(3) for m in _BEGIN_RE.finditer(value))
    return ids


def iter_references(parent: Parent) -> Iterator[tuple[Element, str, str]]:
    """Yield ``(element, attribute, id)`` for every id reference under ``parent``."""
    for el, _ in walk(parent):
        for name, value in el.attributes.items():
            for ref in _ids_in(name, value):
                yield el, name, ref


def referenced_ids(parent: Parent) -> set[str]:
    return {ref for _, _, ref in iter_references(parent)}


def rename_references(parent: Parent, mapping: dict[str, str]) -> None:
    """Point every reference to an id in ``mapping`` at its new name."""
    if not mapping:
        return

    def _url(m: re.Match[str]) -> str:
        ref = mapping.get(m.group(2), m.group(2))
        return f"url({m.group(1)}#{ref}{m.group(1)})"

    def _begin(m: re.Match[str]) -> str:
        return f"{m.group(1)}{m.group(2)}{mapping.get(m.group(3), m.group(3))}."

    for el, _ in walk(parent):
        for name, value in list(el.attributes.items()):
            new = _URL_RE.sub(_url, value)
            if name in _HREF_ATTRS and new.startswith("#") and new[1:] in mapping:
                new = "#" + mapping[new[1:]]
            elif name == "begin":
                new = _BEGIN_RE.sub(_begin, new)
            if new != value:
                el.attributes[name] = new
