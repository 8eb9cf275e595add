"""Document tree — the node types every stage parses into and serializes from.

Element names and attribute names keep their namespace prefix verbatim
(``xlink:href``, ``sodipodi:namedview``); namespace declarations are plain
``xmlns``/``xmlns:*`` attributes.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass
class Text:
    value: str


@dataclass
class Comment:
    value: str


@dataclass
class Instruction:
    """Processing instruction; the XML declaration is ``Instruction("xml", ...)``."""

    name: str
    value: str = ""


@dataclass
class Doctype:
    value: str


@dataclass
class Element:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    @property
    def elements(self) -> list["Element"]:
        return [c for c in self.children if isinstance(c, Element)]

    @property
    def prefix(self) -> str | None:
        return self.name.split(":", 1)[0] if ":" in self.name else None


Node = Union[Element, Text, Comment, Instruction, Doctype]


@dataclass
class Document:
    """Top-level node list. May hold zero or more nodes until re-rooting validates it."""

    children: list[Node] = field(default_factory=list)

    @property
    def elements(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]

    @property
    def root(self) -> Element | None:
        """First top-level ``svg`` element, if any."""
        for el in self.elements:
            if el.name == "svg":
                return el
        return None

    def copy(self) -> "Document":
        return copy.deepcopy(self)


Parent = Union[Document, Element]


def _attached(parent: Parent, node: Node) -> bool:
    return any(c is node for c in parent.children)


def walk(parent: Parent) -> Iterator[tuple[Element, Parent]]:
    """Depth-first pre-order walk yielding ``(element, parent)`` pairs.

    Children are snapshotted before iterating, so the caller may detach or
    replace the yielded element; a detached element's subtree is skipped.
    """
    for child in list(parent.children):
        if not isinstance(child, Element):
            continue
        if not _attached(parent, child):
            continue
        yield child, parent
        if _attached(parent, child):
            yield from walk(child)


def walk_with_ancestors(
    parent: Parent, ancestors: tuple[Element, ...] = ()
) -> Iterator[tuple[Element, tuple[Element, ...]]]:
    """Like :func:`walk` but yields the chain of ancestor elements (outermost first)."""
    for child in list(parent.children):
        if not isinstance(child, Element) or not _attached(parent, child):
            continue
        yield child, ancestors
        if _attached(parent, child):
            yield from walk_with_ancestors(child, ancestors + (child,))


def walk_post_order(parent: Parent) -> Iterator[tuple[Element, Parent]]:
    """Depth-first post-order walk (children before their parent)."""
    for child in list(parent.children):
        if not isinstance(child, Element) or not _attached(parent, child):
            continue
        yield from walk_post_order(child)
        if _attached(parent, child):
            yield child, parent


def iter_nodes(parent: Parent) -> Iterator[tuple[Node, Parent]]:
    """Every node (elements, text, comments...) with its parent."""
    for child in list(parent.children):
        yield child, parent
        if isinstance(child, Element):
            yield from iter_nodes(child)


def detach(parent: Parent, node: Node) -> None:
    parent.children = [c for c in parent.children if c is not node]


def replace_with_children(parent: Parent, node: Element) -> None:
    """Splice ``node``'s children into ``parent`` at ``node``'s position."""
    out: list[Node] = []
    for c in parent.children:
        if c is node:
            out.extend(node.children)
        else:
            out.append(c)
    parent.children = out


def find_all(parent: Parent, name: str) -> list[Element]:
    return [el for el, _ in walk(parent) if el.name == name]


def has_element(parent: Parent, *names: str) -> bool:
    return any(el.name in names for el, _ in walk(parent))
