"""Write minimal SVG markup from a Document."""

from __future__ import annotations

from iconpaths.svg.tree import Comment, Doctype, Document, Element, Instruction, Node, Text

_ATTR_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})


def serialize(node: Document | Node) -> str:
    """Generate compact markup: no indentation, short tags for empty elements."""
    if isinstance(node, Document):
        return "".join(serialize(child) for child in node.children)
    if isinstance(node, Element):
        return _serialize_element(node)
    if isinstance(node, Text):
        return node.value.translate(_TEXT_ESCAPES)
    if isinstance(node, Comment):
        return f"<!--{node.value}-->"
    if isinstance(node, Instruction):
        return f"<?{node.name} {node.value}?>" if node.value else f"<?{node.name}?>"
    if isinstance(node, Doctype):
        return f"<!DOCTYPE {node.value}>"
    raise TypeError(f"Cannot serialize {type(node).__name__}")


def _serialize_element(el: Element) -> str:
    attr_str = "".join(f' {k}="{v.translate(_ATTR_ESCAPES)}"' for k, v in el.attributes.items())
    if not el.children:
        return f"<{el.name}{attr_str}/>"
    inner = "".join(serialize(child) for child in el.children)
    return f"<{el.name}{attr_str}>{inner}</{el.name}>"
