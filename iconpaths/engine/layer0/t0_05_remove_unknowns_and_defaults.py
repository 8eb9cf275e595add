"""T0.05 — Remove Unknowns and Defaults.

Drop unknown elements nested in known ones, attributes an element does not
accept, and attributes that restate the default value. Elements carrying an
id keep their defaults since something may reference them.
"""

from __future__ import annotations

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, transform
from iconpaths.svg.collections import (
    CONDITIONAL_ATTRS,
    CORE_ATTRS,
    ELEM_ATTRS,
    ELEM_DEFAULTS,
    INHERITABLE_ATTRS,
    KNOWN_ELEMS,
    PRESENTATION_ATTRS,
    PRESENTATION_DEFAULTS,
    TRANSFORM_ATTRS,
)
from iconpaths.svg.style import inherited_style
from iconpaths.svg.tree import Element, detach, walk_with_ancestors

_COMMON_ATTRS = CORE_ATTRS | CONDITIONAL_ATTRS | PRESENTATION_ATTRS | {"transform"}


def _allowed_attrs(name: str) -> set[str] | None:
    if name not in ELEM_ATTRS:
        return None
    return _COMMON_ATTRS | ELEM_ATTRS[name]


def _foreign(name: str) -> bool:
    """Attributes this pass never judges: namespaces, data-/aria-, events, other-namespace."""
    if name.startswith(("xmlns", "data-", "aria-", "on")):
        return True
    return ":" in name and not name.startswith(("xlink:", "xml:"))


@transform(
    id="T0.05",
    layer=Layer.ATTRIBUTES,
    dependencies=["T0.03"],
    description="Remove unknown elements, unknown attributes and default values",
)
def remove_unknowns_and_defaults(ctx: OptimizeContext) -> None:
    config = ctx.config
    for el, ancestors in walk_with_ancestors(ctx.document):
        if el.prefix:
            continue
        parent: Element | None = ancestors[-1] if ancestors else None

        if el.name not in KNOWN_ELEMS:
            if parent is not None and parent.name in KNOWN_ELEMS:
                detach(parent, el)
            continue

        allowed = _allowed_attrs(el.name)
        inherited = inherited_style(ancestors)
        defaults = ELEM_DEFAULTS.get(el.name, {})
        has_id = "id" in el.attributes

        for name, value in list(el.attributes.items()):
            if name == "role":
                if not config.keep_role_attr:
                    del el.attributes[name]
                continue
            if _foreign(name):
                continue
            if allowed is not None and name not in allowed and name not in TRANSFORM_ATTRS:
                del el.attributes[name]
                continue
            if has_id:
                continue
            if defaults.get(name) == value:
                del el.attributes[name]
                continue
            if PRESENTATION_DEFAULTS.get(name) == value and name not in inherited:
                del el.attributes[name]
                continue
            if (
                config.useless_overrides
                and name in INHERITABLE_ATTRS
                and inherited.get(name) == value
            ):
                del el.attributes[name]
