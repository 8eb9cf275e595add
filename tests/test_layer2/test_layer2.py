"""Tests for Layer 2 transforms (invisible content)."""

import pytest

from tests.conftest import make_context

from iconpaths.engine.layer2.t2_01_remove_hidden_elems import remove_hidden_elems
from iconpaths.engine.layer2.t2_02_remove_empty_text import remove_empty_text
from iconpaths.engine.layer2.t2_03_remove_raster_images import remove_raster_images
from iconpaths.engine.layer2.t2_04_cleanup_ids import cleanup_ids, generate_id
from iconpaths.engine.layer2.t2_05_remove_useless_defs import remove_useless_defs
from iconpaths.engine.layer2.t2_06_remove_useless_stroke_and_fill import (
    remove_useless_stroke_and_fill,
)
from iconpaths.engine.layer2.t2_07_remove_empty_containers import remove_empty_containers
from iconpaths.engine.registry import Layer, get_registry
from iconpaths.svg.serializer import serialize
from iconpaths.svg.tree import find_all


def test_layer2_registers_7_transforms():
    assert len(get_registry().get_layer(Layer.VISIBILITY)) == 7


def test_remove_hidden_elems():
    ctx = make_context(
        '<svg><path d="M0 0h1v1z" display="none"/><rect width="0" height="5"/>'
        '<path d=""/><circle r="0"/><linearGradient id="g"/><path d="M0 0"/></svg>'
    )
    remove_hidden_elems(ctx)
    assert serialize(ctx.document) == '<svg><path d="M0 0"/></svg>'


def test_referenced_gradient_kept():
    ctx = make_context('<svg><linearGradient id="g"/><path fill="url(#g)" d="M0 0h1v1z"/></svg>')
    remove_hidden_elems(ctx)
    assert [el.name for el in ctx.root.elements] == ["linearGradient", "path"]


def test_zero_opacity_inside_clip_path_kept():
    ctx = make_context(
        '<svg><clipPath id="c"><path opacity="0" d="M0 0h1v1z"/></clipPath>'
        '<path clip-path="url(#c)" d="M0 0h2v2z"/></svg>'
    )
    remove_hidden_elems(ctx)
    assert len(find_all(ctx.document, "path")) == 2


def test_hidden_with_visible_descendant_kept():
    ctx = make_context('<svg><g visibility="hidden"><path visibility="visible" d="M0 0h1v1z"/></g></svg>')
    remove_hidden_elems(ctx)
    assert len(find_all(ctx.document, "path")) == 1


def test_remove_empty_text():
    ctx = make_context("<svg><text/><text><tspan/></text><text>Hi</text></svg>")
    remove_empty_text(ctx)
    assert serialize(ctx.document) == "<svg><text>Hi</text></svg>"


def test_remove_raster_images():
    ctx = make_context(
        '<svg><image href="a.png"/><image href="data:image/jpeg;base64,AAAA"/>'
        '<image href="a.svg"/></svg>'
    )
    remove_raster_images(ctx)
    assert [el.attributes["href"] for el in ctx.root.elements] == ["a.svg"]


@pytest.mark.parametrize(
    "index,expected",
    [(0, "a"), (25, "z"), (26, "A"), (51, "Z"), (52, "aa"), (53, "ab")],
)
def test_generate_id(index, expected):
    assert generate_id(index) == expected


def test_cleanup_ids():
    ctx = make_context(
        '<svg><linearGradient id="gradient1"/>'
        '<path id="unused" fill="url(#gradient1)" d="M0 0h1v1z"/></svg>'
    )
    cleanup_ids(ctx)
    gradient, path = ctx.root.elements
    assert gradient.attributes["id"] == "a"
    assert path.attributes == {"fill": "url(#a)", "d": "M0 0h1v1z"}


def test_cleanup_ids_without_minify():
    ctx = make_context(
        '<svg><linearGradient id="gradient1"/><path fill="url(#gradient1)" d="M0 0h1v1z"/></svg>',
        minify_ids=False,
    )
    cleanup_ids(ctx)
    assert ctx.root.elements[0].attributes["id"] == "gradient1"


def test_cleanup_ids_rewrites_href():
    ctx = make_context(
        '<svg xmlns:xlink="http://www.w3.org/1999/xlink"><path id="shape" d="M0 0h1v1z"/>'
        '<use xlink:href="#shape"/></svg>'
    )
    cleanup_ids(ctx)
    assert ctx.root.elements[1].attributes["xlink:href"] == "#a"


def test_remove_useless_defs():
    ctx = make_context(
        '<svg><defs><g><linearGradient id="a"/></g><rect width="1" height="1"/></defs></svg>'
    )
    remove_useless_defs(ctx)
    defs = ctx.root.elements[0]
    assert [el.name for el in defs.elements] == ["linearGradient"]


def test_empty_defs_removed():
    ctx = make_context('<svg><defs><rect width="1" height="1"/></defs><path d="M0 0"/></svg>')
    remove_useless_defs(ctx)
    assert [el.name for el in ctx.root.elements] == ["path"]


def test_useless_stroke_dropped():
    ctx = make_context('<svg><path d="M0 0h1v1z" stroke="none" stroke-width="2" fill="red"/></svg>')
    remove_useless_stroke_and_fill(ctx)
    assert ctx.root.elements[0].attributes == {"d": "M0 0h1v1z", "fill": "red"}


def test_unpainted_shape_removed():
    ctx = make_context('<svg><path d="M0 0h1v1z" fill="none"/></svg>')
    remove_useless_stroke_and_fill(ctx)
    assert ctx.root.elements == []


def test_inherited_stroke_overridden():
    ctx = make_context('<svg><g stroke="red"><path d="M0 0h1v1z" stroke-width="0"/></g></svg>')
    remove_useless_stroke_and_fill(ctx)
    assert find_all(ctx.document, "path")[0].attributes == {"d": "M0 0h1v1z", "stroke": "none"}


def test_shapes_with_id_left_alone():
    ctx = make_context('<svg><path id="p" d="M0 0h1v1z" fill="none"/></svg>')
    remove_useless_stroke_and_fill(ctx)
    assert len(ctx.root.elements) == 1


def test_remove_empty_containers():
    ctx = make_context(
        '<svg><g><g/></g><pattern id="p" width="1"/><switch><g/></switch><path d="M0 0"/></svg>'
    )
    remove_empty_containers(ctx)
    assert [el.name for el in ctx.root.elements] == ["pattern", "switch", "path"]
    assert len(find_all(ctx.document, "g")) == 1
