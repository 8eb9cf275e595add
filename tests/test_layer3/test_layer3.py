"""Tests for Layer 3 transforms (geometry)."""

import pytest

from tests.conftest import OVERLAPPING_SQUARES_SVG, make_context

from iconpaths.engine.layer3.t3_01_convert_shape_to_path import convert_shape_to_path
from iconpaths.engine.layer3.t3_02_convert_path_data import convert_path_data
from iconpaths.engine.layer3.t3_03_convert_transform import convert_transform
from iconpaths.engine.layer3.t3_04_merge_paths import merge_paths
from iconpaths.engine.layer3.t3_05_cleanup_numeric_values import (
    cleanup_number,
    cleanup_numeric_values,
)
from iconpaths.engine.layer3.t3_06_cleanup_list_of_values import cleanup_list_of_values
from iconpaths.engine.registry import Layer, get_registry
from iconpaths.svg.tree import find_all


def _paths(ctx):
    return find_all(ctx.document, "path")


def test_layer3_registers_6_transforms():
    reg = get_registry()
    assert len(reg.get_layer(Layer.GEOMETRY)) == 6
    order = [s.id for s in reg.resolve_order({s.id for s in reg.get_layer(Layer.GEOMETRY)})]
    assert order.index("T3.03") < order.index("T3.02") < order.index("T3.04")


def test_rect_to_path():
    ctx = make_context('<svg><rect x="2" y="3" width="10" height="5" fill="red"/></svg>')
    convert_shape_to_path(ctx)
    assert _paths(ctx)[0].attributes == {"fill": "red", "d": "M2 3H12V8H2z"}


def test_rounded_rect_kept():
    ctx = make_context('<svg><rect width="10" height="5" rx="1"/></svg>')
    convert_shape_to_path(ctx)
    assert ctx.root.elements[0].name == "rect"


def test_circle_to_arcs():
    ctx = make_context('<svg><circle cx="12" cy="12" r="10"/></svg>')
    convert_shape_to_path(ctx)
    assert _paths(ctx)[0].attributes["d"] == "M2 12A10 10 0 1 0 22 12A10 10 0 1 0 2 12z"


def test_circle_kept_without_arc_conversion():
    ctx = make_context('<svg><circle cx="12" cy="12" r="10"/></svg>', convert_arcs=False)
    convert_shape_to_path(ctx)
    assert ctx.root.elements[0].name == "circle"


def test_polygon_and_short_polyline():
    ctx = make_context('<svg><polygon points="0,0 10,0 10,10"/><polyline points="1 1"/></svg>')
    convert_shape_to_path(ctx)
    assert [el.name for el in ctx.root.elements] == ["path"]
    assert _paths(ctx)[0].attributes["d"] == "M0 0L10 0L10 10z"


def test_convert_path_data():
    ctx = make_context('<svg><path d="M 0,0 L 10,0 L 10,10 L 0,10 Z"/></svg>')
    convert_path_data(ctx)
    assert _paths(ctx)[0].attributes["d"] == "M0 0h10v10H0z"


def test_transform_baked_into_path():
    ctx = make_context('<svg><path transform="translate(5 5)" d="M0 0h10v10H0z"/></svg>')
    convert_path_data(ctx)
    assert _paths(ctx)[0].attributes == {"d": "M5 5h10v10H5z"}


def test_transform_kept_on_stroked_path():
    ctx = make_context('<svg><path stroke="red" transform="translate(5 5)" d="M0 0h10v10H0z"/></svg>')
    convert_path_data(ctx)
    assert _paths(ctx)[0].attributes["transform"] == "translate(5 5)"


def test_transform_kept_when_disabled():
    ctx = make_context(
        '<svg><path transform="translate(5 5)" d="M0 0h10v10H0z"/></svg>', apply_transforms=False
    )
    convert_path_data(ctx)
    assert "transform" in _paths(ctx)[0].attributes


def test_convert_transform():
    ctx = make_context(
        '<svg><g transform="translate(0 0)"><path d="M0 0"/></g>'
        '<g transform="matrix(1 0 0 1 5 6)"><path d="M0 0"/></g></svg>'
    )
    convert_transform(ctx)
    first, second = ctx.root.elements
    assert "transform" not in first.attributes
    assert second.attributes["transform"] == "translate(5 6)"


def test_merge_disjoint_paths():
    ctx = make_context('<svg><path fill="red" d="M0 0h2v2H0z"/><path fill="red" d="M5 5h2v2H5z"/></svg>')
    merge_paths(ctx)
    paths = _paths(ctx)
    assert len(paths) == 1
    assert paths[0].attributes["d"].startswith("M0 0h2v2H0z")
    assert paths[0].attributes["d"].count("z") == 2


def test_overlapping_paths_not_merged():
    ctx = make_context(OVERLAPPING_SQUARES_SVG)
    merge_paths(ctx)
    assert len(_paths(ctx)) == 2


def test_different_attrs_not_merged():
    ctx = make_context('<svg><path fill="red" d="M0 0h2v2H0z"/><path fill="blue" d="M5 5h2v2H5z"/></svg>')
    merge_paths(ctx)
    assert len(_paths(ctx)) == 2


def test_clipped_paths_not_merged():
    ctx = make_context(
        '<svg><path clip-path="url(#c)" d="M0 0h2v2H0z"/><path clip-path="url(#c)" d="M5 5h2v2H5z"/></svg>'
    )
    merge_paths(ctx)
    assert len(_paths(ctx)) == 2


@pytest.mark.parametrize(
    "value,expected",
    [
        ("10px", "10"),
        ("12pt", "16"),
        ("1cm", "1cm"),
        ("0.50000", ".5"),
        ("50%", "50%"),
        ("1.23456789", "1.2346"),
        ("auto", "auto"),
    ],
)
def test_cleanup_number(value, expected):
    assert cleanup_number(value, 4) == expected


def test_cleanup_numeric_values():
    ctx = make_context('<svg version="1.10" viewBox="0.0 0 24.000 24" width="24px"><path d="M0 0"/></svg>')
    cleanup_numeric_values(ctx)
    assert ctx.root.attributes == {"version": "1.10", "viewBox": "0 0 24 24", "width": "24"}


def test_cleanup_list_of_values():
    ctx = make_context('<svg><path stroke-dasharray="1.50000, 2" d="M0 0"/></svg>')
    cleanup_list_of_values(ctx)
    assert _paths(ctx)[0].attributes["stroke-dasharray"] == "1.5 2"
