"""Tests for color canonicalization."""

import pytest

from iconpaths.svg.colors import CURRENT_COLOR, adopts_current_color, convert_color, shorten_color


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#FF0000", "red"),
        ("black", "#000"),
        ("#000000", "#000"),
        ("rgb(255, 255, 255)", "#fff"),
        ("rgb(100%, 0%, 0%)", "red"),
        ("#000080", "navy"),
        ("#123456", "#123456"),
        ("none", "none"),
        ("url(#a)", "url(#a)"),
    ],
)
def test_shorten_color(value, expected):
    assert shorten_color(value) == expected


def test_current_color_adopts_paint():
    assert convert_color("#010101", True) == CURRENT_COLOR
    assert convert_color("white", True) == CURRENT_COLOR


def test_current_color_keeps_none_and_references():
    assert convert_color("none", True) == "none"
    assert convert_color("url(#grad)", True) == "url(#grad)"


def test_current_color_regex_rule():
    assert adopts_current_color("#000", r"#0+")
    assert not adopts_current_color("#fff", r"#0+")


def test_current_color_off():
    assert convert_color("#FFFFFF", False) == "#fff"
