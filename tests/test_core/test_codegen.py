"""Tests for icon module generation."""

import pytest

from iconpaths.codegen import (
    decode_svg_bytes,
    ensure_svg_text,
    escape_for_display,
    render_display_html,
    render_icon_module,
)
from iconpaths.errors import DecodeError


def test_decode_utf8():
    assert decode_svg_bytes("<svg>é</svg>".encode("utf-8"), "Home") == "<svg>é</svg>"


def test_decode_invalid_bytes():
    with pytest.raises(DecodeError, match="SVG decoding failed"):
        decode_svg_bytes(b"\xff\xfe<svg/>", "Home")


def test_decode_empty():
    with pytest.raises(DecodeError, match='Failed to decode SVG for "Home" - result is empty'):
        decode_svg_bytes(b"  \n", "Home")


def test_decode_strips_byte_order_mark():
    text = decode_svg_bytes(b'\xef\xbb\xbf<?xml version="1.0" encoding="UTF-8"?><svg/>', "Home")
    assert text == '<?xml version="1.0" encoding="UTF-8"?><svg/>'


def test_decode_only_byte_order_mark_is_empty():
    with pytest.raises(DecodeError, match="result is empty"):
        decode_svg_bytes(b"\xef\xbb\xbf \n", "Home")


def test_ensure_svg_text():
    assert ensure_svg_text("<svg/>", "Home") == "<svg/>"
    with pytest.raises(DecodeError, match='Failed to decode SVG for "Home" - result is empty'):
        ensure_svg_text("\t ", "Home")


def test_render_icon_module():
    source = render_icon_module('<path d="M0 0" />', "Home")
    assert source == (
        "import { createSvgIcon } from '@mui/material';\n"
        "\n"
        "export default createSvgIcon(\n"
        '  <path d="M0 0" />,\n'
        "  'Home'\n"
        ");"
    )


def test_escape_for_display():
    assert escape_for_display("<a href=\"x\">'&") == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;"


def test_render_display_html():
    html = render_display_html(render_icon_module("<path />", "Home"))
    assert html.startswith("<div><pre>import { createSvgIcon }")
    assert "&lt;path /&gt;" in html
    assert html.endswith("</pre></div>")
