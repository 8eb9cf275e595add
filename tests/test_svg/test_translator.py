"""Tests for the JSX syntax translator."""

from iconpaths.svg.translator import translate


def test_self_closing_space():
    assert translate('<path d="M0 0"/>', False) == '<path d="M0 0" />'


def test_attribute_renames():
    out = translate(
        '<path fill-rule="evenodd" clip-rule="evenodd" stroke-width="2" fill-opacity=".5" d="M0 0"/>',
        False,
    )
    assert out == '<path fillRule="evenodd" clipRule="evenodd" strokeWidth="2" fillOpacity=".5" d="M0 0" />'


def test_xlink_href():
    assert translate('<use xlink:href="#a"/>', False) == '<use xlinkHref="#a" />'


def test_clip_path_reference_removed():
    out = translate('<g clip-path="url(#a)"><path d="M0 0"/></g>', False)
    assert out == '<g><path d="M0 0" /></g>'


def test_clip_path_block_removed():
    out = translate('<clipPath id="a"><path d="M0 0"/></clipPath><path d="M1 1"/>', False)
    assert out == '<path d="M1 1" />'


def test_self_closing_clip_path_removed():
    assert translate('<clipPath id="a"/><path d="M1 1"/>', False) == '<path d="M1 1" />'


def test_list_output():
    out = translate(
        '<SVGChild:path d="M0 0" key="0"/><SVGChild:g key="1"><path d="M1 1"/></SVGChild:g>',
        True,
    )
    assert out == '[<path d="M0 0" key="0" />,<g key="1"><path d="M1 1" /></g>,]'


def test_list_output_drops_prefixed_clip_path():
    out = translate(
        '<SVGChild:clipPath id="a" key="0"><path d="M0 0"/></SVGChild:clipPath>'
        '<SVGChild:path d="M1 1" clip-path="url(#a)" key="1"/>',
        True,
    )
    assert out == '[<path d="M1 1" key="1" />,]'
