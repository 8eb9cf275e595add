"""Tests for the literal scrubber."""

from tests.conftest import HARDCODED_COLORS_SVG

from iconpaths.svg.scrubber import SCRUBBED_LITERALS, scrub_literals


def test_scrubs_all_literals():
    out = scrub_literals(HARDCODED_COLORS_SVG)
    for literal in SCRUBBED_LITERALS:
        assert literal not in out
    assert 'd="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"' in out


def test_every_occurrence():
    out = scrub_literals('<path fill="#010101"/><path fill="#010101"/>')
    assert out == "<path/><path/>"


def test_custom_literals():
    assert scrub_literals('<g class="x"/>', (' class="x"',)) == "<g/>"


def test_untouched_without_matches():
    svg = '<svg><path fill="#010102" d="M0 0"/></svg>'
    assert scrub_literals(svg) == svg
