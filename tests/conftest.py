"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconpaths.engine.config import OptimizerConfig
from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.pipeline import register_transforms
from iconpaths.svg.parser import parse_svg


# Sample exports

HOME_PATH_D = "M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M0 0h24v24H0z" fill="none"/>
  <path d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>
</svg>'''

HOME_EXPORT_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <g>
    <rect fill="none" width="24" height="24"/>
  </g>
  <g>
    <path fill="#010101" d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>
  </g>
</svg>'''

COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <rect fill="none" width="24" height="24"/>
  <path fill="#010101" d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>
  <path fill="#010101" d="M15 11h2v2h-2z"/>
</svg>'''

FILL_RULE_SVG = '''<svg width="24" height="24" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">
  <path d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z" fill-rule="evenodd"/>
</svg>'''

CLIP_PATH_SVG = '''<svg width="24" height="24" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">
  <clipPath id="clip0">
    <rect width="24" height="24" fill="white"/>
  </clipPath>
  <path clip-path="url(#clip0)" d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>
</svg>'''

HARDCODED_COLORS_SVG = '''<svg width="24" height="24" viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">
  <path d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z" fill="#010101"/>
  <rect fill="none" width="24" height="24"/>
  <rect id="SVGID_1_" width="24" height="24"/>
</svg>'''

OVERLAPPING_SQUARES_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M0 0h10v10H0z"/>'
    '<path d="M5 5h10v10H5z"/>'
    "</svg>"
)

EDITOR_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape (http://www.inkscape.org/) -->
<svg
   xmlns:dc="http://purl.org/dc/elements/1.1/"
   xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
   xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
   xmlns="http://www.w3.org/2000/svg"
   width="24"
   height="24"
   viewBox="0 0 24 24"
   version="1.1"
   inkscape:version="1.3">
  <title>star</title>
  <desc>Created with Sketch.</desc>
  <metadata><dc:title>star</dc:title></metadata>
  <sodipodi:namedview id="base" pagecolor="#ffffff"/>
  <g inkscape:label="Layer 1" inkscape:groupmode="layer">
    <path style="fill:#000000;stroke:none" d="M 12,2 L 15,9 L 22,9 L 16,14 L 18,21 L 12,17 L 6,21 L 8,14 L 2,9 L 9,9 Z"/>
  </g>
</svg>'''

SINGLE_MOVETO_SVG = '<svg><path fill="#010101" d="M0 0"/></svg>'

TWO_ROOTS_SVG = '<svg><path d="M0 0"/></svg><svg><path d="M1 1"/></svg>'


@pytest.fixture(scope="session", autouse=True)
def _transforms_registered() -> None:
    register_transforms()


def make_context(svg: str, **config) -> OptimizeContext:
    return OptimizeContext(document=parse_svg(svg), config=OptimizerConfig(**config))
