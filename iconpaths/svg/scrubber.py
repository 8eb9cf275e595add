"""Literal scrubber — drops known export artifacts from raw SVG text before parsing.

Runs textually so that the optimizer sees the containers these literals leave
empty and can eliminate them.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SCRUBBED_LITERALS: tuple[str, ...] = (
    # Hardcoded export fill; icons inherit the caller's color instead
    ' fill="#010101"',
    # Transparent full-canvas bounding box
    '<rect fill="none" width="24" height="24"/>',
    # Full-canvas placeholder carrying a fixed identifier
    '<rect id="SVGID_1_" width="24" height="24"/>',
)


def scrub_literals(svg_text: str, literals: tuple[str, ...] = SCRUBBED_LITERALS) -> str:
    """Remove every occurrence of each literal from ``svg_text``."""
    for literal in literals:
        count = svg_text.count(literal)
        if count:
            svg_text = svg_text.replace(literal, "")
            logger.debug("Scrubbed %d occurrence(s) of %r", count, literal)
    return svg_text
