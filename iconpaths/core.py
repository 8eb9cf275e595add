"""Top-level conversion: raw SVG markup → JSX children for an icon component.

scrub → optimize → re-root → translate. Each call builds its own document
and context; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from iconpaths.engine.config import OptimizerConfig
from iconpaths.engine.pipeline import run_optimizer
from iconpaths.svg.reroot import reroot
from iconpaths.svg.scrubber import scrub_literals
from iconpaths.svg.serializer import serialize
from iconpaths.svg.translator import translate

logger = logging.getLogger(__name__)


@dataclass
class IconPathsResult:
    """Converted paths plus what the pipeline did to get there."""

    paths: str
    multiple_children: bool
    passes: int


def convert_svg(svg_text: str, config: OptimizerConfig | None = None) -> IconPathsResult:
    """Convert ``svg_text``, keeping the multi-child flag and optimizer pass count.

    Raises:
        ParseError: the input, or the optimizer's output, is malformed.
        RootShapeError: the optimized document is not a single ``svg`` element.
    """
    scrubbed = scrub_literals(svg_text)
    ctx = run_optimizer(scrubbed, config)
    optimized = serialize(ctx.document)
    logger.debug("Optimized in %d passes: %s", ctx.passes, optimized)

    rerooted = reroot(optimized)
    paths = translate(rerooted.text, rerooted.multiple_children)
    logger.debug("Translated paths: %s", paths)
    return IconPathsResult(
        paths=paths,
        multiple_children=rerooted.multiple_children,
        passes=ctx.passes,
    )


def get_optimised_svg_paths(svg_text: str, config: OptimizerConfig | None = None) -> str:
    """JSX children for ``svg_text``: one element, or a keyed list literal."""
    return convert_svg(svg_text, config).paths
