"""OptimizeContext — the single mutable state object flowing through all transforms.

Transforms edit ``document`` in place; the pipeline owns the pass bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from iconpaths.engine.config import OptimizerConfig
from iconpaths.svg.tree import Document, Element, has_element, walk


@dataclass
class OptimizeContext:
    """The document being optimized plus what the pipeline has done to it."""

    document: Document = field(default_factory=Document)
    config: OptimizerConfig = field(default_factory=OptimizerConfig)

    # Completed fixed-point passes
    passes: int = 0
    # Transform ids that ran at least once
    completed_transforms: set[str] = field(default_factory=set)
    # Transform ids held back by the adaptive gate in the latest pass
    skipped_transforms: set[str] = field(default_factory=set)

    @property
    def root(self) -> Element | None:
        return self.document.root

    @property
    def num_elements(self) -> int:
        return sum(1 for _ in walk(self.document))

    @property
    def has_style_or_script(self) -> bool:
        """Stylesheets and scripts can address elements we would otherwise rewrite."""
        return has_element(self.document, "style", "script")
