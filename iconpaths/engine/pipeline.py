"""Pipeline orchestrator — runs transforms in dependency order until the document stops changing."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from iconpaths.engine.config import OptimizerConfig
from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, TransformRegistry, get_registry
from iconpaths.svg.parser import parse_svg
from iconpaths.svg.serializer import serialize

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = [f"layer{int(layer)}" for layer in Layer]


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package_name = f"iconpaths.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: OptimizerConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or OptimizerConfig()

    def run(self, ctx: OptimizeContext) -> OptimizeContext:
        """Run every pass until the serialized document is stable or ``max_passes`` is hit.

        Transform failures propagate; a half-optimized icon is never returned.
        """
        start = time.perf_counter()
        previous = serialize(ctx.document)

        while ctx.passes < max(1, self.config.max_passes):
            self.run_pass(ctx)
            current = serialize(ctx.document)
            if current == previous:
                break
            previous = current
        else:
            logger.warning("Optimizer did not converge after %d passes", ctx.passes)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d transforms over %d passes in %.0fms",
            len(ctx.completed_transforms),
            ctx.passes,
            total,
        )
        return ctx

    def run_pass(self, ctx: OptimizeContext) -> OptimizeContext:
        """One pass: every layer in order, gated transforms left out."""
        skip_ids = self._adaptive_gate(ctx) | self.config.disabled_transforms
        ctx.skipped_transforms = skip_ids

        logger.debug("Pass %d: %d transforms skipped", ctx.passes + 1, len(skip_ids))
        for layer in Layer:
            self.run_layer(ctx, layer, skip_ids)

        ctx.passes += 1
        return ctx

    def run_layer(
        self, ctx: OptimizeContext, layer: Layer, skip_ids: set[str] | None = None
    ) -> OptimizeContext:
        """Run the transforms of one layer in dependency order."""
        skip_ids = skip_ids or set()
        ids = {s.id for s in self.registry.get_layer(layer)} - skip_ids
        for spec in self.registry.resolve_order(ids):
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        return ctx

    def _adaptive_gate(self, ctx: OptimizeContext) -> set[str]:
        """Determine which transforms to skip based on document characteristics.

        While a <style> or <script> element is present, selectors may address
        ids and attributes, so the transforms that rename ids or move and drop
        paint attributes wait for a later pass.
        """
        skip: set[str] = set()
        if ctx.has_style_or_script:
            skip.update({
                "T2.04",  # Cleanup ids
                "T2.06",  # Useless stroke and fill
                "T5.01",  # Move element attributes to group
            })
        return skip


def create_pipeline(config: OptimizerConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    register_transforms()
    return Pipeline(config=config)


def run_optimizer(svg_text: str, config: OptimizerConfig | None = None) -> OptimizeContext:
    """Parse ``svg_text`` and run the optimizer over it."""
    config = config or OptimizerConfig()
    ctx = OptimizeContext(document=parse_svg(svg_text), config=config)
    return create_pipeline(config).run(ctx)


def optimize(svg_text: str, config: OptimizerConfig | None = None) -> str:
    """Optimized markup for ``svg_text``."""
    return serialize(run_optimizer(svg_text, config).document)
