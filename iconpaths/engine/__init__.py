"""Structural SVG optimizer engine."""

from iconpaths.engine.registry import transform, Layer, get_registry
from iconpaths.engine.config import OptimizerConfig
from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.pipeline import Pipeline, create_pipeline, optimize, run_optimizer

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "OptimizerConfig",
    "OptimizeContext",
    "Pipeline",
    "create_pipeline",
    "optimize",
    "run_optimizer",
]
