"""Optimizer configuration — controls which transforms run and how hard they squeeze."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OptimizerConfig:
    """Knobs for the structural optimizer."""

    # Fractional digits kept in path data and numeric attributes
    float_precision: int = 4
    # Fractional digits kept in matrix/scale factors
    transform_precision: int = 5

    # Fixed-point iteration bound
    max_passes: int = 10

    # Color adoption: True = every paint except none/url(), str = regex, False = off
    current_color: bool | str = True

    # Convert circles and ellipses to arc paths
    convert_arcs: bool = True

    # Bake transforms into path data where rendering allows it
    apply_transforms: bool = True

    # removeAttrs-style patterns: "element:attribute[:value]", "*" = any
    remove_attrs: list[str] = field(default_factory=lambda: ["*:(.*-)?opacity"])

    # Elements removed by id / class (none by default)
    remove_ids: list[str] = field(default_factory=list)
    remove_classes: list[str] = field(default_factory=list)

    # Attribute defaults pass
    keep_role_attr: bool = False
    useless_overrides: bool = False

    # Minify referenced ids to a, b, c...
    minify_ids: bool = True

    # Transform ids never run, e.g. {"T3.04"}
    disabled_transforms: set[str] = field(default_factory=set)
