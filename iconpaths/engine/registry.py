"""Transform registry — one decorated function per optimization, grouped into ordered layers.

Usage:
    @transform(id="T3.02", layer=Layer.GEOMETRY, dependencies=["T3.01", "T3.03"])
    def convert_path_data(ctx: OptimizeContext) -> None:
        for el, _ in walk(ctx.document):
            ...

Layers always run in ``Layer`` order, so a transform may only depend on
transforms of its own layer or an earlier one. Inside a layer, dependencies
decide the order and ids break ties.
"""

from __future__ import annotations

import enum
import heapq
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from iconpaths.engine.context import OptimizeContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    """Transform categories. The pipeline runs them in this order."""

    ATTRIBUTES = 0
    METADATA = 1
    VISIBILITY = 2
    GEOMETRY = 3
    COLOR = 4
    STRUCTURE = 5
    COSMETIC = 6


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["OptimizeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[int, str]:
        return int(self.layer), self.id


class TransformRegistry:
    """Every registered transform, keyed by id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._check_layers(spec)
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def _check_layers(self, spec: TransformSpec) -> None:
        """A dependency in a later layer could never have run first."""
        for dep_id in spec.dependencies:
            dep = self._transforms.get(dep_id)
            if dep is not None and dep.layer > spec.layer:
                raise ValueError(
                    f"{spec.id} ({spec.layer.name}) depends on {dep_id} in later layer {dep.layer.name}"
                )
        # Transforms registered earlier may name this one before it exists
        for other in self._transforms.values():
            if spec.id in other.dependencies and spec.layer > other.layer:
                raise ValueError(
                    f"{other.id} ({other.layer.name}) depends on {spec.id} in later layer {spec.layer.name}"
                )

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._transforms.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: s.sort_key)

    def resolve_order(self, ids: Iterable[str] | None = None) -> list[TransformSpec]:
        """Order ``ids`` (all transforms when None) so dependencies come first.

        Dependencies outside ``ids`` are treated as already satisfied: they
        belong to an earlier layer or were disabled.
        """
        pool = (
            dict(self._transforms)
            if ids is None
            else {tid: self._transforms[tid] for tid in ids if tid in self._transforms}
        )
        waiting = {tid: {d for d in spec.dependencies if d in pool} for tid, spec in pool.items()}
        ready = [spec.sort_key for tid, spec in pool.items() if not waiting[tid]]
        heapq.heapify(ready)

        ordered: list[TransformSpec] = []
        while ready:
            _, tid = heapq.heappop(ready)
            ordered.append(pool[tid])
            for other_id, deps in waiting.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        heapq.heappush(ready, pool[other_id].sort_key)

        if len(ordered) != len(pool):
            stuck = sorted(set(pool) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["OptimizeContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
