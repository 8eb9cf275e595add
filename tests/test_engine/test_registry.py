"""Tests for the transform registry."""

import pytest

from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry


def _noop(ctx: OptimizeContext) -> None:
    pass


def test_register():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=_noop)
    reg.register(spec)
    assert reg.all() == [spec]
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate transform ID"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.01", layer=Layer.METADATA, fn=_noop))
    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=_noop))
    layer0 = reg.get_layer(Layer.ATTRIBUTES)
    assert [s.id for s in layer0] == ["T0.01"]


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T3.03", layer=Layer.GEOMETRY, fn=_noop))
    reg.register(TransformSpec(id="T3.02", layer=Layer.GEOMETRY, fn=_noop, dependencies=["T3.03"]))
    order = reg.resolve_order({"T3.02", "T3.03"})
    assert [s.id for s in order] == ["T3.03", "T3.02"]


def test_resolve_order_ignores_dependencies_outside_request():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T3.03", layer=Layer.GEOMETRY, fn=_noop))
    reg.register(TransformSpec(id="T3.02", layer=Layer.GEOMETRY, fn=_noop, dependencies=["T3.03"]))
    assert [s.id for s in reg.resolve_order({"T3.02"})] == ["T3.02"]


def test_resolve_order_runs_layers_in_order():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="Z", layer=Layer.ATTRIBUTES, fn=_noop))
    reg.register(TransformSpec(id="A", layer=Layer.COSMETIC, fn=_noop))
    assert [s.id for s in reg.resolve_order(None)] == ["Z", "A"]


def test_dependency_on_later_layer_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T3.01", layer=Layer.GEOMETRY, fn=_noop))
    with pytest.raises(ValueError, match="later layer GEOMETRY"):
        reg.register(TransformSpec(id="T0.09", layer=Layer.ATTRIBUTES, fn=_noop, dependencies=["T3.01"]))


def test_dependency_registered_later_in_later_layer_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.09", layer=Layer.ATTRIBUTES, fn=_noop, dependencies=["T3.01"]))
    with pytest.raises(ValueError, match=r"T0.09 \(ATTRIBUTES\) depends on T3.01"):
        reg.register(TransformSpec(id="T3.01", layer=Layer.GEOMETRY, fn=_noop))


def test_registered_dependencies_stay_within_layers():
    reg = get_registry()
    for spec in reg.all():
        for dep in spec.dependencies:
            assert dep.startswith(f"T{int(spec.layer)}.")


def test_resolve_order_ties_sorted_by_id():
    reg = TransformRegistry()
    for tid in ["T0.03", "T0.01", "T0.02"]:
        reg.register(TransformSpec(id=tid, layer=Layer.ATTRIBUTES, fn=_noop))
    assert [s.id for s in reg.resolve_order(None)] == ["T0.01", "T0.02", "T0.03"]


def test_resolve_order_cycle():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="A", layer=Layer.ATTRIBUTES, fn=_noop, dependencies=["B"]))
    reg.register(TransformSpec(id="B", layer=Layer.ATTRIBUTES, fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular dependency"):
        reg.resolve_order(None)


def test_all_transforms_registered():
    reg = get_registry()
    assert reg.count == 37
    layers = {spec.layer for spec in reg.all()}
    assert layers == set(Layer)
