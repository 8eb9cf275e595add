"""Tests for the pipeline orchestrator."""

import pytest

from tests.conftest import HOME_PATH_D, HOME_SVG, make_context

from iconpaths.engine.config import OptimizerConfig
from iconpaths.engine.context import OptimizeContext
from iconpaths.engine.pipeline import Pipeline, optimize, run_optimizer
from iconpaths.engine.registry import Layer, TransformRegistry, TransformSpec
from iconpaths.svg.tree import Element


def test_pipeline_runs_transforms_in_order():
    reg = TransformRegistry()
    results = []

    def t1(ctx: OptimizeContext) -> None:
        results.append("t1")

    def t2(ctx: OptimizeContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.02", layer=Layer.ATTRIBUTES, fn=t2, dependencies=["T0.01"]))
    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=t1))

    ctx = Pipeline(registry=reg).run(make_context("<svg/>"))

    # Nothing changes the document, so one pass is enough.
    assert results == ["t1", "t2"]
    assert ctx.passes == 1
    assert ctx.completed_transforms == {"T0.01", "T0.02"}


def test_pipeline_propagates_errors():
    reg = TransformRegistry()

    def fail(ctx: OptimizeContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=fail))

    with pytest.raises(ValueError, match="test error"):
        Pipeline(registry=reg).run(make_context("<svg/>"))


def test_pipeline_stops_at_max_passes():
    reg = TransformRegistry()

    def grow(ctx: OptimizeContext) -> None:
        ctx.root.children.append(Element(name="g"))

    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=grow))

    config = OptimizerConfig(max_passes=3)
    ctx = Pipeline(registry=reg, config=config).run(make_context("<svg/>"))
    assert ctx.passes == 3
    assert len(ctx.root.children) == 3


def test_disabled_transforms_skipped():
    reg = TransformRegistry()
    calls = []
    reg.register(TransformSpec(id="T0.01", layer=Layer.ATTRIBUTES, fn=lambda ctx: calls.append(1)))

    config = OptimizerConfig(disabled_transforms={"T0.01"})
    Pipeline(registry=reg, config=config).run(make_context("<svg/>"))
    assert calls == []


def test_adaptive_gate_with_style():
    ctx = make_context('<svg><style>.a{fill:red}</style><path id="x" d="M0 0h1v1z"/></svg>')
    skipped = Pipeline()._adaptive_gate(ctx)
    assert skipped == {"T2.04", "T2.06", "T5.01"}


def test_adaptive_gate_plain():
    assert Pipeline()._adaptive_gate(make_context(HOME_SVG)) == set()


def test_run_optimizer_converges():
    ctx = run_optimizer(HOME_SVG)
    assert 1 <= ctx.passes < ctx.config.max_passes
    assert HOME_PATH_D in optimize(HOME_SVG)


def test_optimize_is_idempotent():
    once = optimize(HOME_SVG)
    assert optimize(once) == once


def test_run_layer_follows_dependencies_before_ids():
    reg = TransformRegistry()
    results = []
    reg.register(TransformSpec(id="T3.02", layer=Layer.GEOMETRY, fn=lambda ctx: results.append("T3.02"), dependencies=["T3.03"]))
    reg.register(TransformSpec(id="T3.03", layer=Layer.GEOMETRY, fn=lambda ctx: results.append("T3.03")))
    reg.register(TransformSpec(id="T4.01", layer=Layer.COLOR, fn=lambda ctx: results.append("T4.01")))

    ctx = Pipeline(registry=reg).run_layer(make_context("<svg/>"), Layer.GEOMETRY)

    assert results == ["T3.03", "T3.02"]
    assert ctx.completed_transforms == {"T3.02", "T3.03"}


def test_run_layer_skipped_dependency_does_not_block():
    reg = TransformRegistry()
    results = []
    reg.register(TransformSpec(id="T3.03", layer=Layer.GEOMETRY, fn=lambda ctx: results.append("T3.03")))
    reg.register(TransformSpec(id="T3.02", layer=Layer.GEOMETRY, fn=lambda ctx: results.append("T3.02"), dependencies=["T3.03"]))

    Pipeline(registry=reg).run_layer(make_context("<svg/>"), Layer.GEOMETRY, {"T3.03"})

    assert results == ["T3.02"]
