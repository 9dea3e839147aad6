"""Tests for the scene pipeline: stage gating, ordering and error capture."""

import pytest

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import ArcSegment, Circle, Scene
from ribbonwalk.engine.pipeline import Pipeline, build_scene, create_pipeline
from ribbonwalk.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def test_all_stages_registered():
    create_pipeline()
    reg = get_registry()
    ids = {s.id for s in reg.all()}
    assert {"G0.01", "G0.02", "L1.01", "L1.02", "O2.01"} <= ids


def test_walk_scene_runs_walk_and_arcs_only():
    scene = build_scene(SceneConfig(seed=1))
    assert scene.completed_stages == {"G0.01", "O2.01"}
    assert scene.errors == {}
    assert len(scene.chain) >= 2
    assert len(scene.arcs) == len(scene.chain) - 1
    assert scene.fillers == []


def test_backtrack_scene_with_fit_and_fill():
    config = SceneConfig(
        variant="backtrack", seed=2, max_total_tries=3000, fit_viewport=True, fill_voids=True,
        filler_attempts=500,
    )
    scene = build_scene(config)
    assert scene.completed_stages == {"G0.02", "L1.01", "L1.02", "O2.01"}
    assert scene.result is not None and scene.result.variant == "backtrack"
    assert len(scene.arcs) == len(scene.chain) - 1
    assert scene.fit_scale <= 1.0


def test_same_seed_same_scene():
    a = build_scene(SceneConfig(seed=11))
    b = build_scene(SceneConfig(seed=11))
    assert a.chain == b.chain
    assert a.arcs == b.arcs


def test_invalid_config_raises():
    with pytest.raises(ValueError):
        build_scene(SceneConfig(min_r=300, max_r=200))
    with pytest.raises(ValueError):
        build_scene(SceneConfig(variant="spiral"))


def test_stage_failure_is_recorded():
    reg = StageRegistry()

    def boom(scene: Scene) -> None:
        raise RuntimeError("boom")

    def after(scene: Scene) -> None:
        scene.arcs = []

    reg.register(StageSpec(id="G0.01", layer=Layer.GENERATION, fn=boom, tags={"walk"}))
    reg.register(StageSpec(id="O2.01", layer=Layer.OUTLINE, fn=after, dependencies=["G0.01"]))
    scene = Pipeline(registry=reg).run(Scene(config=SceneConfig(seed=0)))
    assert scene.errors == {"G0.01": "boom"}
    assert scene.completed_stages == {"O2.01"}


def test_only_selected_variant_generator_runs():
    reg = StageRegistry()
    ran: list[str] = []

    def make(sid: str):
        def fn(scene: Scene) -> None:
            ran.append(sid)
        return fn

    reg.register(StageSpec(id="G0.01", layer=Layer.GENERATION, fn=make("G0.01"), tags={"walk"}))
    reg.register(StageSpec(id="G0.02", layer=Layer.GENERATION, fn=make("G0.02"), tags={"backtrack"}))
    reg.register(StageSpec(id="G0.03", layer=Layer.GENERATION, fn=make("G0.03"), tags={"spiral"}))
    reg.register(StageSpec(id="O2.01", layer=Layer.OUTLINE, fn=make("O2.01"), dependencies=["G0.01", "G0.02"]))
    Pipeline(registry=reg).run(Scene(config=SceneConfig(variant="backtrack", seed=0)))
    assert ran == ["G0.02", "O2.01"]


def test_scene_to_dict():
    scene = Scene(config=SceneConfig(seed=0))
    scene.chain = [Circle(1, 2, 3, edge=0)]
    scene.arcs = [ArcSegment(1, 2, 3, 0.0, 1.0, True)]
    data = scene.to_dict()
    assert data["chain"] == [{"x": 1, "y": 2, "radius": 3, "edge": 0}]
    assert data["arcs"][0]["cw"] is True
    assert data["status"] == "partial"
