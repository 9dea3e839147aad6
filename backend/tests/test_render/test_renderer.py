"""Tests for the layered renderer frame plan."""

import pytest

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import Circle, Scene
from ribbonwalk.render.renderer import BLACK, WHITE, layer_transform, render


def test_layers_back_to_front(hand_scene):
    plan = render(hand_scene, frame=0)
    assert [lp.layer for lp in plan.layers] == list(range(7, -1, -1))
    assert plan.arcs is hand_scene.arcs


def test_translate_mode_offsets(hand_scene):
    plan = render(hand_scene, frame=0)
    by_layer = {lp.layer: lp for lp in plan.layers}
    assert (by_layer[0].dx, by_layer[0].dy, by_layer[0].scale) == (0.0, 0.0, 1.0)
    assert (by_layer[5].dx, by_layer[5].dy) == (-5.0, 5.0)


def test_body_is_opaque_black_and_wider_than_step(hand_scene):
    cfg = hand_scene.config
    for lp in render(hand_scene, frame=0).layers:
        assert lp.body.rgb == BLACK
        assert lp.body.alpha == 255
        assert lp.body.width > max(abs(cfg.step_x), abs(cfg.step_y))
        assert lp.outline.width < lp.body.width


def test_active_layer_highlighted(hand_scene):
    plan = render(hand_scene, frame=3)
    assert plan.active_layers == [3]
    lit = next(lp for lp in plan.layers if lp.layer == 3)
    assert lit.outline.rgb == (0, 255, 255)
    assert lit.outline.alpha == 255


def test_inactive_layers_fade_white(hand_scene):
    plan = render(hand_scene, frame=3)
    front = next(lp for lp in plan.layers if lp.layer == 0)
    back = next(lp for lp in plan.layers if lp.layer == 7)
    assert front.outline.rgb == WHITE
    assert front.outline.alpha == pytest.approx(255 - 25)
    assert back.outline.alpha == 0


def test_pulse_advances_and_wraps(hand_scene):
    assert render(hand_scene, frame=8).active_layers == [0]
    assert render(hand_scene, frame=9).active_layers == [1]


def test_multi_pulse(hand_scene):
    cfg = SceneConfig(canvas_width=500, canvas_height=500, layers=8, pulse_gap=3)
    plan = render(hand_scene, frame=7, config=cfg)
    assert sorted(plan.active_layers) == [1, 4, 7]


def test_perspective_mode_keeps_line_width_constant(hand_scene):
    cfg = SceneConfig(canvas_width=500, canvas_height=500, layers=8, depth_mode="perspective", depth_scale=0.9)
    plan = render(hand_scene, frame=0, config=cfg)
    for lp in plan.layers:
        assert (lp.dx, lp.dy) == (0.0, 0.0)
        assert lp.scale == pytest.approx(0.9**lp.layer)
        assert lp.body.width * lp.scale == pytest.approx(cfg.body_width)
        assert lp.outline.width * lp.scale == pytest.approx(cfg.outline_width)


def test_layer_transform_translate():
    assert layer_transform(10, SceneConfig()) == (-10.0, 10.0, 1.0)


def test_empty_arcs_render_nothing_without_failing():
    scene = Scene(config=SceneConfig(layers=4, seed=0))
    plan = render(scene, frame=12)
    assert plan.arcs == []
    assert len(plan.layers) == 4
    assert plan.fillers == []


def test_fillers_carried_into_plan(hand_scene):
    hand_scene.fillers = [Circle(400, 400, 15)]
    plan = render(hand_scene, frame=0)
    assert plan.fillers == hand_scene.fillers
    assert plan.filler_stroke is not None


def test_render_does_not_mutate_scene(hand_scene):
    before = (list(hand_scene.chain), list(hand_scene.arcs))
    render(hand_scene, frame=42)
    assert (hand_scene.chain, hand_scene.arcs) == before
