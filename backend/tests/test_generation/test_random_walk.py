"""Tests for G0.01 — greedy constrained walk."""

import math

import pytest

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import CAPPED, COMPLETE, PARTIAL, Circle, Scene
from ribbonwalk.engine.generation.g0_01_random_walk import generate_walk, random_walk, safe_angle_range
from ribbonwalk.utils.geometry import TWO_PI, is_outside
from tests.conftest import assert_tangent_chain


@pytest.mark.parametrize("seed", range(8))
def test_walk_produces_tangent_chain(seed):
    scene = Scene(config=SceneConfig(seed=seed))
    result = random_walk(scene)
    assert result.status in (COMPLETE, CAPPED, PARTIAL)
    assert result.circles[0].edge is not None
    assert all(c.edge is None for c in result.circles[1:])
    assert_tangent_chain(result.circles, epsilon=scene.config.walk_epsilon)


@pytest.mark.parametrize("seed", range(8))
def test_complete_walk_meets_termination(seed):
    scene = Scene(config=SceneConfig(seed=seed))
    result = random_walk(scene)
    if result.status == COMPLETE:
        assert len(result.circles) >= 30
        assert is_outside(result.circles[-1], scene.width, scene.height)
        # stops at the first qualifying circle
        assert not any(
            is_outside(c, scene.width, scene.height) for c in result.circles[29:-1]
        )


def test_walk_completes_for_most_seeds():
    statuses = [random_walk(Scene(config=SceneConfig(seed=s))).status for s in range(10)]
    assert statuses.count(COMPLETE) >= 3


def test_walk_radii_in_range():
    result = random_walk(Scene(config=SceneConfig(seed=4)))
    assert all(50 <= c.radius <= 200 for c in result.circles)


def test_tiny_attempt_budget_returns_partial():
    scene = Scene(config=SceneConfig(seed=0, max_attempts=5))
    result = random_walk(scene)
    assert result.status == PARTIAL
    assert 1 <= len(result.circles) <= 5
    assert result.attempts == 5


def test_circle_cap_reported():
    scene = Scene(config=SceneConfig(seed=0, max_circles=3, min_length=30))
    result = random_walk(scene)
    assert len(result.circles) <= 3
    assert result.status in (CAPPED, PARTIAL)


def test_safe_angle_unconstrained_in_middle():
    assert safe_angle_range(Circle(500, 500, 50), 1080, 1080) == (0.0, TWO_PI)


def test_safe_angle_near_left_edge_points_right():
    lo, hi = safe_angle_range(Circle(50, 500, 50), 1080, 1080)
    assert (lo, hi) == (-math.pi / 2, math.pi / 2)


def test_safe_angle_near_right_edge_points_left():
    lo, hi = safe_angle_range(Circle(1030, 500, 50), 1080, 1080)
    assert (lo, hi) == (math.pi / 2, 3 * math.pi / 2)


def test_safe_angle_top_edge_points_down():
    lo, hi = safe_angle_range(Circle(500, 50, 50), 1080, 1080)
    assert (lo, hi) == (0.0, math.pi)


def test_safe_angle_bottom_right_corner():
    lo, hi = safe_angle_range(Circle(1030, 1030, 50), 1080, 1080)
    assert (lo, hi) == (math.pi, 3 * math.pi / 2)


def test_top_edge_seed_tangent_formula():
    for s in range(40):
        scene = Scene(config=SceneConfig(seed=s))
        result = random_walk(scene)
        c0 = result.circles[0]
        if c0.edge == 0:
            assert c0.y == c0.radius
            assert c0.radius <= c0.x <= scene.width - c0.radius
            return
    pytest.fail("no top-edge seed in 40 draws")


def test_stage_sets_scene(walk_config):
    scene = Scene(config=walk_config)
    generate_walk(scene)
    assert scene.result is not None
    assert scene.chain == scene.result.circles
    assert scene.result.variant == "walk"
