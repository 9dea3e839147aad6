"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import Circle, Scene


def _cairo_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not _cairo_available(), reason="cairo library not available")


# Hand-built chain: seed tangent to the top edge, then right, down, right.
#   c0 (200,100) r100  →  c1 (350,100) r50  →  c2 (350,190) r40  →  c3 (450,190) r60
CHAIN = [
    Circle(x=200.0, y=100.0, radius=100.0, edge=0),
    Circle(x=350.0, y=100.0, radius=50.0),
    Circle(x=350.0, y=190.0, radius=40.0),
    Circle(x=450.0, y=190.0, radius=60.0),
]


def assert_tangent_chain(circles: list[Circle], epsilon: float = 1e-6) -> None:
    """Consecutive circles touch; non-adjacent circles never overlap."""
    for i in range(1, len(circles)):
        a, b = circles[i - 1], circles[i]
        d = math.hypot(a.x - b.x, a.y - b.y)
        assert d == pytest.approx(a.radius + b.radius, rel=1e-9, abs=1e-6), f"circles {i-1},{i} not tangent"
    for i in range(len(circles)):
        for j in range(i + 2, len(circles)):
            a, b = circles[i], circles[j]
            d = math.hypot(a.x - b.x, a.y - b.y)
            assert d >= a.radius + b.radius - epsilon, f"circles {i},{j} overlap"


@pytest.fixture
def chain() -> list[Circle]:
    return list(CHAIN)


@pytest.fixture
def walk_config() -> SceneConfig:
    return SceneConfig(seed=7)


@pytest.fixture
def backtrack_config() -> SceneConfig:
    return SceneConfig(variant="backtrack", seed=7, max_total_tries=5000, fit_viewport=True)


@pytest.fixture
def small_render_config() -> SceneConfig:
    return SceneConfig(canvas_width=500, canvas_height=500, layers=8, seed=3)


@pytest.fixture
def hand_scene(chain, small_render_config) -> Scene:
    from ribbonwalk.engine.outline.o2_01_arc_extraction import extract_arcs

    scene = Scene(config=small_render_config)
    scene.chain = chain
    scene.arcs = extract_arcs(chain)
    return scene
