"""G0.01 — Greedy constrained random walk.

Grows a tangent chain one circle at a time from an edge-anchored seed.
Early steps steer away from the canvas edges; once the chain is long enough
the direction is unconstrained and the walk stops as soon as a circle pokes
out of the canvas.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ribbonwalk.engine.context import CAPPED, COMPLETE, PARTIAL, ChainResult, Circle, Scene
from ribbonwalk.engine.generation.seed import place_seed
from ribbonwalk.engine.registry import Layer, stage
from ribbonwalk.utils.geometry import TWO_PI, is_outside, overlaps_any

logger = logging.getLogger(__name__)

_HALF_PI = math.pi / 2


def safe_angle_range(c: Circle, width: float, height: float) -> tuple[float, float]:
    """Angle range that tends to keep the next circle on the canvas.

    A circle touching the left/right edge may only step back toward the
    interior half-plane; touching top/bottom further narrows that range.
    """
    min_a, max_a = 0.0, TWO_PI

    if c.x - c.radius <= 0:
        min_a, max_a = -_HALF_PI, _HALF_PI
    elif c.x + c.radius >= width:
        min_a, max_a = _HALF_PI, math.pi + _HALF_PI

    if c.y - c.radius <= 0:
        min_a, max_a = max(min_a, 0.0), min(max_a, math.pi)
    elif c.y + c.radius >= height:
        min_a, max_a = max(min_a, math.pi), min(max_a, TWO_PI)

    return min_a, max_a


def random_walk(scene: Scene) -> ChainResult:
    """Build a chain with the greedy walk. Never raises on budget exhaustion."""
    cfg = scene.config
    w, h = scene.width, scene.height

    seed = place_seed(scene)
    circles = [seed]
    xs = np.empty(cfg.max_circles + 1)
    ys = np.empty(cfg.max_circles + 1)
    rs = np.empty(cfg.max_circles + 1)
    xs[0], ys[0], rs[0] = seed.x, seed.y, seed.radius

    attempts = 0
    status = PARTIAL
    while True:
        attempts += 1
        if attempts >= cfg.max_attempts:
            break
        if len(circles) >= cfg.max_circles:
            status = CAPPED
            break

        last = circles[-1]
        r = scene.uniform(cfg.min_r, cfg.max_r)
        if len(circles) < cfg.min_length:
            ang = scene.uniform(*safe_angle_range(last, w, h))
        else:
            ang = scene.uniform(0.0, TWO_PI)

        d = last.radius + r
        nx = last.x + math.cos(ang) * d
        ny = last.y + math.sin(ang) * d

        n = len(circles)
        if overlaps_any(nx, ny, r, xs[:n], ys[:n], rs[:n], cfg.walk_epsilon):
            continue

        nxt = Circle(x=nx, y=ny, radius=r)
        circles.append(nxt)
        xs[n], ys[n], rs[n] = nx, ny, r

        if len(circles) >= cfg.min_length and is_outside(nxt, w, h):
            status = COMPLETE
            break

    return ChainResult(circles=circles, status=status, attempts=attempts, variant="walk")


@stage(
    id="G0.01",
    layer=Layer.GENERATION,
    description="Grow a tangent chain with the greedy constrained walk",
    tags={"walk"},
)
def generate_walk(scene: Scene) -> None:
    result = random_walk(scene)
    scene.result = result
    scene.chain = list(result.circles)
    if result.ok:
        logger.info("Walk finished: %d circles after %d attempts", len(result.circles), result.attempts)
    else:
        logger.warning(
            "Walk ended %s: %d circles after %d attempts, last circle still inside",
            result.status,
            len(result.circles),
            result.attempts,
        )
