"""L1.02 — Void Fill.

Scatter small decorative circles into viewport space the chain leaves empty.
Fillers live in ``Scene.fillers`` and never join the tangent chain, so the
outline ignores them.
"""

from __future__ import annotations

import logging

import numpy as np

from ribbonwalk.engine.context import Circle, Scene
from ribbonwalk.engine.registry import Layer, stage
from ribbonwalk.utils.geometry import is_within, overlaps_any, viewport_bounds

logger = logging.getLogger(__name__)


def fill_voids(scene: Scene, obstacles: list[Circle]) -> list[Circle]:
    """Return accepted filler circles; rejects candidates touching anything placed.

    Candidates must sit wholly inside the viewport square centred on the
    canvas, the same square the viewport fitter targets.
    """
    cfg = scene.config
    bounds = viewport_bounds(scene.width, scene.height, cfg.viewport_size)
    xmin, ymin, xmax, ymax = bounds
    cap = len(obstacles) + cfg.filler_attempts
    xs = np.empty(cap)
    ys = np.empty(cap)
    rs = np.empty(cap)
    for i, c in enumerate(obstacles):
        xs[i], ys[i], rs[i] = c.x, c.y, c.radius
    n = len(obstacles)

    accepted: list[Circle] = []
    for _ in range(cfg.filler_attempts):
        r = scene.uniform(cfg.filler_min_r, cfg.filler_max_r)
        candidate = Circle(x=scene.uniform(xmin, xmax), y=scene.uniform(ymin, ymax), radius=r)
        if not is_within(candidate, bounds):
            continue
        if overlaps_any(candidate.x, candidate.y, r, xs[:n], ys[:n], rs[:n]):
            continue
        accepted.append(candidate)
        xs[n], ys[n], rs[n] = candidate.x, candidate.y, r
        n += 1

    return accepted


@stage(
    id="L1.02",
    layer=Layer.LAYOUT,
    dependencies=["G0.01", "G0.02", "L1.01"],
    description="Scatter decorative circles into empty canvas space",
    tags={"fill"},
)
def void_fill(scene: Scene) -> None:
    scene.fillers = fill_voids(scene, scene.chain)
    logger.debug("Void fill: %d of %d candidates accepted", len(scene.fillers), scene.config.filler_attempts)
