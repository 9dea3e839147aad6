"""L1.01 — Viewport Fit.

Recenter the chain on the canvas and shrink it (never grow it) so its
radius-extended bounding box fits the viewport minus a margin.
"""

from __future__ import annotations

import logging

from ribbonwalk.engine.context import Circle, Scene
from ribbonwalk.engine.registry import Layer, stage
from ribbonwalk.utils.geometry import circles_bbox

logger = logging.getLogger(__name__)


def fit_to_viewport(
    circles: list[Circle],
    canvas_w: float,
    canvas_h: float,
    viewport: float,
    margin: float,
) -> tuple[list[Circle], float]:
    """Return the fitted circles and the uniform scale factor applied (≤ 1)."""
    if not circles:
        return [], 1.0

    xmin, ymin, xmax, ymax = circles_bbox(circles)
    bw, bh = xmax - xmin, ymax - ymin
    usable = viewport - 2 * margin

    scale = min(1.0, usable / bw, usable / bh)

    cx, cy = canvas_w / 2, canvas_h / 2
    dx = cx - (xmin + xmax) / 2
    dy = cy - (ymin + ymax) / 2
    return [c.scaled(cx, cy, dx, dy, scale) for c in circles], scale


@stage(
    id="L1.01",
    layer=Layer.LAYOUT,
    dependencies=["G0.01", "G0.02"],
    description="Recenter and shrink the chain into the viewport",
    tags={"fit"},
)
def viewport_fit(scene: Scene) -> None:
    cfg = scene.config
    scene.chain, scene.fit_scale = fit_to_viewport(
        scene.chain,
        scene.width,
        scene.height,
        cfg.viewport_size,
        cfg.viewport_margin,
    )
    logger.debug("Viewport fit: scale %.3f", scene.fit_scale)
