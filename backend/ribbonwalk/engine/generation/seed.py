"""Seed placement — the first circle of every chain sits on a canvas edge."""

from __future__ import annotations

from ribbonwalk.engine.context import Circle, Scene

TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3


def place_seed(scene: Scene, bisect: bool = False) -> Circle:
    """Anchor a random-radius circle to a random canvas edge.

    With ``bisect=False`` the circle is tangent to the edge from inside;
    with ``bisect=True`` its center lies on the edge line. The free
    coordinate keeps the circle clear of the two perpendicular edges.
    """
    cfg = scene.config
    w, h = scene.width, scene.height
    edge = int(scene.rng.integers(4))
    r = scene.uniform(cfg.min_r, cfg.max_r)

    inset = 0.0 if bisect else r
    if edge == RIGHT:
        x = w - inset
    elif edge == LEFT:
        x = inset
    else:
        x = scene.uniform(r, w - r)

    if edge == TOP:
        y = inset
    elif edge == BOTTOM:
        y = h - inset
    else:
        y = scene.uniform(r, h - r)

    return Circle(x=x, y=y, radius=r, edge=edge)
