"""O2.01 — Arc Extraction.

Turn the ordered tangent chain into outline arcs. Each arc is centered on a
chain circle and runs from the contact with the previous circle (or, for the
seed, the anchoring edge) to the contact with the next one. Orientation
alternates with index parity so the outline weaves left/right along the
chain. The last circle has no arc of its own: N circles → N − 1 arcs.
"""

from __future__ import annotations

import logging
import math

from ribbonwalk.engine.context import ArcSegment, Circle, Scene
from ribbonwalk.engine.registry import Layer, stage
from ribbonwalk.utils.geometry import angle_between

logger = logging.getLogger(__name__)

# Outward normal of each canvas edge (y grows downward): top, right, bottom, left
EDGE_ANGLES = (-math.pi / 2, 0.0, math.pi / 2, math.pi)


def extract_arcs(chain: list[Circle]) -> list[ArcSegment]:
    if len(chain) < 2:
        return []

    c0, c1 = chain[0], chain[1]
    to_second = angle_between(c0, c1)
    if c0.edge is not None:
        start = EDGE_ANGLES[c0.edge]
    else:
        start = to_second + math.pi
    arcs = [ArcSegment(cx=c0.x, cy=c0.y, r=c0.radius, a1=start, a2=to_second, cw=True)]

    for i in range(1, len(chain) - 1):
        prev, cur, nxt = chain[i - 1], chain[i], chain[i + 1]
        a1 = angle_between(prev, cur) + math.pi
        a2 = angle_between(cur, nxt)
        arcs.append(ArcSegment(cx=cur.x, cy=cur.y, r=cur.radius, a1=a1, a2=a2, cw=(i % 2 == 0)))

    return arcs


@stage(
    id="O2.01",
    layer=Layer.OUTLINE,
    dependencies=["G0.01", "G0.02", "L1.01"],
    description="Convert chain tangencies into oriented outline arcs",
    tags={"always"},
)
def arc_extraction(scene: Scene) -> None:
    scene.arcs = extract_arcs(scene.chain)
    logger.debug("Extracted %d arcs from %d circles", len(scene.arcs), len(scene.chain))
