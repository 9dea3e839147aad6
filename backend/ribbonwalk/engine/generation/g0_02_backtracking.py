"""G0.02 — Depth-first chain search with backtracking.

The seed is bisected by a canvas edge. At every node the search fans out
``angle_steps`` evenly spaced directions around the tail circle (rotated by
a random offset), tries each non-overlapping placement, descends, and pops
the circle again on the way out. A global try budget and a circle cap bound
the search. The longest chain seen with at least ``outside_target`` circles
fully off-canvas wins; without one, the longest chain seen is returned as
partial.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ribbonwalk.engine.context import COMPLETE, PARTIAL, ChainResult, Circle, Scene
from ribbonwalk.engine.generation.seed import place_seed
from ribbonwalk.engine.registry import Layer, stage
from ribbonwalk.utils.geometry import TWO_PI, is_fully_outside, overlaps_any

logger = logging.getLogger(__name__)


class _Search:
    def __init__(self, scene: Scene, seed: Circle) -> None:
        cfg = scene.config
        self.scene = scene
        self.width = scene.width
        self.height = scene.height
        self.cap = max(cfg.backtrack_max_circles, 1)
        self.budget = cfg.max_total_tries
        self.target = cfg.outside_target
        self.epsilon = cfg.backtrack_epsilon
        self.step = TWO_PI / cfg.angle_steps
        self.angle_steps = cfg.angle_steps

        self.path: list[Circle] = []
        self.xs = np.empty(self.cap)
        self.ys = np.empty(self.cap)
        self.rs = np.empty(self.cap)
        self.outside = 0

        self.tries = 0
        self.best: list[Circle] = []
        self.longest: list[Circle] = []
        self.done = False

        self._push(seed)

    def _push(self, c: Circle) -> None:
        n = len(self.path)
        self.path.append(c)
        self.xs[n], self.ys[n], self.rs[n] = c.x, c.y, c.radius
        if is_fully_outside(c, self.width, self.height):
            self.outside += 1
        self._record()

    def _pop(self) -> None:
        c = self.path.pop()
        if is_fully_outside(c, self.width, self.height):
            self.outside -= 1

    def _record(self) -> None:
        n = len(self.path)
        if n > len(self.longest):
            self.longest = list(self.path)
        if self.outside >= self.target and n > len(self.best):
            self.best = list(self.path)
            if n >= self.cap:
                self.done = True

    def _exhausted(self) -> bool:
        return self.done or self.tries >= self.budget

    def _can_grow(self) -> bool:
        return len(self.path) < self.cap and not self._exhausted()

    def extend(self) -> None:
        """Explore every placement around the tail, depth first.

        Each open node is an ``[offset, k]`` frame on an explicit stack; frame
        ``i`` grows from ``path[i]``. Finishing a frame pops the circle it grew
        from, so the path always matches the stack however deep the chain is.
        """
        if not self._can_grow():
            return
        cfg = self.scene.config
        frames = [[self.scene.uniform(0.0, TWO_PI), 0]]

        while frames and not self._exhausted():
            top = frames[-1]
            offset, k = top
            if k >= self.angle_steps:
                frames.pop()
                if frames:
                    self._pop()
                continue
            top[1] = k + 1
            self.tries += 1

            tail = self.path[-1]
            ang = offset + k * self.step
            r = self.scene.uniform(cfg.min_r, cfg.max_r)
            d = tail.radius + r
            nx = tail.x + math.cos(ang) * d
            ny = tail.y + math.sin(ang) * d

            n = len(self.path)
            if overlaps_any(nx, ny, r, self.xs[:n], self.ys[:n], self.rs[:n], self.epsilon):
                continue

            self._push(Circle(x=nx, y=ny, radius=r))
            if self._can_grow():
                frames.append([self.scene.uniform(0.0, TWO_PI), 0])
            else:
                self._pop()


def backtrack_search(scene: Scene) -> ChainResult:
    """Run the bounded depth-first search. Never raises on budget exhaustion."""
    search = _Search(scene, place_seed(scene, bisect=True))
    search.extend()

    if search.best:
        return ChainResult(circles=search.best, status=COMPLETE, attempts=search.tries, variant="backtrack")
    return ChainResult(circles=search.longest, status=PARTIAL, attempts=search.tries, variant="backtrack")


@stage(
    id="G0.02",
    layer=Layer.GENERATION,
    description="Search a tangent chain depth-first with backtracking",
    tags={"backtrack"},
)
def generate_backtrack(scene: Scene) -> None:
    result = backtrack_search(scene)
    scene.result = result
    scene.chain = list(result.circles)
    if result.ok:
        logger.info("Backtracking found %d circles in %d tries", len(result.circles), result.attempts)
    else:
        logger.warning(
            "Backtracking found no chain with %d circles off-canvas in %d tries; keeping longest (%d)",
            scene.config.outside_target,
            result.attempts,
            len(result.circles),
        )
