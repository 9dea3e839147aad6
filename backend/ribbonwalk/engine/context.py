"""Scene — the single state object flowing through all generation stages.

Chain circles  → Scene.chain (ordered, tangent)
Filler circles → Scene.fillers (decorative, never part of the outline)
Outline        → Scene.arcs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.utils.geometry import TWO_PI, wrap_angle

# Chain status values
COMPLETE = "complete"
CAPPED = "capped"
PARTIAL = "partial"


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    # Canvas edge the seed is anchored to: 0 top, 1 right, 2 bottom, 3 left
    edge: int | None = None

    def scaled(self, cx: float, cy: float, dx: float, dy: float, scale: float) -> Circle:
        """Translate by (dx, dy), then scale about (cx, cy)."""
        return Circle(
            x=cx + (self.x + dx - cx) * scale,
            y=cy + (self.y + dy - cy) * scale,
            radius=self.radius * scale,
            edge=self.edge,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "radius": self.radius, "edge": self.edge}


@dataclass(frozen=True)
class ArcSegment:
    """One directed arc of the outline, centered on a chain circle."""

    cx: float
    cy: float
    r: float
    a1: float
    a2: float
    cw: bool

    def sweep(self) -> tuple[float, float]:
        """Return (start, end) draw angles, end > start, swept in increasing angle.

        Clockwise arcs go a1 → a2, counter-clockwise arcs go a2 → a1; the
        later angle gets 2π added when the pair would otherwise run backwards.
        """
        a1 = wrap_angle(self.a1)
        a2 = wrap_angle(self.a2)
        if self.cw:
            if a2 <= a1:
                a2 += TWO_PI
            return a1, a2
        if a1 <= a2:
            a1 += TWO_PI
        return a2, a1

    def to_dict(self) -> dict[str, Any]:
        return {
            "cx": self.cx,
            "cy": self.cy,
            "r": self.r,
            "a1": self.a1,
            "a2": self.a2,
            "cw": self.cw,
        }


@dataclass
class ChainResult:
    """Generated chain plus how the search ended."""

    circles: list[Circle]
    status: str
    attempts: int = 0
    variant: str = ""

    @property
    def ok(self) -> bool:
        return self.status == COMPLETE


@dataclass
class Scene:
    """Shared state for one generated ribbon."""

    config: SceneConfig = field(default_factory=SceneConfig)
    # Random source for every stage; seeded from config.seed
    rng: np.random.Generator | None = None

    # Ordered tangent chain
    chain: list[Circle] = field(default_factory=list)
    # Decorative circles scattered after the chain is laid out
    fillers: list[Circle] = field(default_factory=list)
    # Outline arcs extracted from the chain
    arcs: list[ArcSegment] = field(default_factory=list)

    result: ChainResult | None = None
    # Scale applied by the viewport fitter (1.0 when not fitted)
    fit_scale: float = 1.0

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = np.random.default_rng(self.config.seed)

    @property
    def width(self) -> float:
        return self.config.canvas_width

    @property
    def height(self) -> float:
        return self.config.canvas_height

    @property
    def status(self) -> str:
        return self.result.status if self.result else PARTIAL

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def to_dict(self) -> dict[str, Any]:
        return {
            "canvas_width": self.width,
            "canvas_height": self.height,
            "variant": self.config.variant,
            "status": self.status,
            "attempts": self.result.attempts if self.result else 0,
            "fit_scale": self.fit_scale,
            "chain": [c.to_dict() for c in self.chain],
            "fillers": [c.to_dict() for c in self.fillers],
            "arcs": [a.to_dict() for a in self.arcs],
            "completed_stages": sorted(self.completed_stages),
            "errors": dict(self.errors),
        }
