"""Scene configuration — controls generation, layout and rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SceneConfig:
    """Constants for one generated ribbon.

    Generation runs once per scene; render parameters are read every frame.
    """

    # Canvas
    canvas_width: float = 1080.0
    canvas_height: float = 1080.0

    # Circle radii for the chain
    min_r: float = 50.0
    max_r: float = 200.0

    # Chain variant: "walk" (greedy, A) or "backtrack" (depth-first, B)
    variant: str = "walk"
    seed: int | None = None

    # Variant A: greedy walk
    max_attempts: int = 8000
    max_circles: int = 150
    min_length: int = 30  # below this the walk steers away from the edges
    # Tangent placements come back from cos/sin a hair short of r1 + r2
    walk_epsilon: float = 1e-6

    # Variant B: backtracking
    angle_steps: int = 64
    max_total_tries: int = 20000
    backtrack_max_circles: int = 60
    outside_target: int = 5
    backtrack_epsilon: float = 0.1

    # Viewport fitter (runs when enabled; backtracking seeds straddle an edge)
    fit_viewport: bool = False
    viewport_size: float = 1080.0
    viewport_margin: float = 60.0

    # Void filler
    fill_voids: bool = False
    filler_attempts: int = 4000
    filler_min_r: float = 12.0
    filler_max_r: float = 30.0

    # Layered renderer
    layers: int = 220
    depth_mode: str = "translate"  # or "perspective"
    step_x: float = -1.0
    step_y: float = 1.0
    depth_scale: float = 0.99
    body_width: float = 3.0  # must exceed the per-layer step
    outline_width: float = 2.0
    filler_width: float = 1.0
    highlight_rgb: tuple[int, int, int] = (0, 255, 255)
    alpha_offset: float = 25.0

    # Pulse
    ticks_per_step: int = 1
    pulse_gap: int | None = None  # None = single pulse
    max_pulses: int | None = None

    def validate(self) -> None:
        """Raise ValueError for settings no generator or renderer can honour."""
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.min_r <= 0 or self.min_r > self.max_r:
            raise ValueError(f"invalid radius range [{self.min_r}, {self.max_r}]")
        if 2 * self.max_r > min(self.canvas_width, self.canvas_height):
            raise ValueError("max_r does not fit the canvas")
        if self.variant not in ("walk", "backtrack"):
            raise ValueError(f"unknown variant: {self.variant!r}")
        if self.angle_steps < 1:
            raise ValueError("angle_steps must be >= 1")
        if self.layers < 1:
            raise ValueError("layers must be >= 1")
        if self.depth_mode not in ("translate", "perspective"):
            raise ValueError(f"unknown depth mode: {self.depth_mode!r}")
        if not 0 < self.depth_scale <= 1:
            raise ValueError("depth_scale must be in (0, 1]")
        if self.ticks_per_step < 1:
            raise ValueError("ticks_per_step must be >= 1")
        if self.pulse_gap is not None and self.pulse_gap < 1:
            raise ValueError("pulse_gap must be >= 1")
        if self.filler_min_r <= 0 or self.filler_min_r > self.filler_max_r:
            raise ValueError("invalid filler radius range")
        if self.viewport_size - 2 * self.viewport_margin <= 0:
            raise ValueError("viewport margin leaves no usable area")
