"""Layered renderer — turns a Scene and a frame index into a FramePlan.

``render`` is pure: the Scene is only read, and the host owns the frame
loop. A plan lists every depth slice back-to-front; each slice strokes the
whole arc list twice, first as an opaque black body wide enough to cover the
slice behind it, then as a thin outline that is either the pulse highlight
or white fading with depth.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import ArcSegment, Circle, Scene
from ribbonwalk.render.pulse import depth_alpha, is_active, leader_layer

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


@dataclass(frozen=True)
class Stroke:
    rgb: tuple[int, int, int]
    alpha: float
    width: float


@dataclass(frozen=True)
class LayerPlan:
    """Transform and strokes for one depth slice.

    The slice is drawn under ``translate(dx, dy)`` followed by a uniform
    ``scale`` about the canvas center.
    """

    layer: int
    dx: float
    dy: float
    scale: float
    body: Stroke
    outline: Stroke
    active: bool = False


@dataclass
class FramePlan:
    frame: int
    width: float
    height: float
    arcs: list[ArcSegment]
    # Back-to-front: layers[0] is the furthest slice
    layers: list[LayerPlan] = field(default_factory=list)
    fillers: list[Circle] = field(default_factory=list)
    filler_stroke: Stroke | None = None
    background: tuple[int, int, int] = BLACK

    @property
    def active_layers(self) -> list[int]:
        return [lp.layer for lp in self.layers if lp.active]


def layer_transform(layer: int, config: SceneConfig) -> tuple[float, float, float]:
    """Return (dx, dy, scale) for a depth slice."""
    if config.depth_mode == "perspective":
        return 0.0, 0.0, config.depth_scale**layer
    return layer * config.step_x, layer * config.step_y, 1.0


def render(scene: Scene, frame: int, config: SceneConfig | None = None) -> FramePlan:
    """Plan every slice of ``frame`` for the scene's static arc list."""
    cfg = config or scene.config
    leader = leader_layer(frame, cfg.layers, cfg.ticks_per_step)
    highlight = Stroke(rgb=cfg.highlight_rgb, alpha=255.0, width=cfg.outline_width)

    plan = FramePlan(frame=frame, width=scene.width, height=scene.height, arcs=scene.arcs)
    for layer in range(cfg.layers - 1, -1, -1):
        dx, dy, scale = layer_transform(layer, cfg)
        active = is_active(layer, leader, cfg.pulse_gap, cfg.max_pulses)
        if active:
            outline = Stroke(rgb=highlight.rgb, alpha=highlight.alpha, width=highlight.width / scale)
        else:
            outline = Stroke(
                rgb=WHITE,
                alpha=depth_alpha(layer, cfg.layers, cfg.alpha_offset),
                width=cfg.outline_width / scale,
            )
        plan.layers.append(
            LayerPlan(
                layer=layer,
                dx=dx,
                dy=dy,
                scale=scale,
                body=Stroke(rgb=BLACK, alpha=255.0, width=cfg.body_width / scale),
                outline=outline,
                active=active,
            )
        )

    if scene.fillers:
        plan.fillers = list(scene.fillers)
        plan.filler_stroke = Stroke(rgb=WHITE, alpha=255.0, width=cfg.filler_width)
    return plan
