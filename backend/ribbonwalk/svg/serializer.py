"""Write SVG markup for a rendered frame plan."""

from __future__ import annotations

import math
from typing import Any

from ribbonwalk.engine.context import ArcSegment, Scene
from ribbonwalk.render.renderer import FramePlan, LayerPlan, Stroke

# The outline path is defined once and referenced by every slice.
_OUTLINE_ID = "ribbon-outline"


def _fmt(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".") or "0"


def _point(cx: float, cy: float, r: float, angle: float) -> tuple[float, float]:
    return cx + r * math.cos(angle), cy + r * math.sin(angle)


def arc_path_data(arcs: list[ArcSegment]) -> str:
    """SVG path data tracing each arc in its draw direction.

    Every arc becomes its own ``M ... A ...`` sub-path, swept with
    increasing angle (sweep-flag 1 in the y-down SVG frame). A sweep of a
    full turn is split in two, since one SVG arc cannot close on itself.
    """
    parts: list[str] = []
    for seg in arcs:
        start, end = seg.sweep()
        sweep = end - start
        sx, sy = _point(seg.cx, seg.cy, seg.r, start)
        cmd = [f"M{_fmt(sx)} {_fmt(sy)}"]
        if sweep >= 2 * math.pi - 1e-9:
            mx, my = _point(seg.cx, seg.cy, seg.r, start + math.pi)
            cmd.append(f"A{_fmt(seg.r)} {_fmt(seg.r)} 0 0 1 {_fmt(mx)} {_fmt(my)}")
            cmd.append(f"A{_fmt(seg.r)} {_fmt(seg.r)} 0 0 1 {_fmt(sx)} {_fmt(sy)}")
        else:
            ex, ey = _point(seg.cx, seg.cy, seg.r, end)
            large = 1 if sweep > math.pi else 0
            cmd.append(f"A{_fmt(seg.r)} {_fmt(seg.r)} 0 {large} 1 {_fmt(ex)} {_fmt(ey)}")
        parts.append(" ".join(cmd))
    return " ".join(parts)


def _stroke_attrs(stroke: Stroke) -> str:
    r, g, b = stroke.rgb
    return (
        f'stroke="rgb({r},{g},{b})" stroke-opacity="{_fmt(stroke.alpha / 255.0)}"'
        f' stroke-width="{_fmt(stroke.width)}"'
    )


def _layer_transform(lp: LayerPlan, cx: float, cy: float) -> str:
    ops = []
    if lp.dx or lp.dy:
        ops.append(f"translate({_fmt(lp.dx)} {_fmt(lp.dy)})")
    if lp.scale != 1.0:
        ops.append(
            f"translate({_fmt(cx)} {_fmt(cy)}) scale({lp.scale:.6f}) translate({_fmt(-cx)} {_fmt(-cy)})"
        )
    return " ".join(ops)


def serialize_frame(plan: FramePlan, title: str = "") -> str:
    """Generate SVG markup for every slice of a frame, back-to-front."""
    w, h = plan.width, plan.height
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(w)} {_fmt(h)}" width="{_fmt(w)}" height="{_fmt(h)}"'
        ' xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
        ' role="img">',
    ]
    if title:
        lines.append(f"  <title>{title}</title>")

    r, g, b = plan.background
    lines.append(f'  <rect x="0" y="0" width="{_fmt(w)}" height="{_fmt(h)}" fill="rgb({r},{g},{b})" />')

    if plan.arcs:
        lines.append("  <defs>")
        lines.append(f'    <path id="{_OUTLINE_ID}" d="{arc_path_data(plan.arcs)}" fill="none" />')
        lines.append("  </defs>")

        cx, cy = w / 2, h / 2
        for lp in plan.layers:
            transform = _layer_transform(lp, cx, cy)
            open_tag = f'  <g transform="{transform}">' if transform else "  <g>"
            lines.append(open_tag)
            lines.append(f'    <use xlink:href="#{_OUTLINE_ID}" {_stroke_attrs(lp.body)} />')
            lines.append(f'    <use xlink:href="#{_OUTLINE_ID}" {_stroke_attrs(lp.outline)} />')
            lines.append("  </g>")

    if plan.fillers and plan.filler_stroke is not None:
        attrs = _stroke_attrs(plan.filler_stroke)
        for c in plan.fillers:
            lines.append(
                f'  <circle cx="{_fmt(c.x)}" cy="{_fmt(c.y)}" r="{_fmt(c.radius)}" fill="none" {attrs} />'
            )

    lines.append("</svg>")
    return "\n".join(lines)


def serialize_scene(elements: list[dict[str, Any]], canvas_w: float, canvas_h: float) -> str:
    """Flat SVG of raw elements (debug view of a chain without depth slices)."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w)} {_fmt(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        ' role="img">',
    ]
    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")
    lines.append("</svg>")
    return "\n".join(lines)


def scene_elements(scene: Scene) -> list[dict[str, Any]]:
    """Chain circles, fillers and the outline as flat SVG elements."""
    elements: list[dict[str, Any]] = []
    for i, c in enumerate(scene.chain):
        elements.append({
            "tag": "circle",
            "id": f"c{i}",
            "cx": _fmt(c.x),
            "cy": _fmt(c.y),
            "r": _fmt(c.radius),
            "fill": "none",
            "stroke": "#888",
        })
    for c in scene.fillers:
        elements.append({
            "tag": "circle",
            "cx": _fmt(c.x),
            "cy": _fmt(c.y),
            "r": _fmt(c.radius),
            "fill": "none",
            "stroke": "#444",
        })
    if scene.arcs:
        elements.append({
            "tag": "path",
            "d": arc_path_data(scene.arcs),
            "fill": "none",
            "stroke": "#0ff",
            "stroke-width": "2",
        })
    return elements
