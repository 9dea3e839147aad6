"""Pulse scheduling and depth fade for the layered renderer."""

from __future__ import annotations

from ribbonwalk.utils.geometry import lerp


def leader_layer(frame: int, layers: int, ticks_per_step: int = 1) -> int:
    """Layer the pulse sits on at ``frame``; advances every ``ticks_per_step`` frames."""
    return (frame // ticks_per_step) % layers


def active_layers(
    frame: int,
    layers: int,
    ticks_per_step: int = 1,
    gap: int | None = None,
    max_pulses: int | None = None,
) -> frozenset[int]:
    """Layers highlighted at ``frame``.

    Without ``gap`` only the leader is lit. With ``gap`` G, layer L is lit
    when ``leader - L`` is a non-negative multiple k·G with k below the
    number of pulses unlocked so far (``leader // G + 1``, optionally capped
    by ``max_pulses``).
    """
    leader = leader_layer(frame, layers, ticks_per_step)
    if gap is None:
        return frozenset({leader})

    unlocked = leader // gap + 1
    if max_pulses is not None:
        unlocked = min(unlocked, max_pulses)
    return frozenset(leader - k * gap for k in range(unlocked) if leader - k * gap >= 0)


def is_active(layer: int, leader: int, gap: int | None = None, max_pulses: int | None = None) -> bool:
    """Per-layer form of :func:`active_layers` for a known leader."""
    if gap is None:
        return layer == leader
    d = leader - layer
    if d < 0 or d % gap:
        return False
    unlocked = leader // gap + 1
    if max_pulses is not None:
        unlocked = min(unlocked, max_pulses)
    return d // gap < unlocked


def depth_alpha(layer: int, layers: int, offset: float = 0.0) -> float:
    """White outline alpha: 255 at the front layer fading to 0 at the back, minus offset."""
    t = layer / (layers - 1) if layers > 1 else 0.0
    return max(0.0, min(255.0, lerp(255.0, 0.0, t) - offset))
