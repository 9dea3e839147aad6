"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SceneRequest(BaseModel):
    seed: int | None = Field(default=None, description="Random seed (None = fresh randomness)")
    variant: Literal["walk", "backtrack"] | None = Field(
        default=None,
        description="Chain generator: greedy walk or depth-first backtracking",
    )
    fit_viewport: bool | None = Field(default=None, description="Recenter/shrink chain into the viewport")
    fill_voids: bool | None = Field(default=None, description="Scatter decorative filler circles")
    layers: int | None = Field(default=None, ge=1, le=1000, description="Depth slices per frame")
    depth_mode: Literal["translate", "perspective"] | None = None
    pulse_gap: int | None = Field(default=None, ge=1, description="Layer gap between pulses (multi-pulse)")
    ticks_per_step: int | None = Field(default=None, ge=1, description="Frames each pulse step lasts")


class CaptureRequest(BaseModel):
    frames: int | None = Field(default=None, ge=1, description="Frame budget (default seconds × fps)")
    start_frame: int = Field(default=0, ge=0)
