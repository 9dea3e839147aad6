"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class SceneResponse(BaseModel):
    canvas_width: float
    canvas_height: float
    variant: str
    status: str
    attempts: int = 0
    fit_scale: float = 1.0
    chain: list[dict[str, Any]] = Field(default_factory=list)
    fillers: list[dict[str, Any]] = Field(default_factory=list)
    arcs: list[dict[str, Any]] = Field(default_factory=list)
    completed_stages: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class CaptureResponse(BaseModel):
    archive: str
    frames: int
    recording: bool = True


class CaptureStatusResponse(BaseModel):
    recording: bool = False
    grabbed: int = 0
    archives: list[str] = Field(default_factory=list)
