"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ribbonwalk import __version__
from ribbonwalk.engine.registry import get_registry
from ribbonwalk.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
    )
