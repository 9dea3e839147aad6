"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from ribbonwalk.api import capture, frames, health, scene

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(scene.router)
api_router.include_router(frames.router)
api_router.include_router(capture.router)
