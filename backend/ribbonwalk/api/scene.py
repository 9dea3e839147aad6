"""POST/GET /api/scene — regenerate and inspect the current ribbon."""

from __future__ import annotations

import dataclasses
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ribbonwalk.config import Settings
from ribbonwalk.dependencies import Session, get_session, get_settings
from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import Scene
from ribbonwalk.engine.pipeline import create_pipeline
from ribbonwalk.models.requests import SceneRequest
from ribbonwalk.models.responses import SceneResponse
from ribbonwalk.svg.serializer import scene_elements, serialize_scene

router = APIRouter()


def scene_config(req: SceneRequest, settings: Settings) -> SceneConfig:
    """Default config with the request's non-null overrides applied."""
    overrides = {k: v for k, v in req.model_dump().items() if v is not None}
    overrides.setdefault("variant", settings.default_variant)
    if settings.default_seed is not None:
        overrides.setdefault("seed", settings.default_seed)
    if overrides["variant"] == "backtrack":
        # Bisected seeds start half off-canvas
        overrides.setdefault("fit_viewport", True)
    return dataclasses.replace(SceneConfig(), **overrides)


def require_scene(session: Session = Depends(get_session)) -> Scene:
    if session.scene is None:
        raise HTTPException(status_code=404, detail="No scene generated yet")
    return session.scene


def _response(scene: Scene, elapsed_ms: float = 0.0) -> SceneResponse:
    return SceneResponse(**scene.to_dict(), processing_time_ms=round(elapsed_ms, 1))


@router.post("/scene", response_model=SceneResponse)
def regenerate(
    req: SceneRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SceneResponse:
    if session.recorder is not None and session.recorder.is_recording:
        raise HTTPException(status_code=409, detail="Capture in progress")

    start = time.perf_counter()
    config = scene_config(req, settings)
    try:
        scene = create_pipeline().run(Scene(config=config))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    session.scene = scene
    return _response(scene, (time.perf_counter() - start) * 1000)


@router.get("/scene", response_model=SceneResponse)
async def current_scene(scene: Scene = Depends(require_scene)) -> SceneResponse:
    return _response(scene)


@router.get("/scene/svg")
async def scene_svg(scene: Scene = Depends(require_scene)) -> Response:
    svg = serialize_scene(scene_elements(scene), scene.width, scene.height)
    return Response(content=svg, media_type="image/svg+xml")
