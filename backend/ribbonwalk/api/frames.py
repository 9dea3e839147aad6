"""GET /api/frames/{index}, /api/still — rendered frames and date-stamped stills."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, Response

from ribbonwalk.api.scene import require_scene
from ribbonwalk.config import Settings
from ribbonwalk.dependencies import get_settings
from ribbonwalk.engine.context import Scene
from ribbonwalk.export.frames import frame_png, frame_svg
from ribbonwalk.export.snapshot import save_still

router = APIRouter()


@router.get("/frames/{index}")
def frame(
    index: int,
    format: Literal["svg", "png"] = "svg",
    scene: Scene = Depends(require_scene),
) -> Response:
    if format == "png":
        return Response(content=frame_png(scene, index), media_type="image/png")
    return Response(content=frame_svg(scene, index), media_type="image/svg+xml")


@router.get("/still")
def still(
    frame: int = 0,
    format: Literal["jpg", "png"] = "jpg",
    scene: Scene = Depends(require_scene),
    settings: Settings = Depends(get_settings),
) -> FileResponse:
    path = save_still(frame_png(scene, frame), settings.output_dir, format)
    media_type = "image/jpeg" if format == "jpg" else "image/png"
    return FileResponse(path, media_type=media_type, filename=path.name)
