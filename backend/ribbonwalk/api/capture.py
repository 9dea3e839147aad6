"""POST/GET /api/capture — record a fixed number of frames into a zip archive."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from ribbonwalk.api.scene import require_scene
from ribbonwalk.config import Settings
from ribbonwalk.dependencies import Session, get_session, get_settings
from ribbonwalk.engine.context import Scene
from ribbonwalk.export.capture import FrameRecorder
from ribbonwalk.export.frames import record
from ribbonwalk.models.requests import CaptureRequest
from ribbonwalk.models.responses import CaptureResponse, CaptureStatusResponse

router = APIRouter()


@router.post("/capture", response_model=CaptureResponse, status_code=202)
async def start_capture(
    req: CaptureRequest,
    background_tasks: BackgroundTasks,
    scene: Scene = Depends(require_scene),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> CaptureResponse:
    if session.recorder is None:
        session.recorder = FrameRecorder(settings.output_dir, settings.rec_frames)
    recorder = session.recorder
    if recorder.is_recording:
        raise HTTPException(status_code=409, detail="Capture already in progress")

    recorder.frame_budget = req.frames or settings.rec_frames
    recorder.start()
    background_tasks.add_task(record, scene, recorder, req.start_frame)

    return CaptureResponse(archive=f"{recorder.folder}.zip", frames=recorder.frame_budget)


@router.get("/capture", response_model=CaptureStatusResponse)
async def capture_status(session: Session = Depends(get_session)) -> CaptureStatusResponse:
    recorder = session.recorder
    if recorder is None:
        return CaptureStatusResponse()
    return CaptureStatusResponse(
        recording=recorder.is_recording,
        grabbed=recorder.grab_count,
        archives=[p.name for p in recorder.archives],
    )
