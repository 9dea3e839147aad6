"""Frame output — render a scene frame to SVG/PNG and drive capture runs."""

from __future__ import annotations

import logging

from ribbonwalk.engine.context import Scene
from ribbonwalk.export.capture import FrameRecorder
from ribbonwalk.render.renderer import render
from ribbonwalk.svg.serializer import serialize_frame
from ribbonwalk.utils.rasterizer import render_svg_to_png

logger = logging.getLogger(__name__)


def frame_svg(scene: Scene, frame: int) -> str:
    return serialize_frame(render(scene, frame), title=f"frame {frame}")


def frame_png(scene: Scene, frame: int) -> bytes:
    return render_svg_to_png(frame_svg(scene, frame))


def record(scene: Scene, recorder: FrameRecorder, start_frame: int = 0) -> int:
    """Feed consecutive frames to ``recorder`` until it stops recording.

    Returns the index of the first frame not captured.
    """
    frame = start_frame
    while recorder.is_recording:
        recorder.grab(frame_png(scene, frame))
        frame += 1
    logger.debug("Captured frames %d..%d", start_frame, frame - 1)
    return frame
