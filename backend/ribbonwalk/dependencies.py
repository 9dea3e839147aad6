"""FastAPI dependency injection and per-process session state."""

from __future__ import annotations

from dataclasses import dataclass

from ribbonwalk.config import settings
from ribbonwalk.engine.context import Scene
from ribbonwalk.export.capture import FrameRecorder


@dataclass
class Session:
    """The current scene and capture recorder shared by the API routes."""

    scene: Scene | None = None
    recorder: FrameRecorder | None = None


_session = Session()


def get_settings():
    return settings


def get_session() -> Session:
    return _session
