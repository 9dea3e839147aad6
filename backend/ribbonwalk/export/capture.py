"""Frame capture — batch rendered frames into one zip archive.

The recorder is a plain state holder: the host calls ``grab`` once per
frame while ``is_recording`` is true. When the frame budget is reached the
recorder stops accepting frames and hands archive packaging to ``submit``
(for example FastAPI background tasks or an executor) so the frame loop
never waits on disk I/O.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)


def timestamp(prefix: str = "", now: datetime | None = None) -> str:
    """``prefix_YYYY-MM-DD_HH-MM-SS`` (or just the stamp without a prefix)."""
    ts = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M-%S")
    return f"{prefix}_{ts}" if prefix else ts


def frame_name(index: int) -> str:
    return f"frame_{index:04d}.png"


def write_archive(path: Path, folder: str, frames: list[bytes]) -> Path:
    """Write ``frames`` as ``folder/frame_NNNN.png`` entries of a zip at ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for i, png in enumerate(frames):
            zf.writestr(f"{folder}/{frame_name(i)}", png)
    logger.info("Archive ready: %s (%d frames)", path, len(frames))
    return path


class FrameRecorder:
    """Collects a fixed number of frames, then packages them."""

    def __init__(
        self,
        output_dir: Path | str,
        frame_budget: int,
        submit: Callable[..., Any] | None = None,
    ) -> None:
        if frame_budget < 1:
            raise ValueError("frame_budget must be >= 1")
        self.output_dir = Path(output_dir)
        self.frame_budget = frame_budget
        self._submit = submit
        self._recording = False
        self._frames: list[bytes] = []
        self.folder = ""
        self.archives: list[Path] = []

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def grab_count(self) -> int:
        return len(self._frames)

    def start(self, now: datetime | None = None) -> bool:
        """Begin a recording. Returns False if one is already in progress."""
        if self._recording:
            return False
        self._recording = True
        self._frames = []
        self.folder = timestamp("frames", now)
        logger.info("Recording started: %s (%d frames)", self.folder, self.frame_budget)
        return True

    def grab(self, png: bytes) -> None:
        """Store one frame; finishes automatically once the budget is met."""
        if not self._recording:
            return
        self._frames.append(png)
        if len(self._frames) >= self.frame_budget:
            self.finish()

    def finish(self) -> Path | None:
        """Stop recording and hand the archive off for packaging."""
        if not self._recording:
            return None
        self._recording = False
        frames, self._frames = self._frames, []
        path = self.output_dir / f"{self.folder}.zip"
        logger.info("Recording finished: %d frames, packaging %s", len(frames), path.name)

        if self._submit is not None:
            self._submit(write_archive, path, self.folder, frames)
        else:
            write_archive(path, self.folder, frames)
        self.archives.append(path)
        return path
