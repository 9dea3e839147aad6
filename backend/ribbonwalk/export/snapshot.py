"""Single-frame still export with a date-stamped filename."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path

from ribbonwalk.utils.rasterizer import encode_image

logger = logging.getLogger(__name__)


def still_filename(fmt: str = "jpg", today: date | None = None) -> str:
    """``YYYY-MM-DD.<fmt>``"""
    return f"{(today or datetime.now().date()).isoformat()}.{fmt}"


def save_still(png: bytes, output_dir: Path | str, fmt: str = "jpg", today: date | None = None) -> Path:
    """Encode one rendered frame and write it as today's still."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / still_filename(fmt, today)
    path.write_bytes(encode_image(png, fmt))
    logger.info("Saved still %s", path)
    return path
