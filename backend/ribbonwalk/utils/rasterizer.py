"""Rasterization utilities — frame SVG to PNG bytes and RGBA pixel buffers."""

from __future__ import annotations

import io
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)

# Stills are saved at maximum JPEG quality
_JPEG_QUALITY = 100


def render_svg_to_png(svg: str, width: int | None = None, height: int | None = None) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def png_to_rgba(png: bytes) -> NDArray[np.uint8]:
    """Decode PNG bytes into an H×W×4 pixel buffer."""
    return np.array(Image.open(io.BytesIO(png)).convert("RGBA"))


def encode_image(png: bytes, fmt: str = "png") -> bytes:
    """Re-encode PNG bytes as ``fmt`` (png, jpg/jpeg)."""
    fmt = fmt.lower()
    if fmt == "png":
        return png
    if fmt not in ("jpg", "jpeg"):
        raise ValueError(f"unsupported image format: {fmt!r}")
    image = Image.open(io.BytesIO(png)).convert("RGB")
    out = io.BytesIO()
    image.save(out, format="JPEG", quality=_JPEG_QUALITY)
    return out.getvalue()
