"""
Input normalization.

Turns encoded input bytes into exactly one decoded raster. Animated GIF
input is collapsed to its first frame; every other container is decoded
as-is with Pillow's format auto-detection.
"""

from __future__ import annotations

import io
import logging

from PIL import Image

from .errors import DecodeError

logger = logging.getLogger(__name__)

GIF_SIGNATURES: tuple[bytes, ...] = (b"GIF87a", b"GIF89a")


def is_gif(data: bytes) -> bool:
    """True if data starts with a GIF87a or GIF89a signature."""
    if len(data) < 6:
        return False
    return bytes(data[:6]) in GIF_SIGNATURES


def _has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or (
        img.mode == "P" and "transparency" in img.info
    )


def _decode(data: bytes) -> Image.Image:
    """
    Decode the frame Pillow positions on after opening.

    For multi-frame containers that is frame 0; later frames are never read.
    The returned image is a detached RGB or RGBA copy.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            mode = "RGBA" if _has_alpha(img) else "RGB"
            return img.convert(mode)
    except (OSError, EOFError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"{type(e).__name__}: {e}") from e


def extract_first_frame(data: bytes) -> Image.Image:
    """Decode only the first frame of a GIF."""
    img = _decode(data)
    logger.debug("Took first GIF frame (%dx%d)", img.width, img.height)
    return img


def normalize(data: bytes) -> Image.Image:
    """
    Decode input bytes into a single raster image.

    Raises DecodeError: If the bytes are not a decodable image
    """
    if is_gif(data):
        return extract_first_frame(data)

    img = _decode(data)
    logger.debug("Decoded %d bytes to %s %dx%d", len(data), img.mode, img.width, img.height)
    return img
