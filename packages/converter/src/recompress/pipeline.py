"""Public conversion entry point."""

from __future__ import annotations

import logging

from .formats import DEFAULT_QUALITY, resolve_format
from .decode import normalize
from .engine import recompress

logger = logging.getLogger(__name__)


def convert(data: bytes, format: str | None = None, quality: float | None = None) -> bytes:
    """
    Convert an encoded image to a compressed still image.

    Args:
        data: Encoded source image (GIF input yields its first frame)
        format: "jpeg", "jpg", "png" or "webp", any case. Defaults to "webp"
        quality: Quality factor, clamped to [0.0, 1.0]. Defaults to 0.8

    Raises:
        UnsupportedFormatError: Unknown format token, checked before decoding
        DecodeError: Input is not a decodable image
        EncodeError: Recompression failed
    """
    target = resolve_format(format)
    if quality is None:
        quality = DEFAULT_QUALITY

    img = normalize(data)
    out = recompress(img, target, quality)

    logger.debug("Converted %d bytes to %s: %d bytes", len(data), target.name, len(out))
    return out
