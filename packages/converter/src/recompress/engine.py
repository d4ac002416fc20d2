"""
Quality-driven recompression.

JPEG output is a single quantized encode. PNG and WebP output take a round
trip through JPEG first:
1. Encode the raster to JPEG at the requested quality
2. Decode that JPEG back into a new raster
3. Encode the new raster to the target container

Neither PNG nor the lossless WebP mode takes a quality setting, so all of the
loss in their output comes from step 1.
"""

from __future__ import annotations

import io
import logging

from PIL import Image

from .errors import EncodeError
from .formats import TargetFormat, quality_level

logger = logging.getLogger(__name__)

FLATTEN_BACKGROUND = (255, 255, 255)


def _flatten(img: Image.Image) -> Image.Image:
    """Composite alpha onto a white background for JPEG."""
    if img.mode == "RGB":
        return img
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    background = Image.new("RGB", img.size, FLATTEN_BACKGROUND)
    background.paste(img, mask=img.split()[-1])
    return background


def _save(img: Image.Image, stage: str, pil_format: str, **params) -> bytes:
    buf = io.BytesIO()
    try:
        img.save(buf, format=pil_format, **params)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(stage, f"{type(e).__name__}: {e}") from e
    data = buf.getvalue()
    if not data:
        raise EncodeError(stage, "encoder produced no data")
    return data


def encode_jpeg(img: Image.Image, level: int) -> bytes:
    """Encode a raster to JPEG at quality level 0-100."""
    return _save(_flatten(img), "jpeg", "JPEG", quality=level)


def _decode_intermediate(data: bytes) -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.convert("RGB")
    except (OSError, EOFError, ValueError, SyntaxError) as e:
        raise EncodeError("intermediate", f"{type(e).__name__}: {e}") from e


def _encode_via_jpeg(img: Image.Image, target: TargetFormat, level: int) -> bytes:
    jpeg_data = encode_jpeg(img, level)
    compressed = _decode_intermediate(jpeg_data)

    if target is TargetFormat.PNG:
        out = _save(compressed, "png", "PNG")
    else:
        out = _save(compressed, "webp", "WEBP", lossless=True)

    logger.debug(
        "%s via JPEG q=%d: intermediate %d bytes, output %d bytes",
        target.name, level, len(jpeg_data), len(out),
    )
    return out


def recompress(img: Image.Image, target: TargetFormat, quality: float) -> bytes:
    """
    Encode a raster to the target format at the given quality.

    Quality is clamped to [0.0, 1.0] and mapped to a JPEG level.

    Raises EncodeError: If any encode or intermediate decode step fails
    """
    level = quality_level(quality)

    if target is TargetFormat.JPEG:
        out = encode_jpeg(img, level)
        logger.debug("JPEG q=%d: %d bytes", level, len(out))
        return out

    return _encode_via_jpeg(img, target, level)
