"""Output formats and quality handling."""

from __future__ import annotations

import math
from enum import Enum

from .errors import UnsupportedFormatError

DEFAULT_FORMAT = "webp"
DEFAULT_QUALITY = 0.8


class TargetFormat(Enum):
    """Still-image encodings the pipeline can produce."""

    JPEG = ("JPEG", ".jpg", "image/jpeg")
    PNG = ("PNG", ".png", "image/png")
    WEBP = ("WEBP", ".webp", "image/webp")

    def __init__(self, pil_format: str, extension: str, mime_type: str):
        self.pil_format = pil_format
        self.extension = extension
        self.mime_type = mime_type


FORMAT_TOKENS: dict[str, TargetFormat] = {
    "jpeg": TargetFormat.JPEG,
    "jpg": TargetFormat.JPEG,
    "png": TargetFormat.PNG,
    "webp": TargetFormat.WEBP,
}


def resolve_format(token: str | None) -> TargetFormat:
    """
    Map a caller-supplied format token to a TargetFormat.

    Matching is case-insensitive. None selects DEFAULT_FORMAT.

    Raises UnsupportedFormatError: If the token is not recognized
    """
    if token is None:
        token = DEFAULT_FORMAT
    target = FORMAT_TOKENS.get(token.lower())
    if target is None:
        raise UnsupportedFormatError(token)
    return target


def clamp_quality(quality: float) -> float:
    """Saturate quality into [0.0, 1.0]. NaN counts as 0.0."""
    if math.isnan(quality):
        return 0.0
    return min(max(quality, 0.0), 1.0)


def quality_level(quality: float) -> int:
    """Convert a quality factor into a JPEG quality level in [0, 100]."""
    return int(round(clamp_quality(quality) * 100))
