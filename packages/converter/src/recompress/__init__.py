"""
Image Recompression Engine.

This package is the core conversion logic. It turns any image Pillow can
decode (animated GIFs collapse to their first frame) into a single JPEG,
PNG or WebP at a chosen quality.

Deployment:
    pip install image-recompress

This package has no networking dependencies. It's pure image processing.

"""

from .pipeline import convert
from .errors import ConversionError, DecodeError, EncodeError, UnsupportedFormatError
from .formats import (
    DEFAULT_FORMAT,
    DEFAULT_QUALITY,
    TargetFormat,
    clamp_quality,
    quality_level,
    resolve_format,
)
from .decode import is_gif, normalize
from .engine import recompress

__all__ = [
    "convert",
    "normalize",
    "recompress",
    "is_gif",
    "TargetFormat",
    "resolve_format",
    "clamp_quality",
    "quality_level",
    "DEFAULT_FORMAT",
    "DEFAULT_QUALITY",
    "ConversionError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
]
