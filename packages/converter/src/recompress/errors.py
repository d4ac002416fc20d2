"""Error kinds raised by the conversion pipeline."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for terminal conversion failures."""


class DecodeError(ConversionError):
    """Raised when the input bytes cannot be decoded as an image."""


class EncodeError(ConversionError):
    """Raised when an encode step, or the intermediate re-decode, fails."""

    def __init__(self, stage: str, reason: str):
        self.stage = stage
        self.reason = reason
        super().__init__(f"{stage} stage failed: {reason}")


class UnsupportedFormatError(ConversionError, ValueError):
    """Raised when the requested output format is not recognized."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unsupported format: {token!r}")
