"""Configuration management for the recompress backend."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Backend configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 5001
    max_upload_mb: int = 25

    @classmethod
    def load(cls) -> Config:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("RECOMPRESS_HOST", "127.0.0.1"),
            port=int(os.getenv("RECOMPRESS_PORT", "5001")),
            max_upload_mb=int(os.getenv("RECOMPRESS_MAX_UPLOAD_MB", "25")),
        )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024
