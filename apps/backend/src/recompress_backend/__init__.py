"""
Recompress Backend - Flask API around the recompress package

This app exposes single-image conversion over HTTP:
1. Accepts an uploaded image plus optional format and quality fields
2. Runs the conversion synchronously
3. Returns the encoded result as a download

Deployment:
    pip install image-recompress
    flask --app recompress_backend.app:create_app run
"""

from .app import create_app
from .config import Config

__all__ = ["create_app", "Config"]
