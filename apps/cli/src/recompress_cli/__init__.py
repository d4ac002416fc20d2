"""
Command-line front end for the recompress package.

Usage:
    pip install image-recompress
    recompress photo.gif -f png -q 0.6
"""

from .cli import cli, default_output_path

__all__ = ["cli", "default_output_path"]
