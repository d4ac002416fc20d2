"""Image conversion route."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from flask import Blueprint, abort, request, send_file
from werkzeug.utils import secure_filename

from recompress import DecodeError, EncodeError, UnsupportedFormatError, convert, resolve_format

logger = logging.getLogger(__name__)

convert_bp = Blueprint("convert", __name__, url_prefix="/api")


def _parse_str(value: str | None) -> str | None:
    return None if value is None or value == "" else value


def _parse_float(value: str | None) -> float | None:
    value = _parse_str(value)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        abort(400, description=f"quality must be a number, got {value!r}")


@convert_bp.post("/convert")
def convert_image():
    """Convert one uploaded image and return the encoded result."""
    f = request.files.get("file")
    if f is None:
        abort(400, description="Missing file field 'file'")

    fmt = _parse_str(request.form.get("format"))
    quality = _parse_float(request.form.get("quality"))

    try:
        # Resolved here for the response headers; convert gets the canonical token.
        target = resolve_format(fmt)
        result = convert(f.read(), target.name.lower(), quality)
    except (UnsupportedFormatError, DecodeError) as e:
        abort(400, description=str(e))
    except EncodeError as e:
        logger.error("Conversion of %s failed: %s", f.filename, e)
        abort(500, description=str(e))

    stem = Path(secure_filename(f.filename or "")).stem or "image"
    logger.info("Converted %s to %s (%d bytes)", f.filename, target.name, len(result))

    return send_file(
        io.BytesIO(result),
        mimetype=target.mime_type,
        as_attachment=True,
        download_name=f"{stem}{target.extension}",
    )
