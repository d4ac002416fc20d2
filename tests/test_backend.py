"""Tests for the recompress HTTP backend."""

import io

import pytest

from conftest import SIZE, decode
from recompress import EncodeError, convert
from recompress_backend import Config, create_app
from recompress_backend.routes import convert as convert_route


@pytest.fixture
def client():
    app = create_app(Config(max_upload_mb=1))
    app.config["TESTING"] = True
    return app.test_client()


def _post(client, data: bytes, filename="photo.png", **fields):
    form = {"file": (io.BytesIO(data), filename), **fields}
    return client.post("/api/convert", data=form, content_type="multipart/form-data")


class TestConfig:
    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOMPRESS_PORT", "8080")
        monkeypatch.setenv("RECOMPRESS_MAX_UPLOAD_MB", "3")
        config = Config.load()
        assert config.port == 8080
        assert config.max_upload_bytes == 3 * 1024 * 1024

    def test_defaults(self, monkeypatch):
        for name in ("RECOMPRESS_HOST", "RECOMPRESS_PORT", "RECOMPRESS_MAX_UPLOAD_MB"):
            monkeypatch.delenv(name, raising=False)
        assert Config.load() == Config()


class TestConvertRoute:
    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}

    def test_convert_jpeg(self, client, png_bytes):
        resp = _post(client, png_bytes, format="jpeg", quality="0.5")
        assert resp.status_code == 200
        assert resp.mimetype == "image/jpeg"
        assert "photo.jpg" in resp.headers["Content-Disposition"]
        img = decode(resp.data)
        assert img.format == "JPEG"
        assert img.size == SIZE

    def test_defaults_match_library(self, client, png_bytes):
        resp = _post(client, png_bytes, format="", quality="")
        assert resp.status_code == 200
        assert resp.mimetype == "image/webp"
        assert resp.data == convert(png_bytes, "webp", 0.8)

    def test_gif_upload(self, client, gif_bytes):
        resp = _post(client, gif_bytes, filename="anim.gif", format="PNG")
        assert resp.status_code == 200
        assert resp.mimetype == "image/png"
        assert "anim.png" in resp.headers["Content-Disposition"]

    def test_format_token_canonicalized(self, client, png_bytes, monkeypatch):
        calls = []

        def record(data, fmt, quality):
            calls.append((fmt, quality))
            return convert(data, fmt, quality)

        monkeypatch.setattr(convert_route, "convert", record)
        resp = _post(client, png_bytes, format="JPG", quality="0.4")
        assert resp.status_code == 200
        assert resp.mimetype == "image/jpeg"
        assert calls == [("jpeg", 0.4)]

    def test_missing_file(self, client):
        resp = client.post("/api/convert", data={"format": "png"},
                           content_type="multipart/form-data")
        assert resp.status_code == 400

    def test_bad_quality(self, client, png_bytes):
        assert _post(client, png_bytes, quality="high").status_code == 400

    def test_unsupported_format(self, client, png_bytes):
        assert _post(client, png_bytes, format="bmp").status_code == 400

    def test_undecodable(self, client):
        assert _post(client, b"garbage", format="png").status_code == 400

    def test_encode_failure(self, client, png_bytes, monkeypatch):
        def boom(data, fmt, quality):
            raise EncodeError("webp", "codec unavailable")

        monkeypatch.setattr(convert_route, "convert", boom)
        assert _post(client, png_bytes).status_code == 500

    def test_upload_too_large(self, client):
        resp = _post(client, b"\x00" * (2 * 1024 * 1024))
        assert resp.status_code == 413
