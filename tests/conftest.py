import io

import pytest
from PIL import Image

SIZE = (32, 24)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _pattern_image(size=SIZE, mode="RGB") -> Image.Image:
    """Deterministic textured image so lossy encodes differ by quality."""
    w, h = size
    img = Image.new("RGB", size)
    img.putdata([
        ((x * 37 + y * 91) % 256, (x * x + y * 7) % 256, ((x ^ y) * 8) % 256)
        for y in range(h)
        for x in range(w)
    ])
    return img.convert(mode)


def encode(img: Image.Image, fmt: str, **params) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format=fmt, **params)
    return buf.getvalue()


def decode(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


@pytest.fixture
def rgb_image() -> Image.Image:
    return _pattern_image()


@pytest.fixture
def png_bytes() -> bytes:
    return encode(_pattern_image(), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return encode(_pattern_image(), "JPEG", quality=90)


@pytest.fixture
def webp_bytes() -> bytes:
    return encode(_pattern_image(), "WEBP", lossless=True)


@pytest.fixture
def rgba_png_bytes() -> bytes:
    """Left half opaque red, right half fully transparent."""
    img = Image.new("RGBA", SIZE, (0, 0, 0, 0))
    img.paste((255, 0, 0, 255), (0, 0, SIZE[0] // 2, SIZE[1]))
    return encode(img, "PNG")


@pytest.fixture
def gif_bytes() -> bytes:
    """Two-frame animated GIF: solid red, then solid blue."""
    frames = [Image.new("RGB", SIZE, RED), Image.new("RGB", SIZE, BLUE)]
    return encode(frames[0], "GIF", save_all=True, append_images=frames[1:],
                  duration=100, loop=0)
