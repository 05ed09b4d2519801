"""Image host — bounding transform, validation and the local backend."""

import asyncio
from io import BytesIO

import pytest
from PIL import Image

from conftest import make_image
from app.config import get_settings
from app.services.image_host import (
    ImageHost,
    ImageTransform,
    apply_transform,
    DESTROY_OK,
    DESTROY_NOT_FOUND,
)

BOX = ImageTransform(500, 500)


def test_transform_bounds_large_image_keeping_ratio():
    content, ext = apply_transform(make_image((1000, 2000)), BOX)

    assert ext == "png"
    assert Image.open(BytesIO(content)).size == (250, 500)


def test_transform_does_not_upscale_small_image():
    content, _ = apply_transform(make_image((120, 80)), BOX)

    assert Image.open(BytesIO(content)).size == (120, 80)


def test_transform_converts_unknown_format_to_jpeg():
    content, ext = apply_transform(make_image((50, 50), fmt="BMP"), BOX)

    assert ext == "jpg"
    assert Image.open(BytesIO(content)).format == "JPEG"


def test_transform_rejects_non_image():
    with pytest.raises(ValueError):
        apply_transform(b"definitely not pixels", BOX)


@pytest.mark.parametrize(
    "filename,size,expected",
    [
        ("photo.jpg", 1024, True),
        ("PHOTO.WEBP", 1024, True),
        ("photo.jpg", 0, False),
        ("", 1024, False),
        ("script.exe", 1024, False),
        ("huge.png", 50 * 1024 * 1024, False),
    ],
)
def test_validate_image(filename, size, expected):
    host = ImageHost(get_settings())

    is_valid, message = host.validate_image(filename, size, "en")

    assert is_valid is expected
    assert (message == "") is expected


def test_local_upload_and_destroy_round_trip(tmp_path, monkeypatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path))
    host = ImageHost(settings)

    result = asyncio.run(host.upload(BytesIO(make_image((900, 900))), "a.png", BOX))

    stored = tmp_path / result["public_id"]
    assert stored.exists()
    assert result["url"].endswith(f"/uploads/{result['public_id']}")
    assert Image.open(stored).size == (500, 500)

    assert asyncio.run(host.destroy(result["public_id"])) == {"result": DESTROY_OK}
    assert not stored.exists()
    assert asyncio.run(host.destroy(result["public_id"])) == {"result": DESTROY_NOT_FOUND}


def test_transform_rejects_decompression_bomb(monkeypatch):
    content = make_image((200, 200))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(ValueError):
        apply_transform(content, BOX)


def test_transform_applies_exif_orientation():
    exif = Image.Exif()
    exif[0x0112] = 6  # rotated 90° clockwise
    buf = BytesIO()
    Image.new("RGB", (200, 100), (10, 120, 10)).save(buf, "JPEG", exif=exif)

    content, ext = apply_transform(buf.getvalue(), BOX)

    assert ext == "jpg"
    assert Image.open(BytesIO(content)).size == (100, 200)
