"""Tests for the image, TIFF and JP2 validators."""

from io import BytesIO

import pytest
from PIL import Image

from datastream_validator.config import Settings, ValidatorSettings
from datastream_validator.validators import images, validate_image, validate_jp2, validate_tiff

JP2_HEADER = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
JP2_BODY = b"\x00\x00\x00\x14ftypjp2 " + b"\x00" * 16


@pytest.fixture
def png_bytes():
    """A small, valid PNG."""
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color=(200, 10, 10)).save(buffer, format="PNG")
    return buffer.getvalue()


class TestValidateImage:

    def test_valid_png(self, png_bytes):
        results = validate_image(png_bytes, "TN")

        assert len(results) == 1
        assert results[0].passed is True
        assert "TN" in results[0].message
        assert "PNG" in results[0].message

    def test_garbage_fails_without_raising(self):
        results = validate_image(b"definitely not an image", "TN")

        assert len(results) == 1
        assert results[0].passed is False
        assert "TN" in results[0].message

    def test_empty_content(self):
        results = validate_image(b"", "TN")
        assert results[0].passed is False

    def test_pixel_limit_fails_large_image(self, png_bytes, monkeypatch):
        settings = Settings(validator=ValidatorSettings(image_max_pixels=4))
        monkeypatch.setattr(images, "get_settings", lambda: settings)

        results = validate_image(png_bytes, "TN")

        assert len(results) == 1
        assert results[0].passed is False
        assert "16 pixels" in results[0].message

    def test_pixel_limit_does_not_leak_into_later_calls(self, png_bytes, monkeypatch):
        limited = Settings(validator=ValidatorSettings(image_max_pixels=4))
        monkeypatch.setattr(images, "get_settings", lambda: limited)
        validate_image(png_bytes, "TN")

        monkeypatch.setattr(images, "get_settings", lambda: Settings())
        results = validate_image(png_bytes, "TN")

        assert results[0].passed is True
        assert Image.MAX_IMAGE_PIXELS != 4


class TestValidateTiff:

    def test_intel_signature(self):
        results = validate_tiff(b"II*\x00\x08\x00\x00\x00", "OBJ")

        assert len(results) == 1
        assert results[0].passed is True
        assert "Intel" in results[0].message

    def test_motorola_signature(self):
        results = validate_tiff(b"MM\x00*\x00\x00\x00\x08", "OBJ")

        assert len(results) == 1
        assert results[0].passed is True
        assert "Motorola" in results[0].message

    def test_other_prefix_fails(self):
        results = validate_tiff(b"II\x00*\x00\x00\x00\x08", "OBJ")

        assert len(results) == 1
        assert results[0].passed is False
        assert "OBJ" in results[0].message

    def test_short_content_fails(self):
        results = validate_tiff(b"II", "OBJ")
        assert results == ((False, results[0].message),)


class TestValidateJp2:

    def test_valid_markers(self):
        results = validate_jp2(JP2_HEADER + JP2_BODY + b"\xff\xd9", "JP2")

        assert len(results) == 2
        assert [r.passed for r in results] == [True, True]

    def test_missing_header_fails_only_header_check(self):
        results = validate_jp2(b"\x00" * 12 + JP2_BODY + b"\xff\xd9", "JP2")
        assert [r.passed for r in results] == [False, True]

    def test_missing_footer_fails_only_footer_check(self):
        results = validate_jp2(JP2_HEADER + JP2_BODY, "JP2")
        assert [r.passed for r in results] == [True, False]

    def test_empty_content_fails_both(self):
        results = validate_jp2(b"", "JP2")
        assert [r.passed for r in results] == [False, False]
