"""Tests for the format tag dispatch table."""

import pytest

from datastream_validator.utils.exceptions import UnknownFormatError, ValidationError
from datastream_validator.validators import (
    SUPPORTED_FORMATS,
    VALIDATORS,
    get_validator,
    validate_datastream,
    validate_tiff,
)


class TestDispatch:

    def test_all_format_tags_registered(self):
        assert set(SUPPORTED_FORMATS) == {
            "image", "tiff", "jp2", "pdf", "text", "wav", "mp3", "mp4", "ogg", "mkv",
        }

    def test_get_validator(self):
        assert get_validator("tiff") is validate_tiff

    def test_get_validator_normalizes_tag(self):
        assert get_validator(" TIFF ") is validate_tiff

    def test_unknown_format(self):
        with pytest.raises(UnknownFormatError, match="Unsupported datastream format: bmp") as exc_info:
            get_validator("bmp")
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.details["supported"] == SUPPORTED_FORMATS

    def test_validate_datastream_passes_params(self):
        results = validate_datastream(b"cat cat", "OCR", "text", ("cat", 2))
        assert results[0].passed is True

    @pytest.mark.parametrize("format", list(VALIDATORS))
    def test_validators_never_raise_on_garbage(self, format):
        results = validate_datastream(b"\x00\x01garbage\xff", "OBJ", format)

        assert len(results) >= 1
        assert all(isinstance(r.passed, bool) for r in results)
        assert all(isinstance(r.message, str) for r in results)
