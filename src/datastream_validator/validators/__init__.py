"""Format validators and the tag -> validator dispatch table."""

from collections.abc import Callable
from typing import Any

import structlog

from datastream_validator.core.results import ValidationResult
from datastream_validator.utils.exceptions import UnknownFormatError
from datastream_validator.validators.audio import validate_mp3, validate_wav
from datastream_validator.validators.documents import validate_pdf, validate_text
from datastream_validator.validators.images import validate_image, validate_jp2, validate_tiff
from datastream_validator.validators.video import validate_mkv, validate_mp4, validate_ogg

logger = structlog.get_logger()

Validator = Callable[[bytes, str, Any], ValidationResult]

VALIDATORS: dict[str, Validator] = {
    "image": validate_image,
    "tiff": validate_tiff,
    "jp2": validate_jp2,
    "pdf": validate_pdf,
    "text": validate_text,
    "wav": validate_wav,
    "mp3": validate_mp3,
    "mp4": validate_mp4,
    "ogg": validate_ogg,
    "mkv": validate_mkv,
}

SUPPORTED_FORMATS = list(VALIDATORS)


def get_validator(format: str) -> Validator:
    """Look up the validator for a format tag (case-insensitive).

    Raises:
        UnknownFormatError: If no validator handles the tag.
    """
    validator = VALIDATORS.get(format.strip().lower())
    if validator is None:
        logger.warning("Unknown datastream format", format=format)
        raise UnknownFormatError(format, SUPPORTED_FORMATS)
    return validator


def validate_datastream(
    content: bytes,
    dsid: str,
    format: str,
    params: Any = None,
) -> ValidationResult:
    """Run the validator for ``format`` over one datastream."""
    return get_validator(format)(content, dsid, params)


__all__ = [
    "SUPPORTED_FORMATS",
    "VALIDATORS",
    "Validator",
    "get_validator",
    "validate_datastream",
    "validate_image",
    "validate_jp2",
    "validate_mkv",
    "validate_mp3",
    "validate_mp4",
    "validate_ogg",
    "validate_pdf",
    "validate_text",
    "validate_tiff",
    "validate_wav",
]
