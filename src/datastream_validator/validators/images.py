"""Raster image, TIFF and JPEG 2000 checks."""

from io import BytesIO
from typing import Any

import structlog
from PIL import Image

from datastream_validator.config import get_settings
from datastream_validator.core.results import CheckResult, ValidationResult, record
from datastream_validator.utils.hexcodec import to_hex

logger = structlog.get_logger()

TIFF_INTEL_SIGNATURE = "49492a00"
TIFF_MOTOROLA_SIGNATURE = "4d4d002a"
JP2_SIGNATURE = "6a502020"
JP2_END_OF_CODESTREAM = "ffd9"


def validate_image(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check that Pillow can identify and verify the image."""
    max_pixels = get_settings().validator.image_max_pixels

    try:
        with Image.open(BytesIO(content)) as img:
            width, height = img.size
            if max_pixels is not None and width * height > max_pixels:
                return (
                    CheckResult(
                        False,
                        f"Image datastream {dsid} has {width * height} pixels, "
                        f"more than the limit of {max_pixels}.",
                    ),
                )
            img.verify()
            image_format = img.format
    except Exception as e:
        # Pillow raises a mix of OSError, SyntaxError, ValueError and
        # DecompressionBombError subclasses for unreadable input.
        logger.warning("Image decode failed", dsid=dsid, error=str(e))
        return (CheckResult(False, f"Image datastream {dsid} is not a valid image: {e}"),)

    return record(True, (), f"Image datastream {dsid} is valid ({image_format}).")


def validate_tiff(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check the TIFF byte-order signature.

    A three-way result, so it is built directly rather than through ``record``.
    """
    signature = to_hex(content[:4])
    if signature == TIFF_INTEL_SIGNATURE:
        return (CheckResult(True, f"{dsid} datastream has a valid Intel-byte-order TIFF signature."),)
    if signature == TIFF_MOTOROLA_SIGNATURE:
        return (CheckResult(True, f"{dsid} datastream has a valid Motorola-byte-order TIFF signature."),)
    return (
        CheckResult(
            False,
            f"{dsid} datastream does not have a valid TIFF signature (found '{signature}').",
        ),
    )


def validate_jp2(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check the JPEG 2000 signature box and end-of-codestream marker."""
    hex_content = to_hex(content)
    results: ValidationResult = ()

    results = record(
        hex_content[8:16] == JP2_SIGNATURE,
        results,
        f"{dsid} datastream begins with a valid JP2 signature.",
        f"{dsid} datastream does not begin with a valid JP2 signature.",
    )
    results = record(
        len(content) >= 2 and hex_content[-4:] == JP2_END_OF_CODESTREAM,
        results,
        f"{dsid} datastream ends with a valid JP2 end-of-codestream marker.",
        f"{dsid} datastream does not end with a valid JP2 end-of-codestream marker.",
    )
    return results
