"""MP4, Ogg and Matroska container checks."""

from typing import Any

from datastream_validator.core.results import CheckResult, ValidationResult, record
from datastream_validator.utils.hexcodec import to_hex

MP4_FTYP_MARKER = b"ftyp"
OGG_PAGE_MARKER = b"OggS"
THEORA_MARKER = b"theora"
VORBIS_MARKER = b"vorbis"
EBML_MAGIC = "1a45dfa3"
MATROSKA_DOCTYPE = b"matroska"


def validate_mp4(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Report the major brand that follows the ``ftyp`` box type."""
    marker_pos = content.find(MP4_FTYP_MARKER)
    if marker_pos < 0:
        return (CheckResult(False, f"{dsid} datastream is missing an MP4 'ftyp' box."),)

    brand_start = marker_pos + len(MP4_FTYP_MARKER)
    brand = content[brand_start:brand_start + 4].decode("latin-1")
    return (CheckResult(True, f"{dsid} datastream file type is '{brand}'."),)


def validate_ogg(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Count Ogg pages and the Theora and Vorbis stream headers."""
    results: ValidationResult = ()

    pages = content.count(OGG_PAGE_MARKER)
    results = record(
        pages > 0,
        results,
        f"{dsid} datastream contains {pages} Ogg page(s).",
        f"{dsid} datastream contains no Ogg pages.",
    )

    theora = content.count(THEORA_MARKER)
    results = record(
        theora > 0,
        results,
        f"{dsid} datastream contains {theora} Theora stream marker(s).",
        f"{dsid} datastream contains no Theora stream markers.",
    )

    vorbis = content.count(VORBIS_MARKER)
    results = record(
        vorbis > 0,
        results,
        f"{dsid} datastream contains {vorbis} Vorbis stream marker(s).",
        f"{dsid} datastream contains no Vorbis stream markers.",
    )
    return results


def validate_mkv(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check the EBML magic and the single Matroska DocType."""
    results: ValidationResult = ()

    results = record(
        to_hex(content[:4]) == EBML_MAGIC,
        results,
        f"{dsid} datastream starts with the EBML magic number.",
        f"{dsid} datastream does not start with the EBML magic number.",
    )

    doctypes = content.count(MATROSKA_DOCTYPE)
    results = record(
        doctypes == 1,
        results,
        f"{dsid} datastream declares a Matroska DocType.",
        f"{dsid} datastream contains {doctypes} Matroska DocType marker(s), expected exactly 1.",
    )
    return results
