"""PDF and plain-text checks."""

from collections.abc import Sequence
from typing import Any

from datastream_validator.core.results import CheckResult, ValidationResult, record

PDF_SIGNATURE = b"%PDF-"
PDF_STREAM_MARKER = bytes.fromhex("0a73747265616d0a")  # "\nstream\n"
PDF_EOF_MARKER = bytes.fromhex("0a2525454f460a")  # "\n%%EOF\n"


def validate_pdf(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check the PDF header, stream objects and end-of-file marker."""
    results: ValidationResult = ()

    version = content[5:8].decode("latin-1")
    results = record(
        content.startswith(PDF_SIGNATURE),
        results,
        f"{dsid} datastream identifies as a PDF, version {version}.",
        f"{dsid} datastream binary header is missing a valid PDF signature.",
    )

    stream_count = content.count(PDF_STREAM_MARKER)
    results = record(
        stream_count > 0,
        results,
        f"{dsid} datastream contains {stream_count} PDF stream(s).",
        f"{dsid} datastream contains no PDF streams.",
    )

    results = record(
        PDF_EOF_MARKER in content,
        results,
        f"{dsid} datastream has a PDF end-of-file marker.",
        f"{dsid} datastream is missing a PDF end-of-file marker.",
    )
    return results


def _text_params(params: Any) -> tuple[str, int] | None:
    if not isinstance(params, Sequence) or isinstance(params, (str, bytes)) or len(params) != 2:
        return None
    substring, expected = params
    if not isinstance(substring, (str, bytes)) or not substring:
        return None
    if isinstance(substring, bytes):
        substring = substring.decode("utf-8", errors="replace")
    try:
        return substring, int(expected)
    except (TypeError, ValueError):
        return None


def validate_text(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Count occurrences of ``params[0]`` and compare against ``params[1]``."""
    parsed = _text_params(params)
    if parsed is None:
        return (
            CheckResult(
                False,
                f"{dsid} datastream text check needs (substring, expected_count) parameters, got {params!r}.",
            ),
        )

    substring, expected = parsed
    count = content.decode("utf-8", errors="replace").count(substring)
    return record(
        count == expected,
        (),
        f"{dsid} datastream contains the string '{substring}' {count} time(s) (expected {expected}).",
        f"{dsid} datastream contains the string '{substring}' {count} time(s), expected {expected}.",
    )
