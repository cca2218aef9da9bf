"""Custom exceptions for the datastream validator."""

from typing import Any


class DatastreamValidatorError(Exception):
    """Base exception for the datastream validator."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DatastreamValidatorError):
    """Request could not be validated."""

    pass


class HexDecodeError(DatastreamValidatorError, ValueError):
    """Hexadecimal field could not be decoded."""

    def __init__(self, message: str, hex_string: str) -> None:
        super().__init__(message, {"hex": hex_string})
        self.hex_string = hex_string


class InvalidHexInputError(HexDecodeError):
    """Input contains characters that are not hexadecimal digits."""

    def __init__(self, hex_string: str) -> None:
        super().__init__(f"Input '{hex_string}' contains non-hexadecimal characters", hex_string)


class InvalidLengthError(HexDecodeError):
    """Input is not a 16-bit or 32-bit little-endian value."""

    def __init__(self, hex_string: str) -> None:
        message = f"Input of length {len(hex_string)} is not 4 or 8 hexadecimal characters long"
        super().__init__(message, hex_string)


class UnknownFormatError(ValidationError):
    """No validator is registered for the format tag."""

    def __init__(self, format: str, supported_formats: list[str]) -> None:
        message = f"Unsupported datastream format: {format}. Supported: {', '.join(supported_formats)}"
        super().__init__(message, {"format": format, "supported": supported_formats})


class DatastreamNotFoundError(DatastreamValidatorError):
    """Datastream is not present on the object."""

    def __init__(self, dsid: str) -> None:
        super().__init__(f"Datastream {dsid} not found", {"dsid": dsid})
        self.dsid = dsid


class FileTooLargeError(ValidationError):
    """File exceeds size limit."""

    def __init__(self, size: int, max_size: int) -> None:
        message = f"File size {size} bytes exceeds maximum {max_size} bytes"
        super().__init__(message, {"size": size, "max_size": max_size})
