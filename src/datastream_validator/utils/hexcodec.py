"""Hexadecimal views of datastream content.

Structural checks address fields by their offset in the lowercase hex
encoding of the content (two characters per byte), so a "hex offset" of 48
is byte 24.
"""

import string

from datastream_validator.utils.exceptions import InvalidHexInputError, InvalidLengthError

_HEX_DIGITS = frozenset(string.hexdigits)

# 16-bit and 32-bit little-endian fields
_FIELD_LENGTHS = (4, 8)


def to_hex(content: bytes) -> str:
    """Encode content as a lowercase hex string."""
    return content.hex()


def hex_to_int(hex_string: str) -> int:
    """Decode a little-endian 16-bit or 32-bit field from its hex form.

    Args:
        hex_string: 4 or 8 hexadecimal characters, least significant byte first.

    Returns:
        The unsigned integer value. ``hex_to_int("3412") == 0x1234``.

    Raises:
        InvalidHexInputError: If a character is not a hexadecimal digit.
        InvalidLengthError: If the length is neither 4 nor 8.
    """
    if not _HEX_DIGITS.issuperset(hex_string):
        raise InvalidHexInputError(hex_string)
    if len(hex_string) not in _FIELD_LENGTHS:
        raise InvalidLengthError(hex_string)

    pairs = [hex_string[i:i + 2] for i in range(0, len(hex_string), 2)]
    return int("".join(reversed(pairs)), 16)


def read_le_field(hex_content: str, offset: int, length: int) -> int | None:
    """Decode the little-endian field at ``offset`` or return None if truncated."""
    field = hex_content[offset:offset + length]
    if len(field) != length:
        return None
    return hex_to_int(field)


def read_be_field(hex_content: str, offset: int, length: int = 8) -> int | None:
    """Decode the big-endian field at ``offset`` or return None if truncated."""
    field = hex_content[offset:offset + length]
    if len(field) != length:
        return None
    return int(field, 16)
