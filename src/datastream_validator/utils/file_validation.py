"""Format detection via magic bytes.

Maps the leading bytes of a datastream to the format tag whose validator
should inspect it, for callers that do not declare a format.
"""

# Magic byte signatures mapped to format tags.
# Each entry is (offset, signature_bytes, format_tag, description).
# The first matching entry wins, so more specific signatures come first.
_SIGNATURES: list[tuple[int, bytes, str, str]] = [
    # TIFF: byte-order mark + 42
    (0, b"II*\x00", "tiff", "TIFF (Intel byte order)"),
    (0, b"MM\x00*", "tiff", "TIFF (Motorola byte order)"),
    # JPEG 2000: signature box
    (4, b"jP  ", "jp2", "JPEG 2000 (JP2)"),
    # PDF
    (0, b"%PDF-", "pdf", "PDF"),
    # WAV: RIFF....WAVE
    (8, b"WAVE", "wav", "RIFF WAVE"),
    # MP3: ID3v2 tag
    (0, b"ID3", "mp3", "MP3 (ID3v2 tag)"),
    # MP3: MPEG-1 Layer 3 frame sync
    (0, b"\xff\xfb", "mp3", "MP3 (MPEG1 Layer3)"),
    (0, b"\xff\xfa", "mp3", "MP3 (MPEG1 Layer3, CRC)"),
    # ISO Base Media File Format (MP4, M4A, MOV, 3GP)
    (4, b"ftyp", "mp4", "ISO BMFF (MP4/M4A/MOV/3GP)"),
    # OGG
    (0, b"OggS", "ogg", "OGG"),
    # MKV (EBML header)
    (0, b"\x1a\x45\xdf\xa3", "mkv", "EBML (MKV/WebM)"),
    # Raster images Pillow can verify
    (0, b"\x89PNG\r\n\x1a\n", "image", "PNG"),
    (0, b"\xff\xd8\xff", "image", "JPEG"),
    (0, b"GIF87a", "image", "GIF"),
    (0, b"GIF89a", "image", "GIF"),
    (0, b"BM", "image", "BMP"),
    (8, b"WEBP", "image", "WebP"),
]

# Minimum bytes we need to read to check all signatures
_MIN_HEADER_SIZE = 12


def detect_format(data: bytes) -> str | None:
    """Guess the format tag of a datastream from its leading bytes.

    Args:
        data: Datastream content (at least the first 12 bytes).

    Returns:
        A format tag such as ``"tiff"`` or ``"mp3"``, or None if no known
        signature matches.
    """
    if len(data) < _MIN_HEADER_SIZE:
        return None

    for offset, signature, format_tag, _desc in _SIGNATURES:
        end = offset + len(signature)
        if end <= len(data) and data[offset:end] == signature:
            return format_tag

    return None
