"""WAV and MP3 header checks.

Both validators work on the hex encoding of the content and read header
fields at fixed hex offsets. A truncated header never raises; the fields it
is missing decode as None and the checks that need them fail.
"""

from dataclasses import dataclass
from typing import Any

from datastream_validator.config import get_settings
from datastream_validator.core.results import CheckResult, ValidationResult, record
from datastream_validator.utils.hexcodec import read_be_field, read_le_field, to_hex

RIFF_MARKER = "52494646"  # "RIFF"
WAVE_MARKER = "57415645"  # "WAVE"
FMT_MARKER = "666d7420"  # "fmt "
DATA_MARKER = "64617461"  # "data"

# Canonical 44-byte header: everything after it is sample data
WAV_HEADER_HEX_LENGTH = 88
# RIFF size covers "WAVE" + fmt chunk + data chunk header
RIFF_SIZE_OVERHEAD = 36

XING_MARKER = b"Xing"
# Marker, flags, frames, bytes, 100-byte TOC and quality
XING_HEADER_BYTES = 120
XING_FLAG_FRAMES = 0x1
XING_FLAG_BYTES = 0x2
XING_FLAG_TOC = 0x4
XING_FLAG_QUALITY = 0x8

MPEG1_LAYER3_CRC = "fffa"
MPEG1_LAYER3_NO_CRC = "fffb"


@dataclass(frozen=True)
class WavHeader:
    """Fields decoded from a canonical WAV header."""

    riff_size: int | None
    channels: int | None
    sample_rate: int | None
    byte_rate: int | None
    block_align: int | None
    bits_per_sample: int | None
    data_size: int | None
    data_length: int

    @classmethod
    def from_hex(cls, hex_content: str) -> "WavHeader":
        return cls(
            riff_size=read_le_field(hex_content, 8, 8),
            channels=read_le_field(hex_content, 44, 4),
            sample_rate=read_le_field(hex_content, 48, 8),
            byte_rate=read_le_field(hex_content, 56, 8),
            block_align=read_le_field(hex_content, 64, 4),
            bits_per_sample=read_le_field(hex_content, 68, 4),
            data_size=read_le_field(hex_content, 80, 8),
            data_length=max(len(hex_content) - WAV_HEADER_HEX_LENGTH, 0) // 2,
        )

    @property
    def frame_bits(self) -> int:
        """Bits per sample frame across all channels, 0 if unknown."""
        if not self.channels or not self.bits_per_sample:
            return 0
        return self.channels * self.bits_per_sample

    @property
    def expected_byte_rate(self) -> int | None:
        if not self.frame_bits or self.sample_rate is None:
            return None
        return self.sample_rate * self.frame_bits // 8

    @property
    def expected_block_align(self) -> int | None:
        if not self.frame_bits:
            return None
        return self.frame_bits // 8

    @property
    def num_samples(self) -> int:
        if not self.frame_bits:
            return 0
        return self.data_length * 8 // self.frame_bits

    @property
    def expected_data_size(self) -> int:
        return self.num_samples * self.frame_bits // 8


def validate_wav(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Run the seven canonical WAV header checks."""
    hex_content = to_hex(content)
    header = WavHeader.from_hex(hex_content)
    results: ValidationResult = ()

    results = record(
        hex_content[0:8] == RIFF_MARKER and hex_content[16:24] == WAVE_MARKER,
        results,
        f"Header of the {dsid} datastream contains a correct RIFF/WAVE file signature.",
        f"Header of the {dsid} datastream contains a corrupt file signature.",
    )

    expected_riff_size = RIFF_SIZE_OVERHEAD + header.data_length
    results = record(
        header.riff_size == expected_riff_size,
        results,
        f"{dsid} datastream chunk size in WAV header is correct ({header.riff_size}).",
        f"{dsid} datastream chunk size in WAV header ({header.riff_size}) does not match "
        f"actual chunk size ({expected_riff_size}).",
    )

    results = record(
        hex_content[24:32] == FMT_MARKER,
        results,
        f"Subchunk1ID in WAV header of the {dsid} datastream is correct.",
        f"Subchunk1ID in WAV header of the {dsid} datastream is incorrect.",
    )

    expected_byte_rate = header.expected_byte_rate
    results = record(
        expected_byte_rate is not None and header.byte_rate == expected_byte_rate,
        results,
        f"{dsid} datastream byte rate in the WAV header is correct ({header.byte_rate}).",
        f"{dsid} datastream byte rate in the WAV header ({header.byte_rate}) does not match "
        f"the computed byte rate ({expected_byte_rate}).",
    )

    expected_block_align = header.expected_block_align
    results = record(
        expected_block_align is not None and header.block_align == expected_block_align,
        results,
        f"{dsid} datastream block alignment in the WAV header is correct ({header.block_align}).",
        f"{dsid} datastream block alignment in the WAV header ({header.block_align}) does not match "
        f"the computed block alignment ({expected_block_align}).",
    )

    results = record(
        hex_content[72:80] == DATA_MARKER,
        results,
        f"Subchunk2ID in WAV header of the {dsid} datastream is correct.",
        f"Subchunk2ID in WAV header of the {dsid} datastream is incorrect.",
    )

    expected_data_size = header.expected_data_size
    results = record(
        header.frame_bits > 0 and header.data_size == expected_data_size,
        results,
        f"{dsid} datastream data chunk size in WAV header is correct "
        f"({header.num_samples} samples, {expected_data_size} bytes).",
        f"{dsid} datastream data chunk size in WAV header ({header.data_size}) does not match "
        f"the size of {header.num_samples} samples ({expected_data_size} bytes).",
    )
    return results


def _id3v2_length(content: bytes) -> int:
    """Length of a leading ID3v2 tag, including its footer, or 0."""
    if len(content) < 10 or content[:3] != b"ID3":
        return 0
    # Tag size is a 28-bit syncsafe integer: 7 bits per byte
    size = 0
    for byte in content[6:10]:
        size = (size << 7) | (byte & 0x7F)
    size += 10
    if content[5] & 0x10:
        size += 10
    return min(size, len(content))


def validate_mp3(content: bytes, dsid: str, params: Any = None) -> ValidationResult:
    """Check the Xing VBR header fields, or the MPEG-1 Layer 3 frame sync."""
    validator_settings = get_settings().validator
    start = _id3v2_length(content) if validator_settings.mp3_skip_id3v2 else 0
    audio = content[start:]
    results: ValidationResult = ()

    marker_pos = audio[:validator_settings.mp3_xing_search_bytes].find(XING_MARKER)
    if marker_pos < 0:
        frame_sync = to_hex(audio[:2])
        if frame_sync == MPEG1_LAYER3_CRC:
            return (CheckResult(True, f"{dsid} datastream is encoded as a MPEG-1 Layer 3 file with CRC protection."),)
        if frame_sync == MPEG1_LAYER3_NO_CRC:
            return (CheckResult(True, f"{dsid} datastream is encoded as an unprotected MPEG-1 Layer 3 file."),)
        return (CheckResult(False, f"{dsid} datastream is corrupt and does not identify as a valid MP3."),)

    vbr_header = to_hex(audio[marker_pos:marker_pos + XING_HEADER_BYTES])
    flags = read_be_field(vbr_header, 8)
    if flags is None:
        return (CheckResult(False, f"{dsid} datastream has a truncated Xing VBR header."),)

    # Optional fields follow the flags in flag-bit order
    field_offset = 16
    if flags & XING_FLAG_FRAMES:
        field_offset += 8

    if flags & XING_FLAG_BYTES:
        declared_size = read_be_field(vbr_header, field_offset)
        actual_size = len(content)
        results = record(
            declared_size == actual_size,
            results,
            f"{dsid} datastream filesize of {actual_size} bytes matches the VBR size field value of {declared_size}.",
            f"{dsid} datastream filesize of {actual_size} bytes does not match the VBR size field value of {declared_size}.",
        )
        field_offset += 8

    if flags & XING_FLAG_TOC:
        field_offset += 200

    if flags & XING_FLAG_QUALITY:
        quality = read_be_field(vbr_header, field_offset)
        results = record(
            quality is not None and 0 <= quality <= 100,
            results,
            f"{dsid} datastream reports a valid VBR quality of {quality} (expected: between 0-100).",
            f"{dsid} datastream reports an invalid VBR quality of {quality} (expected: between 0-100).",
        )

    if not results:
        results = record(True, results, f"{dsid} datastream has a Xing VBR header (flags {flags:#x}).")
    return results
