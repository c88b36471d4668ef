"""Decoding of the `fmt ` chunk payload."""

from __future__ import annotations

import struct
from uuid import UUID

from riffwave.errors import FormatError
from riffwave.models import WAVE_FORMAT_EXTENSIBLE, AudioFormat, FormatExtension

_BASE_LAYOUT = struct.Struct("<HHIIHH")
_EXTENSION_LAYOUT = struct.Struct("<HHI16s")

FORMAT_RECORD_SIZE = _BASE_LAYOUT.size
EXTENSIBLE_RECORD_SIZE = _BASE_LAYOUT.size + _EXTENSION_LAYOUT.size
_EXTENSION_EXTRA_SIZE = _EXTENSION_LAYOUT.size - 2


def parse_format(payload: bytes) -> AudioFormat:
    if len(payload) < FORMAT_RECORD_SIZE:
        raise FormatError(
            f"fmt record needs {FORMAT_RECORD_SIZE} bytes, got {len(payload)}"
        )
    tag, channels, sample_rate, byte_rate, block_align, bits = _BASE_LAYOUT.unpack_from(payload, 0)
    extension = None
    if tag == WAVE_FORMAT_EXTENSIBLE and len(payload) >= EXTENSIBLE_RECORD_SIZE:
        extension = _parse_extension(payload)
    return AudioFormat(
        format_tag=tag,
        channel_count=channels,
        sample_rate=sample_rate,
        avg_bytes_per_sec=byte_rate,
        block_align=block_align,
        bits_per_sample=bits,
        extension=extension,
    )


def _parse_extension(payload: bytes) -> FormatExtension | None:
    extra_size, valid_bits, channel_mask, guid = _EXTENSION_LAYOUT.unpack_from(
        payload, FORMAT_RECORD_SIZE
    )
    if extra_size < _EXTENSION_EXTRA_SIZE:
        return None
    return FormatExtension(
        extra_size=extra_size,
        valid_bits_per_sample=valid_bits,
        channel_mask=channel_mask,
        sub_format=UUID(bytes_le=guid),
    )
