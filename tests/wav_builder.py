"""Byte-level builders for synthetic RIFF/WAVE test inputs."""

from __future__ import annotations

import struct


def chunk(chunk_id: bytes, payload: bytes, declared_size: int | None = None, pad: bool = True) -> bytes:
    size = len(payload) if declared_size is None else declared_size
    data = chunk_id + struct.pack("<I", size) + payload
    if pad and len(payload) % 2 == 1:
        data += b"\x00"
    return data


def fmt_chunk(
    channels: int = 1,
    sample_rate: int = 8000,
    bits: int = 16,
    block_align: int | None = None,
    format_tag: int = 1,
) -> bytes:
    width = (bits + 7) // 8
    align = channels * width if block_align is None else block_align
    payload = struct.pack("<HHIIHH", format_tag, channels, sample_rate, sample_rate * align, align, bits)
    return chunk(b"fmt ", payload)


def info_chunk(fields: list[tuple[bytes, bytes]]) -> bytes:
    body = b"INFO"
    for field_id, value in fields:
        body += chunk(field_id, value)
    return chunk(b"LIST", body)


def riff(*chunks: bytes, form_type: bytes = b"WAVE") -> bytes:
    body = form_type + b"".join(chunks)
    return b"RIFF" + struct.pack("<I", len(body)) + body


def wav_bytes(
    raw: bytes,
    channels: int = 1,
    sample_rate: int = 8000,
    bits: int = 16,
    block_align: int | None = None,
) -> bytes:
    return riff(fmt_chunk(channels, sample_rate, bits, block_align), chunk(b"data", raw))
