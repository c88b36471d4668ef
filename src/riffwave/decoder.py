"""PCM sample decoding into channel-major normalized floats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from riffwave.cursor import ByteCursor
from riffwave.errors import FormatError, UnsupportedFormatError
from riffwave.models import AudioFormat, DataSpan, SampleBuffer


@dataclass(slots=True, frozen=True)
class SampleCodec:
    width: int
    decode: Callable[[bytes], float]


def _decode_u8(chunk: bytes) -> float:
    return (chunk[0] - 128) / 128.0


def _decode_s16(chunk: bytes) -> float:
    return int.from_bytes(chunk, "little", signed=True) / 32768.0


def _decode_s24(chunk: bytes) -> float:
    sign = b"\xff" if chunk[2] & 0x80 else b"\x00"
    value = int.from_bytes(chunk + sign, "little", signed=True)
    return value / 8388608.0


def _decode_s32(chunk: bytes) -> float:
    return int.from_bytes(chunk, "little", signed=True) / 2147483648.0


SAMPLE_CODECS: dict[int, SampleCodec] = {
    8: SampleCodec(width=1, decode=_decode_u8),
    16: SampleCodec(width=2, decode=_decode_s16),
    24: SampleCodec(width=3, decode=_decode_s24),
    32: SampleCodec(width=4, decode=_decode_s32),
}


def codec_for(audio_format: AudioFormat) -> SampleCodec:
    codec = SAMPLE_CODECS.get(audio_format.bits_per_sample)
    if codec is None:
        raise UnsupportedFormatError(
            f"unsupported bits per sample: {audio_format.bits_per_sample}"
        )
    return codec


def frame_count(audio_format: AudioFormat, span: DataSpan) -> int:
    if audio_format.block_align <= 0:
        return 0
    return span.size // audio_format.block_align


def decode_samples(cursor: ByteCursor, audio_format: AudioFormat, span: DataSpan) -> SampleBuffer:
    """Decode the data span into one list of samples per channel.

    The frame count comes from `block_align`; samples are read back to back,
    `channel_count` per frame. Trailing bytes that do not fill a whole frame
    are ignored.
    """
    codec = codec_for(audio_format)
    if audio_format.block_align == 0:
        raise FormatError("block_align is zero; cannot compute frame count")

    channels = audio_format.channel_count
    frames = frame_count(audio_format, span)
    samples: SampleBuffer = [[] for _ in range(channels)]
    if frames == 0 or channels == 0:
        return samples

    width = codec.width
    stride = channels * width
    cursor.seek(span.offset)
    raw = cursor.read_exact(cursor.clamp(frames * stride))
    frames = min(frames, len(raw) // stride)
    decode = codec.decode
    for frame_start in range(0, frames * stride, stride):
        for channel in range(channels):
            offset = frame_start + channel * width
            samples[channel].append(decode(raw[offset : offset + width]))
    return samples
