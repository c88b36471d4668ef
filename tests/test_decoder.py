import struct

import pytest

from riffwave.cursor import ByteCursor
from riffwave.decoder import SAMPLE_CODECS, decode_samples, frame_count
from riffwave.errors import FormatError, UnsupportedFormatError
from riffwave.models import AudioFormat, DataSpan


def _format(bits: int, channels: int = 1, block_align: int | None = None) -> AudioFormat:
    width = (bits + 7) // 8
    return AudioFormat(
        format_tag=1,
        channel_count=channels,
        sample_rate=8000,
        avg_bytes_per_sec=8000 * channels * width,
        block_align=channels * width if block_align is None else block_align,
        bits_per_sample=bits,
    )


def _decode(raw: bytes, audio_format: AudioFormat) -> list[list[float]]:
    return decode_samples(ByteCursor.from_bytes(raw), audio_format, DataSpan(offset=0, size=len(raw)))


@pytest.mark.parametrize("bits,expected", [(8, -1.0), (16, 0.0), (24, 0.0), (32, 0.0)])
def test_zero_bytes_decode_per_bit_depth(bits: int, expected: float) -> None:
    width = bits // 8
    samples = _decode(b"\x00" * width * 3, _format(bits))
    assert samples == [[expected] * 3]


def test_sixteen_bit_extremes() -> None:
    samples = _decode(struct.pack("<hh", 32767, -32768), _format(16))
    assert samples[0][0] == 32767 / 32768
    assert samples[0][0] < 1.0
    assert samples[0][1] == -1.0


def test_twenty_four_bit_sign_extension() -> None:
    raw = b"\xff\xff\x7f" + b"\x00\x00\x80" + b"\xff\xff\xff"
    samples = _decode(raw, _format(24))
    assert samples[0] == [8388607 / 8388608, -1.0, -1 / 8388608]


def test_thirty_two_bit_values() -> None:
    samples = _decode(struct.pack("<ii", -2147483648, 1073741824), _format(32))
    assert samples[0] == [-1.0, 0.5]


def test_channels_are_deinterleaved_frame_by_frame() -> None:
    raw = struct.pack("<hhhhhh", 0, 16384, -16384, 8192, 32767, -32768)
    samples = _decode(raw, _format(16, channels=2))
    assert samples[0] == [0.0, -0.5, 32767 / 32768]
    assert samples[1] == [0.5, 0.25, -1.0]


def test_remainder_bytes_are_ignored() -> None:
    raw = b"\x00\x00" * 5 + b"\x11"
    audio_format = _format(16, channels=2)
    span = DataSpan(offset=0, size=len(raw))
    assert frame_count(audio_format, span) == 2
    samples = decode_samples(ByteCursor.from_bytes(raw), audio_format, span)
    assert [len(channel) for channel in samples] == [2, 2]


def test_span_offset_is_honoured() -> None:
    raw = b"junk" + struct.pack("<h", 16384)
    samples = decode_samples(ByteCursor.from_bytes(raw), _format(16), DataSpan(offset=4, size=2))
    assert samples == [[0.5]]


def test_empty_span_yields_empty_channels() -> None:
    samples = _decode(b"", _format(16, channels=3))
    assert samples == [[], [], []]


def test_unsupported_bit_depth() -> None:
    with pytest.raises(UnsupportedFormatError):
        _decode(b"\x00" * 4, _format(12, block_align=2))


def test_zero_block_align_is_rejected() -> None:
    with pytest.raises(FormatError):
        _decode(b"\x00" * 4, _format(16, block_align=0))


def test_codec_table_covers_supported_depths() -> None:
    assert sorted(SAMPLE_CODECS) == [8, 16, 24, 32]
    assert [SAMPLE_CODECS[bits].width for bits in (8, 16, 24, 32)] == [1, 2, 3, 4]
