import io

import pytest

from riffwave.cursor import ByteCursor
from riffwave.errors import TruncatedStreamError


def test_cursor_reports_length_and_remaining() -> None:
    cursor = ByteCursor.from_bytes(b"\x01\x00\x02\x00\x00\x00rest")
    assert cursor.length == 10
    assert cursor.read_u16() == 1
    assert cursor.read_u32() == 2
    assert cursor.position == 6
    assert cursor.remaining == 4
    assert cursor.clamp(100) == 4
    assert cursor.clamp(3) == 3


def test_cursor_keeps_stream_position_on_creation() -> None:
    stream = io.BytesIO(b"abcdefgh")
    stream.seek(3)
    cursor = ByteCursor(stream)
    assert cursor.position == 3
    assert cursor.length == 8


def test_read_exact_raises_on_short_stream() -> None:
    cursor = ByteCursor.from_bytes(b"abc")
    with pytest.raises(TruncatedStreamError):
        cursor.read_exact(4)


def test_read_fourcc_skips_pad_bytes() -> None:
    cursor = ByteCursor.from_bytes(b"\x00\x00data")
    assert cursor.read_fourcc() == "data"
    assert cursor.at_end()


def test_read_fourcc_returns_none_when_exhausted() -> None:
    assert ByteCursor.from_bytes(b"").read_fourcc() is None
    assert ByteCursor.from_bytes(b"\x00\x00").read_fourcc() is None
    assert ByteCursor.from_bytes(b"da").read_fourcc() is None
