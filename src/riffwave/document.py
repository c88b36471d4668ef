"""Two-phase WAVE reader: header scan, then sample decode."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from riffwave.chunks import walk_chunks
from riffwave.cursor import ByteCursor
from riffwave.decoder import decode_samples, frame_count
from riffwave.errors import FormatError
from riffwave.models import AudioFormat, DataSpan, HeaderScan, MetadataMap, SampleBuffer
from riffwave.settings import ReaderSettings

logger = logging.getLogger(__name__)


class WavDocument:
    """Format, INFO metadata and decoded samples of one WAVE container.

    The document owns its byte source for the duration of a parse. Call
    `scan_header()` to inspect format and metadata cheaply, and
    `decode_samples()` when the sample payload is needed.
    """

    def __init__(self, stream: BinaryIO, settings: ReaderSettings | None = None) -> None:
        self._cursor = ByteCursor(stream)
        self._origin = self._cursor.position
        self._settings = settings or ReaderSettings()
        self._scan: HeaderScan | None = None
        self._samples: SampleBuffer | None = None

    @classmethod
    def from_bytes(cls, data: bytes, settings: ReaderSettings | None = None) -> WavDocument:
        return cls(io.BytesIO(bytes(data)), settings)

    @classmethod
    @contextmanager
    def open(cls, path: str | Path, settings: ReaderSettings | None = None) -> Iterator[WavDocument]:
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(str(file_path))
        with file_path.open("rb") as stream:
            yield cls(stream, settings)

    def scan_header(self) -> HeaderScan:
        self._cursor.seek(self._origin)
        scan = walk_chunks(self._cursor, self._settings)
        if scan.data_span is None:
            raise FormatError("no data chunk found")
        logger.debug(
            "scanned header: %d ch, %d Hz, %d bits, data %d bytes at %d",
            scan.audio_format.channel_count,
            scan.audio_format.sample_rate,
            scan.audio_format.bits_per_sample,
            scan.data_span.size,
            scan.data_span.offset,
        )
        self._scan = scan
        self._samples = None
        return scan

    def decode_samples(self) -> SampleBuffer:
        if self._scan is None or self._scan.data_span is None:
            raise FormatError("header has not been scanned")
        if self._samples is None:
            if self._cursor.closed:
                raise FormatError("byte source is closed")
            self._samples = decode_samples(self._cursor, self._scan.audio_format, self._scan.data_span)
        return self._samples

    def read_to_end(self, header_only: bool = False) -> WavDocument:
        self.scan_header()
        if not header_only:
            self.decode_samples()
        return self

    @property
    def is_header_scanned(self) -> bool:
        return self._scan is not None

    @property
    def is_decoded(self) -> bool:
        return self._samples is not None

    @property
    def audio_format(self) -> AudioFormat:
        if self._scan is None:
            return AudioFormat()
        return self._scan.audio_format

    @property
    def metadata(self) -> MetadataMap:
        if self._scan is None:
            return {}
        return {key: list(values) for key, values in self._scan.metadata.items()}

    @property
    def data_span(self) -> DataSpan | None:
        return None if self._scan is None else self._scan.data_span

    @property
    def chunk_ids(self) -> list[str]:
        return [] if self._scan is None else list(self._scan.chunk_ids)

    @property
    def warnings(self) -> list[str]:
        return [] if self._scan is None else list(self._scan.warnings)

    @property
    def samples(self) -> SampleBuffer | None:
        if self._samples is None:
            return None
        return [list(channel) for channel in self._samples]

    @property
    def frame_count(self) -> int:
        span = self.data_span
        if span is None:
            return 0
        return frame_count(self.audio_format, span)

    @property
    def duration_sec(self) -> float:
        sample_rate = self.audio_format.sample_rate
        if sample_rate <= 0:
            return 0.0
        return self.frame_count / sample_rate


def read_wav(
    path: str | Path,
    header_only: bool = False,
    settings: ReaderSettings | None = None,
) -> WavDocument:
    """Load a file into memory and scan it, decoding samples unless `header_only`.

    The document keeps its own in-memory copy, so `decode_samples()` can still
    be called later on a header-only result.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    document = WavDocument.from_bytes(file_path.read_bytes(), settings)
    return document.read_to_end(header_only=header_only)
