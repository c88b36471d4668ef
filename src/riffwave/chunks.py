"""RIFF chunk traversal for WAVE containers."""

from __future__ import annotations

import logging

from riffwave.cursor import ByteCursor
from riffwave.errors import FormatError, TruncatedStreamError
from riffwave.fmt import FORMAT_RECORD_SIZE, parse_format
from riffwave.info import parse_info
from riffwave.models import DataSpan, HeaderScan
from riffwave.settings import ReaderSettings

logger = logging.getLogger(__name__)

RIFF_ID = "RIFF"
WAVE_ID = "WAVE"
FMT_ID = "fmt "
LIST_ID = "LIST"
INFO_ID = "INFO"
DATA_ID = "data"


def read_riff_header(cursor: ByteCursor) -> int:
    """Validate the RIFF/WAVE signature and return the declared RIFF size."""
    riff_id = cursor.read_fourcc()
    try:
        riff_size = cursor.read_u32()
    except TruncatedStreamError as exc:
        raise FormatError("stream too short for a RIFF header") from exc
    form_type = cursor.read_fourcc()
    if riff_id != RIFF_ID or form_type != WAVE_ID:
        raise FormatError(f"not a RIFF/WAVE container (got {riff_id!r}/{form_type!r})")
    return riff_size


def walk_chunks(cursor: ByteCursor, settings: ReaderSettings | None = None) -> HeaderScan:
    """Scan chunks up to and including `data`, collecting format and metadata.

    Stops without error when the stream runs out before a full chunk header.
    """
    settings = settings or ReaderSettings()
    scan = HeaderScan(riff_size=read_riff_header(cursor))

    while not cursor.at_end():
        chunk_id = cursor.read_fourcc()
        if chunk_id is None:
            break
        try:
            declared = cursor.read_u32()
        except TruncatedStreamError:
            break
        start = cursor.position
        size = cursor.clamp(declared)
        scan.chunk_ids.append(chunk_id)
        if size < declared:
            _note(scan, f"chunk {chunk_id!r} at {start - 8} declares {declared} bytes, {size} available")
        logger.debug("chunk %r at offset %d, size %d", chunk_id, start - 8, size)

        if chunk_id == DATA_ID:
            scan.data_span = DataSpan(offset=start, size=size)
            break
        if chunk_id == FMT_ID:
            _read_format(cursor, scan, size, settings)
        elif chunk_id == LIST_ID:
            _read_list(cursor, scan, start + size, settings)
        cursor.seek(start + size)

    return scan


def _read_format(cursor: ByteCursor, scan: HeaderScan, size: int, settings: ReaderSettings) -> None:
    if size < FORMAT_RECORD_SIZE:
        message = f"fmt chunk of {size} bytes is smaller than the {FORMAT_RECORD_SIZE}-byte format record"
        if settings.strict_format:
            raise FormatError(message)
        scan.warnings.append(message)
        logger.warning("%s; keeping previous format", message)
        return
    scan.audio_format = parse_format(cursor.read_exact(size))


def _read_list(cursor: ByteCursor, scan: HeaderScan, end: int, settings: ReaderSettings) -> None:
    if end - cursor.position < 4:
        return
    list_type = cursor.read_fourcc()
    if list_type != INFO_ID:
        logger.debug("skipping LIST of type %r", list_type)
        return
    parse_info(cursor, end, scan.metadata, encoding=settings.info_encoding)


def _note(scan: HeaderScan, message: str) -> None:
    scan.warnings.append(message)
    logger.debug("%s", message)
