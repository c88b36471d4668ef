"""LIST/INFO text metadata harvesting."""

from __future__ import annotations

import logging

from riffwave.cursor import ByteCursor
from riffwave.errors import TruncatedStreamError
from riffwave.models import MetadataMap

logger = logging.getLogger(__name__)

INFO_FIELD_NAMES: dict[str, str] = {
    "INAM": "title",
    "IART": "artist",
    "IPRD": "album",
    "ITRK": "track",
    "ICMT": "comment",
    "ICRD": "date",
    "IGNR": "genre",
    "ICOP": "copyright",
    "IENG": "engineer",
    "ITCH": "technician",
    "IKEY": "keywords",
    "ISBJ": "subject",
    "ISRC": "source",
    "ISFT": "software",
}


def parse_info(
    cursor: ByteCursor,
    end: int,
    metadata: MetadataMap | None = None,
    encoding: str = "utf-8",
) -> MetadataMap:
    """Read INFO sub-chunks from the cursor position up to absolute offset `end`.

    Values for repeated identifiers are appended in encounter order. Returns
    the same mapping that was passed in, or a new one.
    """
    result: MetadataMap = {} if metadata is None else metadata
    end = min(end, cursor.length)
    while end - cursor.position >= 4:
        field_id = cursor.read_fourcc()
        if field_id is None or end - cursor.position < 4:
            break
        try:
            declared = cursor.read_u32()
        except TruncatedStreamError:
            break
        size = min(declared, max(end - cursor.position, 0))
        if size < declared:
            logger.debug("INFO field %s truncated from %d to %d bytes", field_id, declared, size)
        value = _decode_text(cursor.read_exact(size), encoding)
        result.setdefault(field_id, []).append(value)
    return result


def describe_info(metadata: MetadataMap) -> dict[str, list[str]]:
    """Key the mapping by readable names where the identifier is a known one."""
    described: dict[str, list[str]] = {}
    for field_id, values in metadata.items():
        name = INFO_FIELD_NAMES.get(field_id, field_id)
        described.setdefault(name, []).extend(values)
    return described


def _decode_text(raw: bytes, encoding: str) -> str:
    text = raw.decode(encoding, errors="replace")
    nul = text.find("\x00")
    if nul != -1:
        text = text[:nul]
    return text.strip()
