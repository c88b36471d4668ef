"""Directory query that hands out whole files as byte buffers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from riffwave.document import WavDocument
from riffwave.settings import ReaderSettings

logger = logging.getLogger(__name__)


class FileQueryError(RuntimeError):
    """Raised when a file query cannot be opened or is used before opening."""


def parse_query_param(param: str) -> dict[str, str]:
    """Parse `key=value;key=value` parameter strings."""
    values: dict[str, str] = {}
    for item in param.split(";"):
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        key = key.strip()
        if key:
            values[key] = value.strip()
    return values


class FileBytesQuery:
    """Iterate the files of one directory, one whole-file buffer at a time."""

    name = "StdTextFileQuery"
    field_count = 1

    def __init__(self, path: str | Path | None = None, suffix: str = ".txt") -> None:
        self._path = Path(path) if path is not None else None
        self._suffix = suffix.lower()
        self._files: list[Path] | None = None
        self._index = 0

    @classmethod
    def from_param(cls, param: str | None) -> FileBytesQuery:
        values = parse_query_param(param or "")
        suffix = values.get("Extension", ".txt")
        if not suffix.startswith("."):
            suffix = "." + suffix
        return cls(values.get("FilePath"), suffix=suffix)

    def clone(self, param: str | None = None) -> FileBytesQuery:
        if param is not None:
            return FileBytesQuery.from_param(param)
        return FileBytesQuery(self._path, suffix=self._suffix)

    @property
    def path(self) -> Path | None:
        return self._path

    def open(self) -> None:
        if self._path is None:
            raise FileQueryError("FilePath is not configured")
        if not self._path.is_dir():
            raise FileNotFoundError(str(self._path))
        self._files = sorted(
            item for item in self._path.iterdir() if item.is_file() and item.suffix.lower() == self._suffix
        )
        self._index = 0
        if not self._files:
            raise FileQueryError(f"no '*{self._suffix}' files found in {self._path}")
        logger.debug("file query opened %s with %d files", self._path, len(self._files))

    def close(self) -> None:
        self._files = None
        self._index = 0

    def reset(self) -> None:
        self._index = 0

    def query_bytes(self) -> bytes | None:
        files = self._require_open()
        if self._index >= len(files):
            return None
        data = files[self._index].read_bytes()
        self._index += 1
        return data

    def get_query_size(self) -> int:
        """Size in bytes of the next file, or 0 once every file has been returned."""
        files = self._require_open()
        if self._index >= len(files):
            return 0
        return files[self._index].stat().st_size

    def _require_open(self) -> list[Path]:
        if self._files is None:
            raise FileQueryError("query is not open")
        return self._files


def iter_wav_documents(
    query: FileBytesQuery,
    header_only: bool = False,
    settings: ReaderSettings | None = None,
) -> Iterator[WavDocument]:
    """Read every remaining buffer of an open query as an independent WAVE document."""
    while True:
        data = query.query_bytes()
        if data is None:
            return
        yield WavDocument.from_bytes(data, settings).read_to_end(header_only=header_only)
