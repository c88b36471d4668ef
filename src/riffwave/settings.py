"""Reader configuration sourced from the environment."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class ReaderSettings:
    strict_format: bool = False
    info_encoding: str = "utf-8"

    @staticmethod
    def from_env() -> ReaderSettings:
        strict_raw = os.getenv("RIFFWAVE_STRICT_FORMAT", "").strip().lower()
        strict_format = strict_raw in _TRUTHY
        encoding = os.getenv("RIFFWAVE_INFO_ENCODING", "utf-8").strip() or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            encoding = "utf-8"
        return ReaderSettings(strict_format=strict_format, info_encoding=encoding)
