"""Typed failures raised while reading RIFF/WAVE containers."""

from __future__ import annotations


class RiffWaveError(ValueError):
    """Base class for all reader failures."""


class FormatError(RiffWaveError):
    """Raised when the container structure cannot be used for decoding."""


class UnsupportedFormatError(RiffWaveError):
    """Raised when the sample encoding has no decode path."""


class TruncatedStreamError(RiffWaveError):
    """Raised by the cursor when fewer bytes remain than were requested."""
