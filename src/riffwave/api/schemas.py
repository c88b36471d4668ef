"""FastAPI response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FormatExtensionModel(BaseModel):
    extra_size: int
    valid_bits_per_sample: int
    channel_mask: int
    sub_format: str


class AudioFormatModel(BaseModel):
    format_tag: int
    effective_tag: int
    channel_count: int
    sample_rate: int
    avg_bytes_per_sec: int
    block_align: int
    bits_per_sample: int
    extension: FormatExtensionModel | None = None


class DataSpanModel(BaseModel):
    offset: int
    size: int


class ChannelSummary(BaseModel):
    channel: int
    peak: float = Field(ge=0.0)
    rms: float = Field(ge=0.0)


class WavInspectResponse(BaseModel):
    audio_format: AudioFormatModel
    metadata: dict[str, list[str]]
    data: DataSpanModel
    frame_count: int
    duration_sec: float
    chunk_ids: list[str]
    warnings: list[str]
    decoded: bool = False
    channels: list[ChannelSummary] = Field(default_factory=list)
