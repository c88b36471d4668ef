"""Value types produced by a RIFF/WAVE header scan and sample decode."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

WAVE_FORMAT_PCM = 0x0001
WAVE_FORMAT_EXTENSIBLE = 0xFFFE

MetadataMap = dict[str, list[str]]
SampleBuffer = list[list[float]]


@dataclass(slots=True, frozen=True)
class FormatExtension:
    extra_size: int
    valid_bits_per_sample: int
    channel_mask: int
    sub_format: UUID


@dataclass(slots=True, frozen=True)
class AudioFormat:
    format_tag: int = 0
    channel_count: int = 0
    sample_rate: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    extension: FormatExtension | None = None

    @property
    def bytes_per_sample(self) -> int:
        return (self.bits_per_sample + 7) // 8

    @property
    def effective_tag(self) -> int:
        # Extensible formats carry the real codec tag in the first two GUID bytes.
        if self.format_tag == WAVE_FORMAT_EXTENSIBLE and self.extension is not None:
            return int.from_bytes(self.extension.sub_format.bytes_le[:2], "little")
        return self.format_tag

    @property
    def is_pcm(self) -> bool:
        return self.effective_tag == WAVE_FORMAT_PCM


@dataclass(slots=True, frozen=True)
class DataSpan:
    offset: int
    size: int


@dataclass(slots=True)
class HeaderScan:
    audio_format: AudioFormat = field(default_factory=AudioFormat)
    metadata: MetadataMap = field(default_factory=dict)
    data_span: DataSpan | None = None
    riff_size: int = 0
    chunk_ids: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
