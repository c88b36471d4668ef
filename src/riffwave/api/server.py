"""Inspection endpoints for uploaded WAVE containers."""

from __future__ import annotations

import math

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from riffwave.api.schemas import (
    AudioFormatModel,
    ChannelSummary,
    DataSpanModel,
    FormatExtensionModel,
    WavInspectResponse,
)
from riffwave.document import WavDocument
from riffwave.errors import RiffWaveError
from riffwave.models import AudioFormat, SampleBuffer
from riffwave.settings import ReaderSettings


def create_app(settings: ReaderSettings | None = None) -> FastAPI:
    app = FastAPI(title="riffwave API", version="0.1.0")
    reader_settings = settings or ReaderSettings.from_env()

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "riffwave API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.post("/v1/wav/inspect", response_model=WavInspectResponse)
    async def inspect_wav(request: Request, decode: bool = False) -> WavInspectResponse:
        body = await request.body()
        if not body:
            raise HTTPException(status_code=400, detail="request body is empty")

        document = WavDocument.from_bytes(body, reader_settings)
        try:
            return await run_in_threadpool(_inspect, document, decode)
        except RiffWaveError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app


def _inspect(document: WavDocument, decode: bool) -> WavInspectResponse:
    document.read_to_end(header_only=not decode)
    span = document.data_span
    if span is None:
        raise HTTPException(status_code=400, detail="no data chunk found")
    samples = document.samples
    return WavInspectResponse(
        audio_format=_format_model(document.audio_format),
        metadata=document.metadata,
        data=DataSpanModel(offset=span.offset, size=span.size),
        frame_count=document.frame_count,
        duration_sec=document.duration_sec,
        chunk_ids=document.chunk_ids,
        warnings=document.warnings,
        decoded=samples is not None,
        channels=_summarize(samples) if samples is not None else [],
    )



def _format_model(audio_format: AudioFormat) -> AudioFormatModel:
    extension = None
    if audio_format.extension is not None:
        extension = FormatExtensionModel(
            extra_size=audio_format.extension.extra_size,
            valid_bits_per_sample=audio_format.extension.valid_bits_per_sample,
            channel_mask=audio_format.extension.channel_mask,
            sub_format=str(audio_format.extension.sub_format),
        )
    return AudioFormatModel(
        format_tag=audio_format.format_tag,
        effective_tag=audio_format.effective_tag,
        channel_count=audio_format.channel_count,
        sample_rate=audio_format.sample_rate,
        avg_bytes_per_sec=audio_format.avg_bytes_per_sec,
        block_align=audio_format.block_align,
        bits_per_sample=audio_format.bits_per_sample,
        extension=extension,
    )


def _summarize(samples: SampleBuffer) -> list[ChannelSummary]:
    summaries: list[ChannelSummary] = []
    for index, channel in enumerate(samples):
        if not channel:
            summaries.append(ChannelSummary(channel=index, peak=0.0, rms=0.0))
            continue
        peak = max(abs(value) for value in channel)
        rms = math.sqrt(sum(value * value for value in channel) / len(channel))
        summaries.append(ChannelSummary(channel=index, peak=peak, rms=rms))
    return summaries


app = create_app()
