"""RIFF/WAVE reader: chunk walking, INFO metadata and PCM sample decode."""

from riffwave.chunks import read_riff_header, walk_chunks
from riffwave.cursor import ByteCursor
from riffwave.decoder import SAMPLE_CODECS, decode_samples, frame_count
from riffwave.document import WavDocument, read_wav
from riffwave.errors import FormatError, RiffWaveError, TruncatedStreamError, UnsupportedFormatError
from riffwave.files import FileBytesQuery, iter_wav_documents
from riffwave.fmt import parse_format
from riffwave.info import describe_info, parse_info
from riffwave.models import AudioFormat, DataSpan, FormatExtension, HeaderScan
from riffwave.settings import ReaderSettings

__all__ = [
    "AudioFormat",
    "ByteCursor",
    "DataSpan",
    "FileBytesQuery",
    "FormatError",
    "FormatExtension",
    "HeaderScan",
    "ReaderSettings",
    "RiffWaveError",
    "SAMPLE_CODECS",
    "TruncatedStreamError",
    "UnsupportedFormatError",
    "WavDocument",
    "decode_samples",
    "describe_info",
    "frame_count",
    "iter_wav_documents",
    "parse_format",
    "parse_info",
    "read_riff_header",
    "read_wav",
    "walk_chunks",
]
