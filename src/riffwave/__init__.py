"""
riffwave - RIFF/WAVE PCM decoder.

This package parses the RIFF header, fmt and data chunks of a WAVE stream
and splits the interleaved 8, 16 or 32-bit PCM payload into per-channel
lists of signed integer samples.
"""

from riffwave.core.constants import DATA_ID, FMT_ID, RIFF_ID, WAVE_ID
from riffwave.core.cursor import ByteCursor
from riffwave.core.exceptions import (
    AudioFormatError,
    InvalidChannelCount,
    InvalidContainerTag,
    InvalidDataTag,
    InvalidFmtTag,
    InvalidFormatTag,
    SampleReadFailure,
    SourceReadFailure,
    UnsupportedBitDepth,
    WaveError,
)
from riffwave.core.models import (
    ContainerHeader,
    DataChunkDescriptor,
    DecodedAudio,
    FormatChunk,
    LoadOptions,
)
from riffwave.formats.chunks import (
    ContainerHeaderParser,
    DataChunkParser,
    FormatChunkParser,
)
from riffwave.formats.pcm import PcmDeinterleaver
from riffwave.formats.wav import WaveContainer, load_wav, read_wave

__version__ = "0.1.0"

__all__ = [
    "ByteCursor",
    "ContainerHeader",
    "ContainerHeaderParser",
    "DATA_ID",
    "DataChunkDescriptor",
    "DataChunkParser",
    "DecodedAudio",
    "FMT_ID",
    "FormatChunk",
    "FormatChunkParser",
    "LoadOptions",
    "PcmDeinterleaver",
    "RIFF_ID",
    "WAVE_ID",
    "WaveContainer",
    "load_wav",
    "read_wave",
    "AudioFormatError",
    "InvalidChannelCount",
    "InvalidContainerTag",
    "InvalidDataTag",
    "InvalidFmtTag",
    "InvalidFormatTag",
    "SampleReadFailure",
    "SourceReadFailure",
    "UnsupportedBitDepth",
    "WaveError",
]
