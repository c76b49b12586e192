"""Data models and configuration classes."""

from dataclasses import dataclass, field
from typing import Iterator

from riffwave.core.constants import WAVE_FORMAT_PCM
from riffwave.core.cursor import ByteCursor


@dataclass(frozen=True)
class ContainerHeader:
    """Top-level RIFF/WAVE header."""

    chunk_id: bytes
    """Leading tag, always b"RIFF"."""

    declared_size: int
    """Byte count of everything after the size field (informational)."""

    format_tag: bytes
    """Trailing tag, always b"WAVE"."""


@dataclass(frozen=True)
class FormatChunk:
    """The fmt sub-chunk describing sample geometry."""

    chunk_id: bytes
    chunk_size: int
    audio_format: int
    channel_count: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int

    @property
    def bytes_per_sample(self) -> int:
        """Bytes per sample."""
        return self.bits_per_sample // 8

    @property
    def frame_size(self) -> int:
        """Frame size in bytes, computed from channels and bit depth."""
        return self.channel_count * self.bytes_per_sample

    @property
    def is_pcm(self) -> bool:
        return self.audio_format == WAVE_FORMAT_PCM


@dataclass(frozen=True)
class DataChunkDescriptor:
    """The data sub-chunk descriptor and a handle on its unread payload."""

    chunk_id: bytes
    declared_size: int
    cursor: ByteCursor = field(repr=False, compare=False)
    """Borrowed cursor positioned at the first payload byte when parsed."""

    payload_offset: int = 0
    """Absolute stream offset of the first payload byte."""


@dataclass(frozen=True)
class DecodedAudio:
    """Per-channel signed integer samples."""

    channel_count: int
    sample_count_per_channel: int
    bits_per_sample: int
    channels: list[list[int]]
    """One list per channel, channel 0 first."""

    def channel(self, index: int) -> list[int]:
        """Samples of a single channel."""
        return self.channels[index]

    def frames(self) -> Iterator[tuple[int, ...]]:
        """Iterate sample instants as tuples ordered by channel."""
        return zip(*self.channels)

    @property
    def sample_range(self) -> tuple[int, int]:
        """Smallest and largest value representable at this bit depth."""
        limit = 1 << (self.bits_per_sample - 1)
        return -limit, limit - 1


@dataclass
class LoadOptions:
    """Options for the file loader."""

    decode_samples: bool = True
    """Decode the PCM payload. When False only the chunk headers are parsed."""
