"""RIFF WAV container and file loader."""

from pathlib import Path
from typing import Optional

from riffwave.core.constants import HEADER_SIZE, RIFF_ID, WAVE_ID
from riffwave.core.cursor import ByteCursor
from riffwave.core.interfaces import IAudioFormat, IByteSource
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
from riffwave.utils.log import get_logger

logger = get_logger(__name__)


class WaveContainer:
    """
    A parsed RIFF/WAVE stream.

    Instances come from WaveContainer.parse, which either returns a container
    holding all three chunk descriptors or raises. Samples are decoded once
    with decode_samples and kept on the container.
    """

    def __init__(
        self,
        header: ContainerHeader,
        fmt: FormatChunk,
        data: DataChunkDescriptor,
    ):
        self._header = header
        self._fmt = fmt
        self._data = data
        self._audio: Optional[DecodedAudio] = None

    @classmethod
    def parse(cls, source) -> "WaveContainer":
        """
        Parse the header, fmt chunk and data chunk descriptor in order.

        Args:
            source: ByteCursor or any object with read(size) -> bytes,
                positioned at the start of the RIFF header.

        Returns:
            WaveContainer whose data descriptor points at the unread payload.

        Raises:
            SourceReadFailure: If a fixed-size structure cannot be read.
            InvalidContainerTag, InvalidFormatTag, InvalidFmtTag, InvalidDataTag:
                If a tag does not match.
        """
        cursor = ByteCursor.wrap(source)
        header = ContainerHeaderParser().parse(cursor)
        fmt = FormatChunkParser().parse(cursor)
        data = DataChunkParser().parse(cursor)
        return cls(header, fmt, data)

    def decode_samples(self, source: Optional[IByteSource] = None) -> DecodedAudio:
        """
        Decode the sample payload into per-channel lists.

        Reads from the cursor captured by parse unless source is given. A
        second call returns the stored result without reading.

        Raises:
            UnsupportedBitDepth: If bits_per_sample is not 8, 16 or 32.
            InvalidChannelCount: If the fmt chunk declares no channels.
            SampleReadFailure: On an I/O error or partial sample, or when the
                captured source was closed (e.g. after a metadata-only load).
        """
        if self._audio is not None:
            return self._audio

        cursor = self._data.cursor if source is None else ByteCursor.wrap(source)
        self._audio = PcmDeinterleaver().decode(
            cursor,
            channel_count=self._fmt.channel_count,
            bits_per_sample=self._fmt.bits_per_sample,
            declared_size=self._data.declared_size,
        )
        return self._audio

    @property
    def header(self) -> ContainerHeader:
        return self._header

    @property
    def fmt(self) -> FormatChunk:
        return self._fmt

    @property
    def data(self) -> DataChunkDescriptor:
        return self._data

    @property
    def audio(self) -> Optional[DecodedAudio]:
        """Decoded samples, or None before decode_samples."""
        return self._audio

    @property
    def sample_rate(self) -> int:
        return self._fmt.sample_rate

    @property
    def channel_count(self) -> int:
        return self._fmt.channel_count

    @property
    def bits_per_sample(self) -> int:
        return self._fmt.bits_per_sample

    @property
    def duration_seconds(self) -> float:
        """Duration from the decoded sample count, or estimated from byte_rate."""
        if self._audio is not None:
            if self._fmt.sample_rate == 0:
                return 0.0
            return self._audio.sample_count_per_channel / self._fmt.sample_rate
        if self._fmt.byte_rate == 0:
            return 0.0
        return self._data.declared_size / self._fmt.byte_rate

    def __repr__(self) -> str:
        return (
            f"WaveContainer(channels={self._fmt.channel_count}, "
            f"sample_rate={self._fmt.sample_rate}, "
            f"bits_per_sample={self._fmt.bits_per_sample}, "
            f"data_size={self._data.declared_size}, "
            f"decoded={self._audio is not None})"
        )


def read_wave(source) -> WaveContainer:
    """Parse a stream and decode its samples in one call."""
    container = WaveContainer.parse(source)
    container.decode_samples()
    return container


class WavFormat(IAudioFormat):
    """WAV file loader implementing IAudioFormat."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """Supported file extensions."""
        return (".wav", ".wave")

    def can_load(self, path: str) -> bool:
        """Check if file can be loaded as WAV."""
        path_obj = Path(path)
        if not path_obj.is_file():
            return False

        # Check extension
        if path_obj.suffix.lower() not in self.extensions:
            return False

        # Check file header (RIFF ... WAVE)
        try:
            with open(path_obj, "rb") as f:
                header = f.read(HEADER_SIZE)
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return False
        return header[:4] == RIFF_ID and header[8:12] == WAVE_ID

    def load(self, path: str, options: Optional[LoadOptions] = None) -> WaveContainer:
        """
        Load a WAV file.

        The file is opened and closed here; parse errors propagate after the
        file has been closed.

        Args:
            path: Path to WAV file.
            options: Loader options, defaults to LoadOptions().

        Returns:
            WaveContainer with parsed chunks and, unless
            options.decode_samples is False, decoded samples.

        Raises:
            WaveError: If the file cannot be parsed or decoded.
            FileNotFoundError: If file does not exist.
        """
        options = options or LoadOptions()
        path_obj = Path(path)
        if not path_obj.exists():
            raise FileNotFoundError(f"WAV file not found: {path}")

        logger.debug(f"Opening {path_obj}")
        with open(path_obj, "rb") as f:
            container = WaveContainer.parse(f)
            if options.decode_samples:
                container.decode_samples()

        logger.info(
            f"Loaded WAV: {container.channel_count}ch, {container.sample_rate}Hz, "
            f"{container.bits_per_sample}bit, {container.duration_seconds:.2f}s"
        )
        return container


def load_wav(path: str, options: Optional[LoadOptions] = None) -> WaveContainer:
    """Load a WAV file from disk."""
    return wav_format.load(path, options)


# Shared loader instance
wav_format = WavFormat()
