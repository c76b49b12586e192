"""Exception classes for riffwave."""

from typing import Optional


def tag_to_str(tag: bytes) -> str:
    """Render a FourCC tag for error messages."""
    return repr(bytes(tag))


class WaveError(Exception):
    """Base exception for RIFF/WAVE decoding errors."""
    pass


class SourceReadFailure(WaveError):
    """Raised when a fixed-size header or chunk descriptor cannot be read."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"Source read failed at byte {position}: {message}")
        else:
            super().__init__(f"Source read failed: {message}")


class SampleReadFailure(WaveError):
    """Raised on an I/O error or a partial sample while decoding the payload."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"Sample read failed at byte {position}: {message}")
        else:
            super().__init__(f"Sample read failed: {message}")


class AudioFormatError(WaveError):
    """Raised when the stream is not a decodable RIFF/WAVE PCM file."""
    pass


class _TagMismatch(AudioFormatError):
    """Common base for FourCC tag mismatches."""

    description = "chunk"

    def __init__(self, expected: bytes, actual: bytes):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Not a valid {self.description}: expected tag {tag_to_str(expected)}, "
            f"got {tag_to_str(actual)}"
        )


class InvalidContainerTag(_TagMismatch):
    """Raised when the leading header tag is not "RIFF"."""

    description = "RIFF file"


class InvalidFormatTag(_TagMismatch):
    """Raised when the trailing header tag is not "WAVE"."""

    description = "WAVE file"


class InvalidFmtTag(_TagMismatch):
    """Raised when the format sub-chunk tag is not "fmt "."""

    description = "fmt chunk"


class InvalidDataTag(_TagMismatch):
    """Raised when the data sub-chunk tag is not "data"."""

    description = "data chunk"


class UnsupportedBitDepth(AudioFormatError):
    """Raised when bits_per_sample is not 8, 16 or 32."""

    def __init__(self, bits_per_sample: int):
        self.bits_per_sample = bits_per_sample
        super().__init__(
            f"Unsupported bits per sample: {bits_per_sample} (only 8, 16 or 32 are supported)"
        )


class InvalidChannelCount(AudioFormatError):
    """Raised when the format chunk declares no channels."""

    def __init__(self, channel_count: int):
        self.channel_count = channel_count
        super().__init__(f"Invalid channel count: {channel_count} (at least 1 is required)")

