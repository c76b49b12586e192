"""Protocol interfaces for byte sources and file formats."""

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from riffwave.core.models import LoadOptions
    from riffwave.formats.wav import WaveContainer


class IByteSource(Protocol):
    """Interface for a sequential, forward-only byte source."""

    def read(self, size: int) -> bytes:
        """
        Read up to size bytes.

        Returns:
            The bytes read. An empty result signals end of stream.

        Raises:
            OSError: If the underlying source fails.
        """
        ...


class IAudioFormat(Protocol):
    """Interface for audio file loaders."""

    @property
    def extensions(self) -> tuple[str, ...]:
        """
        File extensions supported by this format (e.g., ('.wav', '.wave')).

        Returns:
            Tuple of supported file extensions (lowercase, with dot).
        """
        ...

    def can_load(self, path: str) -> bool:
        """
        Check if this format can load the given file.

        Args:
            path: Path to audio file.

        Returns:
            True if this format can load the file, False otherwise.
        """
        ...

    def load(self, path: str, options: Optional["LoadOptions"] = None) -> "WaveContainer":
        """
        Load an audio file and return the parsed container.

        Args:
            path: Path to audio file.
            options: Loader options, defaults to LoadOptions().

        Returns:
            WaveContainer with parsed metadata and, unless disabled, decoded samples.

        Raises:
            WaveError: If the file cannot be parsed or decoded.
            FileNotFoundError: If file does not exist.
        """
        ...
