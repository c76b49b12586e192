"""Forward-only reader over a byte source."""

from riffwave.core.exceptions import SourceReadFailure
from riffwave.core.interfaces import IByteSource


class ByteCursor:
    """
    Sequential reader shared by every parse stage.

    The cursor never seeks and never closes the wrapped source; opening and
    closing it is the caller's job.
    """

    def __init__(self, source: IByteSource):
        self._source = source
        self._position = 0
        self._exhausted = False

    @classmethod
    def wrap(cls, source) -> "ByteCursor":
        """Return source itself if it is already a cursor, else a new cursor over it."""
        if isinstance(source, cls):
            return source
        return cls(source)

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    @property
    def exhausted(self) -> bool:
        """True once a read has returned no bytes."""
        return self._exhausted

    def read(self, size: int) -> bytes:
        """
        Read up to size bytes with a single call to the source.

        A short result is returned as-is; an empty result means end of stream.
        OSError from the source propagates unchanged.
        """
        data = self._source.read(size)
        if not data:
            self._exhausted = True
        self._position += len(data)
        return bytes(data)

    def read_exact(self, size: int, what: str) -> bytes:
        """
        Read exactly size bytes for a fixed-size structure.

        Raises:
            SourceReadFailure: If the source fails or returns fewer bytes.
        """
        start = self._position
        try:
            data = self.read(size)
        except (OSError, ValueError) as e:
            raise SourceReadFailure(f"cannot read {what}: {e}", start) from e
        if len(data) < size:
            raise SourceReadFailure(
                f"unexpected end of stream reading {what} "
                f"({len(data)} of {size} bytes)",
                start,
            )
        return data

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, exhausted={self._exhausted})"
