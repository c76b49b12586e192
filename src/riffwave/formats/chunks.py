"""Parsers for the fixed-size RIFF header and the fmt/data chunk descriptors.

Each parser consumes exactly the bytes it owns from the shared cursor. Bytes
are read before validation, so the cursor has advanced even when a tag check
fails. Tags are compared as raw bytes in file order; integer fields are
little-endian.
"""

import struct

from riffwave.core.constants import (
    DATA_DESCRIPTOR_SIZE,
    DATA_ID,
    FMT_CHUNK_SIZE,
    FMT_ID,
    HEADER_SIZE,
    RIFF_ID,
    WAVE_ID,
)
from riffwave.core.cursor import ByteCursor
from riffwave.core.exceptions import (
    InvalidContainerTag,
    InvalidDataTag,
    InvalidFmtTag,
    InvalidFormatTag,
)
from riffwave.core.models import ContainerHeader, DataChunkDescriptor, FormatChunk

# tag(4), size(4), tag(4)
_HEADER = struct.Struct("<4sI4s")
# tag(4), size(4), audio_format(2), channels(2), sample_rate(4),
# byte_rate(4), block_align(2), bits_per_sample(2)
_FMT = struct.Struct("<4sIHHIIHH")
# tag(4), size(4)
_DATA = struct.Struct("<4sI")


class ContainerHeaderParser:
    """Reads and validates the 12-byte RIFF/WAVE header."""

    size = HEADER_SIZE

    def parse(self, cursor: ByteCursor) -> ContainerHeader:
        """
        Read the RIFF header and check both of its tags.

        Args:
            cursor: Cursor positioned at the start of the stream.

        Returns:
            ContainerHeader with the declared RIFF size.

        Raises:
            SourceReadFailure: If 12 bytes cannot be read.
            InvalidContainerTag: If the leading tag is not "RIFF".
            InvalidFormatTag: If the form type is not "WAVE".
        """
        buf = cursor.read_exact(self.size, "RIFF header")
        chunk_id, declared_size, format_tag = _HEADER.unpack(buf)
        if chunk_id != RIFF_ID:
            raise InvalidContainerTag(RIFF_ID, chunk_id)
        # TODO: compare declared_size with the bytes actually available
        if format_tag != WAVE_ID:
            raise InvalidFormatTag(WAVE_ID, format_tag)
        return ContainerHeader(
            chunk_id=chunk_id,
            declared_size=declared_size,
            format_tag=format_tag,
        )


class FormatChunkParser:
    """Reads the 24-byte fmt sub-chunk.

    Fields are taken as declared: byte_rate, block_align and the other
    derived values are not checked against each other.
    """

    size = FMT_CHUNK_SIZE

    def parse(self, cursor: ByteCursor) -> FormatChunk:
        """
        Read the fmt chunk.

        Args:
            cursor: Cursor positioned right after the RIFF header.

        Returns:
            FormatChunk with every field as declared.

        Raises:
            SourceReadFailure: If 24 bytes cannot be read.
            InvalidFmtTag: If the chunk tag is not "fmt ".
        """
        buf = cursor.read_exact(self.size, "fmt chunk")
        (
            chunk_id,
            chunk_size,
            audio_format,
            channel_count,
            sample_rate,
            byte_rate,
            block_align,
            bits_per_sample,
        ) = _FMT.unpack(buf)
        if chunk_id != FMT_ID:
            raise InvalidFmtTag(FMT_ID, chunk_id)
        return FormatChunk(
            chunk_id=chunk_id,
            chunk_size=chunk_size,
            audio_format=audio_format,
            channel_count=channel_count,
            sample_rate=sample_rate,
            byte_rate=byte_rate,
            block_align=block_align,
            bits_per_sample=bits_per_sample,
        )


class DataChunkParser:
    """Reads the 8-byte data chunk descriptor, leaving the payload unread."""

    size = DATA_DESCRIPTOR_SIZE

    def parse(self, cursor: ByteCursor) -> DataChunkDescriptor:
        """
        Read the data chunk tag and size.

        Args:
            cursor: Cursor positioned right after the fmt chunk.

        Returns:
            DataChunkDescriptor holding the cursor, now at the first payload byte.

        Raises:
            SourceReadFailure: If 8 bytes cannot be read.
            InvalidDataTag: If the chunk tag is not "data".
        """
        buf = cursor.read_exact(self.size, "data chunk header")
        chunk_id, declared_size = _DATA.unpack(buf)
        if chunk_id != DATA_ID:
            raise InvalidDataTag(DATA_ID, chunk_id)
        return DataChunkDescriptor(
            chunk_id=chunk_id,
            declared_size=declared_size,
            cursor=cursor,
            payload_offset=cursor.position,
        )
