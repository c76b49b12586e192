"""Interleaved PCM payload decoding."""

import struct

from riffwave.core.cursor import ByteCursor
from riffwave.core.exceptions import SampleReadFailure
from riffwave.core.models import DecodedAudio
from riffwave.utils.validate import validate_bit_depth, validate_channel_count

# Signed little-endian sample codecs keyed by bit depth
_SAMPLE_CODECS = {
    8: struct.Struct("<b"),
    16: struct.Struct("<h"),
    32: struct.Struct("<i"),
}


class PcmDeinterleaver:
    """Splits an interleaved PCM payload into one sample list per channel."""

    def decode(
        self,
        cursor: ByteCursor,
        channel_count: int,
        bits_per_sample: int,
        declared_size: int,
    ) -> DecodedAudio:
        """
        Decode the payload that follows the data chunk descriptor.

        Samples are read one at a time, channel 0 first within each sample
        instant. The sample count per channel is truncated, so a trailing
        partial frame is left unread.

        A read that returns nothing means the source ended on a sample
        boundary; the remaining slots stay zero and decoding completes. A read
        that returns part of a sample, or an I/O error, is a failure.

        Args:
            cursor: Cursor positioned at the first payload byte.
            channel_count: Channels declared in the fmt chunk.
            bits_per_sample: 8, 16 or 32.
            declared_size: Payload size declared in the data chunk.

        Returns:
            DecodedAudio with raw signed sample values.

        Raises:
            UnsupportedBitDepth: If bits_per_sample is not 8, 16 or 32.
            InvalidChannelCount: If channel_count is below one.
            SampleReadFailure: On an I/O error, a closed source or a partial sample.
        """
        sample_width = validate_bit_depth(bits_per_sample)
        validate_channel_count(channel_count)
        codec = _SAMPLE_CODECS[bits_per_sample]

        sample_count = declared_size // channel_count // sample_width
        channels = [[0] * sample_count for _ in range(channel_count)]

        for sample_index in range(sample_count):
            for channel_index in range(channel_count):
                position = cursor.position
                try:
                    raw = cursor.read(sample_width)
                except (OSError, ValueError) as e:
                    # ValueError: the source was closed before decoding
                    raise SampleReadFailure(str(e), position) from e

                if len(raw) == sample_width:
                    channels[channel_index][sample_index] = codec.unpack(raw)[0]
                elif raw:
                    raise SampleReadFailure(
                        f"partial sample ({len(raw)} of {sample_width} bytes) "
                        f"for channel {channel_index}, sample {sample_index}",
                        position,
                    )
                # else: clean end of stream, slot stays zero

        return DecodedAudio(
            channel_count=channel_count,
            sample_count_per_channel=sample_count,
            bits_per_sample=bits_per_sample,
            channels=channels,
        )
