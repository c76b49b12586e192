"""Validation utilities."""

from riffwave.core.constants import SUPPORTED_BIT_DEPTHS
from riffwave.core.exceptions import InvalidChannelCount, UnsupportedBitDepth


def validate_bit_depth(bits_per_sample: int) -> int:
    """Return the sample width in bytes for a supported bit depth."""
    if bits_per_sample not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedBitDepth(bits_per_sample)
    return bits_per_sample // 8


def validate_channel_count(channel_count: int) -> int:
    """Reject a channel count below one."""
    if channel_count < 1:
        raise InvalidChannelCount(channel_count)
    return channel_count
