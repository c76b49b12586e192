"""In-memory WAV stream builders shared by the tests."""

import io
import struct


def pack_samples(samples: list[int], bits_per_sample: int) -> bytes:
    """Pack interleaved signed samples little-endian."""
    code = {8: "b", 16: "h", 32: "i"}[bits_per_sample]
    return struct.pack(f"<{len(samples)}{code}", *samples)


def create_test_wav(
    sample_rate: int = 44100,
    channels: int = 2,
    bits_per_sample: int = 16,
    num_samples: int = 1000,
    payload: bytes = None,
    data_size: int = None,
    riff_tag: bytes = b"RIFF",
    wave_tag: bytes = b"WAVE",
    fmt_tag: bytes = b"fmt ",
    data_tag: bytes = b"data",
) -> bytes:
    """Create a test WAV file in memory.

    payload defaults to num_samples zero frames. data_size defaults to the
    payload length and may be set independently to declare more or fewer
    bytes than are present.
    """
    block_align = (channels * bits_per_sample) // 8
    byte_rate = sample_rate * block_align
    if payload is None:
        payload = b"\x00" * (num_samples * block_align)
    if data_size is None:
        data_size = len(payload)
    file_size = 36 + data_size  # 36 = WAVE tag + fmt chunk + data header

    wav = io.BytesIO()

    # RIFF header
    wav.write(riff_tag)
    wav.write(struct.pack("<I", file_size))
    wav.write(wave_tag)

    # fmt chunk
    wav.write(fmt_tag)
    wav.write(struct.pack("<I", 16))  # fmt chunk size
    wav.write(struct.pack("<H", 1))  # PCM
    wav.write(struct.pack("<H", channels))
    wav.write(struct.pack("<I", sample_rate))
    wav.write(struct.pack("<I", byte_rate))
    wav.write(struct.pack("<H", block_align))
    wav.write(struct.pack("<H", bits_per_sample))

    # data chunk
    wav.write(data_tag)
    wav.write(struct.pack("<I", data_size))
    wav.write(payload)

    return wav.getvalue()


class FailingReader:
    """Byte source that serves data, then raises OSError once it is used up."""

    def __init__(self, data: bytes):
        self._buf = io.BytesIO(data)
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        chunk = self._buf.read(size)
        if not chunk:
            raise OSError("device not ready")
        return chunk


class RecordingReader:
    """BytesIO wrapper that records how many bytes were requested."""

    def __init__(self, data: bytes):
        self._buf = io.BytesIO(data)
        self.consumed = 0

    def read(self, size: int) -> bytes:
        chunk = self._buf.read(size)
        self.consumed += len(chunk)
        return chunk
