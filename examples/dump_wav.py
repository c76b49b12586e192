"""Example: Print the chunk headers and first samples of a WAV file."""

import sys
from pathlib import Path

from riffwave import WaveError, load_wav

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python dump_wav.py <path_to_wav_file> [sample_count]")
        sys.exit(1)

    wav_path = sys.argv[1]
    count = int(sys.argv[2]) if len(sys.argv) > 2 else 100
    if not Path(wav_path).exists():
        print(f"Error: File not found: {wav_path}")
        sys.exit(1)

    try:
        container = load_wav(wav_path)
    except WaveError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(container.header)
    print(container.fmt)
    print(f"data: {container.data.declared_size} bytes at offset {container.data.payload_offset}")
    print(f"Duration: {container.duration_seconds:.2f} seconds")

    print(f"Channel 0: {container.audio.channel(0)[:count]}")
