"""FourCC tags and fixed chunk sizes of the RIFF/WAVE layout."""

# FourCC identifiers, compared as raw bytes in file order
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# Bytes consumed by each fixed-size parser
HEADER_SIZE = 12
FMT_CHUNK_SIZE = 24
DATA_DESCRIPTOR_SIZE = 8

WAVE_FORMAT_PCM = 1

SUPPORTED_BIT_DEPTHS = (8, 16, 32)
