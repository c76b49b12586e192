"""RIFF/WAVE chunk parsers, PCM decoding and the WAV file loader."""
