"""Fixed audio format and timing constants."""

from __future__ import annotations

# PCM container format
SAMPLE_RATE = 44100
BITS_PER_SAMPLE = 16
NUM_CHANNELS = 1
AUDIO_FORMAT_PCM = 1
BYTES_PER_SAMPLE = BITS_PER_SAMPLE // 8
BLOCK_ALIGN = NUM_CHANNELS * BYTES_PER_SAMPLE
BYTE_RATE = SAMPLE_RATE * BLOCK_ALIGN
HEADER_SIZE = 44

# Fixed-point synthesis
SCALE = 10000  # wave table values are sin(deg) * SCALE
DEGREES = 360
AMPLITUDE = 32767
INT16_MIN = -32768
INT16_MAX = 32767

# Timing
MS_PER_SECOND = 1000
NOTE_MS = 300
SILENCE_MS = 50
