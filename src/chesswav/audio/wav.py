"""RIFF/WAVE container for 16-bit mono PCM.

Header layout (44 bytes, little-endian)::

    offset  size  field
     0      4     "RIFF"
     4      4     ChunkSize       36 + Subchunk2Size
     8      4     "WAVE"
    12      4     "fmt "
    16      4     Subchunk1Size   16
    20      2     AudioFormat     1 (PCM)
    22      2     NumChannels     1
    24      4     SampleRate      44100
    28      4     ByteRate        88200
    32      2     BlockAlign      2
    34      2     BitsPerSample   16
    36      4     "data"
    40      4     Subchunk2Size   num_samples * 2
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

import numpy as np

from chesswav.audio.constants import (
    AUDIO_FORMAT_PCM,
    BITS_PER_SAMPLE,
    BLOCK_ALIGN,
    BYTE_RATE,
    HEADER_SIZE,
    INT16_MAX,
    INT16_MIN,
    NUM_CHANNELS,
    SAMPLE_RATE,
)
from chesswav.errors import EncodingError

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
_FMT_CHUNK_SIZE = 16
_UINT32_MAX = 0xFFFFFFFF

MAX_SAMPLES = (_UINT32_MAX - 36) // BLOCK_ALIGN


def wav_header(num_samples: int) -> bytes:
    """Return the 44-byte header for *num_samples* mono 16-bit samples."""
    if num_samples < 0:
        raise EncodingError(f"Sample count must be non-negative, got {num_samples}")
    if num_samples > MAX_SAMPLES:
        raise EncodingError(
            f"{num_samples} samples exceed the WAV size limit of {MAX_SAMPLES}"
        )
    data_size = num_samples * BLOCK_ALIGN
    header = _HEADER.pack(
        b"RIFF",
        36 + data_size,
        b"WAVE",
        b"fmt ",
        _FMT_CHUNK_SIZE,
        AUDIO_FORMAT_PCM,
        NUM_CHANNELS,
        SAMPLE_RATE,
        BYTE_RATE,
        BLOCK_ALIGN,
        BITS_PER_SAMPLE,
        b"data",
        data_size,
    )
    assert len(header) == HEADER_SIZE
    return header


def encode(samples: np.ndarray | Sequence[int]) -> bytes:
    """Header followed by every sample as a little-endian int16.

    Integer input outside the int16 range, or non-integer input, raises
    :class:`EncodingError`. An empty sequence gives a header-only file.
    """
    pcm = np.asarray(samples)
    if pcm.dtype != np.int16:
        if pcm.size and pcm.dtype.kind not in "iu":
            raise EncodingError(f"Samples must be integers, got {pcm.dtype}")
        if pcm.size and (pcm.min() < INT16_MIN or pcm.max() > INT16_MAX):
            raise EncodingError("Samples fall outside the signed 16-bit range")
        pcm = pcm.astype(np.int16)
    header = wav_header(len(pcm))
    return header + pcm.astype("<i2", copy=False).tobytes()
