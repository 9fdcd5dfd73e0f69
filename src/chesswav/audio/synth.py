"""Fixed-point oscillator driven by the precomputed wave tables."""

from __future__ import annotations

import logging

import numpy as np

from chesswav.audio.constants import (
    AMPLITUDE,
    DEGREES,
    INT16_MAX,
    INT16_MIN,
    MS_PER_SECOND,
    SAMPLE_RATE,
    SCALE,
)
from chesswav.audio.tables import Waveform, wave_table
from chesswav.errors import SynthesisError

_LOGGER = logging.getLogger(__name__)


def sample_count(duration_ms: int) -> int:
    """Number of samples in *duration_ms* milliseconds, truncated."""
    if duration_ms < 0:
        raise SynthesisError(f"Duration must be non-negative, got {duration_ms} ms")
    return SAMPLE_RATE * duration_ms // MS_PER_SECOND


def synthesize(
    frequency_hz: int,
    duration_ms: int,
    *,
    waveform: Waveform = Waveform.SINE,
    amplitude: int = AMPLITUDE,
    sine_mix: float = 0.0,
    harmonics: int | None = None,
) -> np.ndarray:
    """Render a tone as signed 16-bit samples.

    The phase advances by ``frequency_hz * 360 * SCALE // SAMPLE_RATE`` per
    sample, so ``phase // SCALE`` is a whole degree used to index the wave
    table. Each table value is scaled by ``amplitude / SCALE`` with
    truncation toward zero and saturated to the int16 range. *sine_mix* and
    *harmonics* select a derived table, see :func:`~chesswav.audio.tables.wave_table`.

    A zero duration gives an empty buffer; a zero frequency holds the phase
    at 0 degrees and gives a constant buffer (silence for a sine).
    """
    if frequency_hz < 0:
        raise SynthesisError(f"Frequency must be non-negative, got {frequency_hz} Hz")
    table = wave_table(waveform, sine_mix=sine_mix, harmonics=harmonics)
    n = sample_count(duration_ms)
    increment = frequency_hz * DEGREES * SCALE // SAMPLE_RATE
    _LOGGER.debug(
        "Synthesising %d samples at %d Hz (%s, step %d)",
        n,
        frequency_hz,
        waveform,
        increment,
    )

    phase = np.arange(n, dtype=np.int64) * increment
    raw = table[(phase // SCALE) % DEGREES] * amplitude
    # numpy floors integer division; samples truncate toward zero
    scaled = np.sign(raw) * (np.abs(raw) // SCALE)
    return np.clip(scaled, INT16_MIN, INT16_MAX).astype(np.int16)


def silence(duration_ms: int) -> np.ndarray:
    """A zero-filled run of *duration_ms* milliseconds."""
    return np.zeros(sample_count(duration_ms), dtype=np.int16)
