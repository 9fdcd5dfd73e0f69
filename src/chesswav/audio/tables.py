"""Precomputed one-period wave tables.

Every table has one integer entry per degree, scaled by
:data:`~chesswav.audio.constants.SCALE`, so synthesis never evaluates a
trigonometric function per sample and the output is identical on every
platform. The tables are built once at import time and are read-only.

::

    SINE       smooth, pure tone           round(sin(deg) * SCALE)
    SQUARE     hollow, odd harmonics       +SCALE for deg < 180, else -SCALE
    TRIANGLE   mellow, linear ramps        0 -> +SCALE at 90 -> -SCALE at 270 -> 0
    SAWTOOTH   bright, all harmonics       0 rising toward +SCALE, -SCALE at 180, back to 0
    COMPOSITE  rich, full                  (sin x + sin 2x/2 + ... + sin 5x/5) / 2.283
    HARMONICS  warm, noble                 (sin x + 0.5 sin 2x + 0.25 sin 3x) / 1.75

:func:`wave_table` derives softer variants of a shape: a band-limited
rebuild from the first *harmonics* Fourier partials, then a linear blend
with the sine table (``sine_mix`` 0.0 keeps the shape, 1.0 is pure sine).
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import StrEnum
from functools import lru_cache

import numpy as np

from chesswav.audio.constants import DEGREES, SCALE
from chesswav.errors import SynthesisError

Partials = Sequence[tuple[int, float]]

_COMPOSITE_PARTIALS: Partials = tuple((n, 1 / n) for n in range(1, 6))
_COMPOSITE_NORM = 2.283
_HARMONICS_PARTIALS: Partials = ((1, 1.0), (2, 0.5), (3, 0.25))
_HARMONICS_NORM = 1.75


def _series(deg: int, partials: Partials) -> float:
    x = math.radians(deg)
    return sum(weight * math.sin(n * x) for n, weight in partials)


def _sine(deg: int) -> int:
    return round(math.sin(math.radians(deg)) * SCALE)


def _square(deg: int) -> int:
    return SCALE if deg < DEGREES // 2 else -SCALE


def _triangle(deg: int) -> int:
    if deg < 90:
        return round(deg * SCALE / 90)
    if deg < 270:
        return round((180 - deg) * SCALE / 90)
    return round((deg - DEGREES) * SCALE / 90)


def _sawtooth(deg: int) -> int:
    if deg < 180:
        return round(deg * SCALE / 180)
    return round((deg - DEGREES) * SCALE / 180)


def _composite(deg: int) -> int:
    return round(_series(deg, _COMPOSITE_PARTIALS) / _COMPOSITE_NORM * SCALE)


def _harmonics(deg: int) -> int:
    return round(_series(deg, _HARMONICS_PARTIALS) / _HARMONICS_NORM * SCALE)


def _build(fn: Callable[[int], int]) -> np.ndarray:
    table = np.array([fn(deg) for deg in range(DEGREES)], dtype=np.int64)
    table.setflags(write=False)
    return table


SINE_TABLE = _build(_sine)
SQUARE_TABLE = _build(_square)
TRIANGLE_TABLE = _build(_triangle)
SAWTOOTH_TABLE = _build(_sawtooth)
COMPOSITE_TABLE = _build(_composite)
HARMONICS_TABLE = _build(_harmonics)


class Waveform(StrEnum):
    """Oscillator shapes available to the synthesizer."""

    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"
    COMPOSITE = "composite"
    HARMONICS = "harmonics"

    @property
    def table(self) -> np.ndarray:
        """The read-only 360-entry table for this shape."""
        return _TABLES[self]


_TABLES: dict[Waveform, np.ndarray] = {
    Waveform.SINE: SINE_TABLE,
    Waveform.SQUARE: SQUARE_TABLE,
    Waveform.TRIANGLE: TRIANGLE_TABLE,
    Waveform.SAWTOOTH: SAWTOOTH_TABLE,
    Waveform.COMPOSITE: COMPOSITE_TABLE,
    Waveform.HARMONICS: HARMONICS_TABLE,
}


def _partials(waveform: Waveform, harmonics: int) -> Partials | None:
    """Fourier partials of *waveform* up to *harmonics*; ``None`` if unchanged."""
    if waveform is Waveform.SQUARE:
        return [(n, 4 / (math.pi * n)) for n in range(1, harmonics + 1, 2)]
    if waveform is Waveform.TRIANGLE:
        return [
            (n, (-1) ** k * 8 / (math.pi**2 * n * n))
            for k, n in enumerate(range(1, harmonics + 1, 2))
        ]
    if waveform is Waveform.SAWTOOTH:
        # Phase 0 sits mid-ramp, so the partials alternate in sign.
        return [
            (n, (-1) ** (n + 1) * 2 / (math.pi * n)) for n in range(1, harmonics + 1)
        ]
    if waveform is Waveform.COMPOSITE:
        kept = _COMPOSITE_PARTIALS[:harmonics]
        total = sum(weight for _, weight in kept)
        return [(n, weight / total) for n, weight in kept]
    # Sine and harmonics have no partials above the third.
    return None


@lru_cache(maxsize=128)
def _derived(waveform: Waveform, sine_mix: float, harmonics: int | None) -> np.ndarray:
    base = waveform.table
    if harmonics is not None:
        partials = _partials(waveform, harmonics)
        if partials is not None:
            base = _build(lambda deg: round(_series(deg, partials) * SCALE))
    if sine_mix == 0:
        return base
    mixed = np.rint(SINE_TABLE * sine_mix + base * (1 - sine_mix)).astype(np.int64)
    mixed.setflags(write=False)
    return mixed


def wave_table(
    waveform: Waveform | str = Waveform.SINE,
    *,
    sine_mix: float = 0.0,
    harmonics: int | None = None,
) -> np.ndarray:
    """Read-only table for *waveform*, band-limited and blended with sine.

    With the defaults this is ``waveform.table`` itself. *harmonics* keeps
    only the first partials of the shape's Fourier series (square, triangle,
    sawtooth, composite; the others are unaffected). *sine_mix* in
    ``[0, 1]`` then interpolates toward :data:`SINE_TABLE`.
    """
    if not 0 <= sine_mix <= 1:
        raise SynthesisError(f"Sine mix must be within 0..1, got {sine_mix}")
    if harmonics is not None and harmonics < 1:
        raise SynthesisError(f"Harmonics must be at least 1, got {harmonics}")
    return _derived(Waveform(waveform), float(sine_mix), harmonics)
