"""Frequency mapping - converts board squares to musical notes.

Files select a note of the fourth octave, ranks shift it by octaves::

      a     b     c     d     e     f     g     h
      C     D     E     F     G     A     B     C
     262   294   330   349   392   440   494   523

    rank 8 │ +4 octaves
    rank 4 │ reference (f4 = A4 = 440 Hz)
    rank 1 │ -3 octaves

Octaves down use truncating integer halving, so three octaves below
262 Hz is 32 Hz and not 32.75. Existing renderings depend on that rounding;
:attr:`Tuning.EQUAL_TEMPERAMENT` is available when accurate pitch matters
more than byte compatibility.
"""

from __future__ import annotations

from enum import StrEnum

from chesswav.core.types import Square, file_of, rank_of

FREQUENCY_TABLE: tuple[int, ...] = (262, 294, 330, 349, 392, 440, 494, 523)

REFERENCE_RANK = 4

_A4_HZ = 440.0
_FILE_SEMITONES = (0, 2, 4, 5, 7, 9, 11, 12)
_A_SEMITONES_FROM_C = 9


class Tuning(StrEnum):
    """How a square's octave is applied to its base note."""

    TABLE = "table"
    EQUAL_TEMPERAMENT = "equal"


def frequency(square: Square, tuning: Tuning = Tuning.TABLE) -> int:
    """Tone frequency in Hz for *square*."""
    if tuning == Tuning.EQUAL_TEMPERAMENT:
        return _equal_temperament(square)

    freq = FREQUENCY_TABLE[file_of(square)]
    octave_diff = rank_of(square) + 1 - REFERENCE_RANK
    if octave_diff > 0:
        for _ in range(octave_diff):
            freq *= 2
    elif octave_diff < 0:
        for _ in range(-octave_diff):
            freq //= 2
    return freq


def _equal_temperament(square: Square) -> int:
    octave_diff = rank_of(square) + 1 - REFERENCE_RANK
    semitones = _FILE_SEMITONES[file_of(square)] + 12 * octave_diff - _A_SEMITONES_FROM_C
    return round(_A4_HZ * 2.0 ** (semitones / 12))
