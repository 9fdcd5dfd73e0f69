"""Rendering settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from chesswav.audio.constants import AMPLITUDE, INT16_MAX, NOTE_MS, SILENCE_MS
from chesswav.audio.freq import Tuning
from chesswav.audio.tables import Waveform


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """How each move of a game is turned into sound."""

    note_ms: int = NOTE_MS
    silence_ms: int = SILENCE_MS
    waveform: Waveform = Waveform.SINE
    tuning: Tuning = Tuning.TABLE
    amplitude: int = AMPLITUDE
    sine_mix: float = 0.0
    harmonics: int | None = None

    def __post_init__(self) -> None:
        if self.note_ms < 0:
            raise ValueError(f"note_ms must be non-negative, got {self.note_ms}")
        if self.silence_ms < 0:
            raise ValueError(f"silence_ms must be non-negative, got {self.silence_ms}")
        if not 0 <= self.amplitude <= INT16_MAX:
            raise ValueError(
                f"amplitude must be within 0..{INT16_MAX}, got {self.amplitude}"
            )
        if not 0 <= self.sine_mix <= 1:
            raise ValueError(f"sine_mix must be within 0..1, got {self.sine_mix}")
        if self.harmonics is not None and self.harmonics < 1:
            raise ValueError(f"harmonics must be at least 1, got {self.harmonics}")
        # Accept plain strings from the command line.
        object.__setattr__(self, "waveform", Waveform(self.waveform))
        object.__setattr__(self, "tuning", Tuning(self.tuning))

    def with_overrides(self, **changes: Any) -> RenderSettings:
        """Copy with the non-``None`` entries of *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
