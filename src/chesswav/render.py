"""Game driver: movetext in, PCM samples or a WAV file out.

::

    "e4 Nf3"
        │  tokenize / parse_move
        ▼
    [Move(PAWN, e4), Move(KNIGHT, f3)]
        │  frequency
        ▼
    [392 Hz, 349 Hz]
        │  synthesize + silence
        ▼
    int16 samples ──encode──▶ RIFF/WAVE bytes
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from chesswav.audio.freq import frequency
from chesswav.audio.synth import sample_count, silence, synthesize
from chesswav.audio.wav import MAX_SAMPLES, encode
from chesswav.config import RenderSettings
from chesswav.core.notation import Move, parse_move, tokenize
from chesswav.errors import EncodingError, ParseError

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderReport:
    """Outcome of rendering one game."""

    samples: np.ndarray
    moves: list[Move] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def num_samples(self) -> int:
        return len(self.samples)


def _tokens(source: str | Iterable[str]) -> Iterable[str]:
    if isinstance(source, str):
        return tokenize(source)
    return source


def render_game(
    source: str | Iterable[str], settings: RenderSettings | None = None
) -> RenderReport:
    """Render every parsable move of *source* in order.

    Each move contributes one note of ``settings.note_ms`` followed by
    ``settings.silence_ms`` of silence. Tokens that fail to parse are logged
    and skipped. :class:`EncodingError` is raised as soon as the game grows
    past what a WAV file can hold.
    """
    settings = settings or RenderSettings()
    per_move = sample_count(settings.note_ms) + sample_count(settings.silence_ms)
    gap: np.ndarray | None = None
    notes: dict[int, np.ndarray] = {}
    chunks: list[np.ndarray] = []
    report = RenderReport(samples=np.zeros(0, dtype=np.int16))
    total = 0

    for token in _tokens(source):
        try:
            move = parse_move(token)
        except ParseError as exc:
            _LOGGER.warning("Skipping move %r: %s", token, exc)
            report.skipped.append(token)
            continue

        # Checked before synthesis so an oversized note is never allocated.
        total += per_move
        if total > MAX_SAMPLES:
            raise EncodingError(
                f"Game is too long for a WAV file after {len(report.moves) + 1} "
                f"moves ({total} samples, limit {MAX_SAMPLES})"
            )

        freq = frequency(move.destination, settings.tuning)
        note = notes.get(freq)
        if note is None:
            note = synthesize(
                freq,
                settings.note_ms,
                waveform=settings.waveform,
                amplitude=settings.amplitude,
                sine_mix=settings.sine_mix,
                harmonics=settings.harmonics,
            )
            notes[freq] = note
        if gap is None:
            gap = silence(settings.silence_ms)

        _LOGGER.debug("%s -> %d Hz", move, freq)
        chunks.extend((note, gap))
        report.moves.append(move)

    if chunks:
        report.samples = np.concatenate(chunks)
    _LOGGER.info(
        "Rendered %d moves (%d skipped), %d samples",
        len(report.moves),
        len(report.skipped),
        report.num_samples,
    )
    return report


def render_samples(
    source: str | Iterable[str], settings: RenderSettings | None = None
) -> np.ndarray:
    """PCM samples for *source*; see :func:`render_game`."""
    return render_game(source, settings).samples


def render_wav(
    source: str | Iterable[str], settings: RenderSettings | None = None
) -> bytes:
    """Complete WAV file for *source*. A game without valid moves is header-only."""
    return encode(render_samples(source, settings))
