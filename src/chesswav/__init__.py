"""Chess moves in algebraic notation rendered as PCM audio."""

from chesswav.config import RenderSettings
from chesswav.errors import (
    ChessWavError,
    EmptyInputError,
    EncodingError,
    InvalidSquareError,
    ParseError,
    SynthesisError,
)
from chesswav.render import RenderReport, render_game, render_samples, render_wav

__version__ = "0.1.0"

__all__ = [
    "ChessWavError",
    "EmptyInputError",
    "EncodingError",
    "InvalidSquareError",
    "ParseError",
    "RenderReport",
    "RenderSettings",
    "SynthesisError",
    "render_game",
    "render_samples",
    "render_wav",
]
