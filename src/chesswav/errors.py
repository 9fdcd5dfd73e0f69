"""Exception hierarchy shared by the notation, synthesis and encoding layers."""

from __future__ import annotations


class ChessWavError(Exception):
    """Base class for every error raised by chesswav."""


class ParseError(ChessWavError, ValueError):
    """A move token could not be interpreted."""

    def __init__(self, message: str, token: str = "") -> None:
        super().__init__(message)
        self.token = token


class EmptyInputError(ParseError):
    """Nothing was left of the token once annotations were stripped."""


class InvalidSquareError(ParseError):
    """The destination is not a file letter a-h followed by a rank 1-8."""


class SynthesisError(ChessWavError, ValueError):
    """Negative frequency or duration handed to the synthesizer."""


class EncodingError(ChessWavError, OverflowError):
    """Sample count does not fit the 32-bit RIFF size fields."""
