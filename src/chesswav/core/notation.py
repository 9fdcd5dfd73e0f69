"""Algebraic move notation parsing.

Only the parts of SAN that decide a tone are interpreted: the moving piece,
the destination square and whether the move captures. Disambiguation
prefixes fall away because the destination is always read from the last two
characters; promotion suffixes and castling tokens are rejected with an
:class:`~chesswav.errors.InvalidSquareError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from chesswav.core.enums import PieceType
from chesswav.core.types import Square, parse_square, square_name
from chesswav.errors import EmptyInputError, InvalidSquareError

_ANNOTATIONS = str.maketrans("", "", "+#!?")
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


@dataclass(frozen=True, slots=True)
class Move:
    """Piece, destination and capture flag read from one notation token."""

    piece: PieceType
    destination: Square
    is_capture: bool = False

    def __str__(self) -> str:
        capture = "x" if self.is_capture else ""
        return f"{self.piece.letter}{capture}{square_name(self.destination)}"


def parse_move(token: str) -> Move:
    """Parse a single move token such as ``Nf3``, ``Bxc6`` or ``e4``.

    Raises :class:`EmptyInputError` when nothing is left after removing
    annotation glyphs and :class:`InvalidSquareError` when the last two
    characters are not a square.
    """
    text = token.strip().translate(_ANNOTATIONS)

    is_capture = "x" in text
    if is_capture:
        text = text.replace("x", "")

    if not text:
        raise EmptyInputError(f"Empty move token: {token!r}", token=token)

    piece = PieceType.from_letter(text[0])
    if piece is None:
        piece = PieceType.PAWN
    else:
        text = text[1:]

    try:
        destination = parse_square(text[-2:])
    except InvalidSquareError:
        raise InvalidSquareError(
            f"No destination square in move {token!r}", token=token
        ) from None
    return Move(piece, destination, is_capture)


def tokenize(text: str) -> Iterator[str]:
    """Yield move tokens from whitespace-separated movetext.

    Move numbers (``1.``, ``12...``, or glued as in ``1.e4``) and game
    result markers are dropped.
    """
    for raw in text.split():
        if raw in _RESULT_TOKENS:
            continue
        token = _MOVE_NUMBER_RE.sub("", raw)
        if token:
            yield token
