"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesswav.core.enums import Color, PieceType

_UNICODE: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, piece type) pair occupying a square."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = self.piece_type.letter or "P"
        return char if self.color == Color.WHITE else char.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self.piece_type][int(self.color)]
