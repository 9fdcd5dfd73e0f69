"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """SAN letter, empty for pawns."""
        return _SAN_LETTERS[self]

    @classmethod
    def from_letter(cls, char: str) -> PieceType | None:
        """Map a SAN piece letter to its type; ``None`` means no piece letter."""
        return _SAN_PIECES.get(char)


_SAN_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECES: dict[str, PieceType] = {v: k for k, v in _SAN_LETTERS.items() if v}
