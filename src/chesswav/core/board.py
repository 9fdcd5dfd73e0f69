"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chesswav.core.enums import Color, PieceType
from chesswav.core.piece import Piece
from chesswav.core.types import Square, is_valid_square, make_square, parse_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    A board only changes through explicit placement; parsing a move never
    touches it. Callers own their instance, there is no shared board.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    @staticmethod
    def _check(sq: Square) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square index out of range: {sq}")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        self._check(sq)
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._check(sq)
        self._squares[sq] = piece

    def get(self, name: str) -> Piece | None:
        """Piece on the square called *name*, e.g. ``board.get("e1")``."""
        return self._squares[parse_square(name)]

    def place(self, name: str, piece: Piece | None) -> None:
        """Put *piece* on the square called *name*; ``None`` empties it."""
        self._squares[parse_square(name)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Display ------------------------------------------------------------

    def diagram(self, unicode: bool = False) -> str:
        """Text diagram, rank 8 first; *unicode* draws glyphs instead of FEN letters."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_square(file, rank)]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if unicode else str(p))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __str__(self) -> str:
        return self.diagram()

    __repr__ = __str__
