"""Core domain layer — squares, pieces, the board and move notation.

Quick start::

    from chesswav.core import parse_move, square_name

    move = parse_move("Bxc6")
    print(move.piece, square_name(move.destination), move.is_capture)
"""

from chesswav.core.board import Board
from chesswav.core.enums import Color, PieceType
from chesswav.core.notation import Move, parse_move, tokenize
from chesswav.core.piece import Piece
from chesswav.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Notation
    "parse_move",
    "tokenize",
]
