"""Tests for Board and Piece."""

import pytest

from chesswav.core.board import Board
from chesswav.core.enums import Color, PieceType
from chesswav.core.piece import Piece
from chesswav.core.types import parse_square
from chesswav.errors import InvalidSquareError

BACK_RANK = [
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
]


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board.get("e1") == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board.get("e8") == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        for file, pt in zip("abcdefgh", BACK_RANK):
            assert board.get(f"{file}1") == Piece(Color.WHITE, pt), f"Mismatch at {file}1"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        for file, pt in zip("abcdefgh", BACK_RANK):
            assert board.get(f"{file}8") == Piece(Color.BLACK, pt), f"Mismatch at {file}8"

    def test_pawns(self) -> None:
        board = Board.initial()
        for sq in range(8, 16):  # rank 2
            assert board[sq] == Piece(Color.WHITE, PieceType.PAWN)
        for sq in range(48, 56):  # rank 7
            assert board[sq] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(board.is_empty(sq) for sq in range(64))


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[parse_square("e4")] = piece
        assert board[parse_square("e4")] == piece
        assert board.is_empty(parse_square("e2"))

    def test_named_access(self) -> None:
        board = Board.initial()
        assert board.get("d8") == Piece(Color.BLACK, PieceType.QUEEN)
        board.place("e4", board.get("e2"))
        board.place("e2", None)
        assert board.get("e4") == Piece(Color.WHITE, PieceType.PAWN)
        assert board.get("e2") is None

    def test_named_access_rejects_bad_square(self) -> None:
        with pytest.raises(InvalidSquareError):
            Board().get("z9")

    def test_index_out_of_range(self) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[64]
        with pytest.raises(IndexError):
            board[-1] = None

    def test_instances_are_independent(self) -> None:
        first = Board.initial()
        second = Board.initial()
        first.clear()
        assert second.get("e1") == Piece(Color.WHITE, PieceType.KING)
        assert first != second

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()


class TestDiagram:
    def test_letters(self) -> None:
        lines = str(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[1] == "7 p p p p p p p p"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_unicode(self) -> None:
        lines = Board.initial().diagram(unicode=True).splitlines()
        assert lines[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[6] == "2 ♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙"
        assert lines[7] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"
        assert lines[3] == "5 . . . . . . . ."


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_color_name(self) -> None:
        assert str(Color.BLACK) == "black"
