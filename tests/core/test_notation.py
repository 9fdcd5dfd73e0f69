"""Tests for move notation parsing."""

import pytest

from chesswav.core.enums import PieceType
from chesswav.core.notation import Move, parse_move, tokenize
from chesswav.core.types import parse_square
from chesswav.errors import EmptyInputError, InvalidSquareError, ParseError


class TestParseMove:
    def test_pawn_push(self) -> None:
        assert parse_move("e4") == Move(PieceType.PAWN, parse_square("e4"), False)

    def test_knight_move(self) -> None:
        assert parse_move("Nf3") == Move(PieceType.KNIGHT, parse_square("f3"), False)

    def test_bishop_capture(self) -> None:
        assert parse_move("Bxc6") == Move(PieceType.BISHOP, parse_square("c6"), True)

    @pytest.mark.parametrize(
        ("token", "piece", "square"),
        [
            ("d5", PieceType.PAWN, "d5"),
            ("Bb5", PieceType.BISHOP, "b5"),
            ("Qh4", PieceType.QUEEN, "h4"),
            ("Ra1", PieceType.ROOK, "a1"),
            ("Ke2", PieceType.KING, "e2"),
        ],
    )
    def test_piece_letters(self, token: str, piece: PieceType, square: str) -> None:
        move = parse_move(token)
        assert move.piece == piece
        assert move.destination == parse_square(square)
        assert not move.is_capture

    def test_pawn_capture(self) -> None:
        move = parse_move("exd5")
        assert move.piece == PieceType.PAWN
        assert move.destination == parse_square("d5")
        assert move.is_capture

    def test_queen_capture(self) -> None:
        move = parse_move("Qxf7")
        assert move.piece == PieceType.QUEEN
        assert move.is_capture

    @pytest.mark.parametrize("token", ["Qh5+", "Qh5#", "Qh5!", "Qh5?", "Qh5!?", "Qh5+!!"])
    def test_annotations_are_ignored(self, token: str) -> None:
        assert parse_move(token) == Move(PieceType.QUEEN, parse_square("h5"), False)

    def test_checkmate_capture(self) -> None:
        assert parse_move("Qxf7#") == Move(PieceType.QUEEN, parse_square("f7"), True)

    def test_surrounding_whitespace(self) -> None:
        assert parse_move("  e4\n").destination == parse_square("e4")

    def test_disambiguation_uses_last_two_characters(self) -> None:
        move = parse_move("Rad1")
        assert move.piece == PieceType.ROOK
        assert move.destination == parse_square("d1")

    def test_rank_disambiguation_with_capture(self) -> None:
        move = parse_move("N1xe2")
        assert move.piece == PieceType.KNIGHT
        assert move.destination == parse_square("e2")
        assert move.is_capture

    def test_str(self) -> None:
        assert str(parse_move("Bxc6+")) == "Bxc6"
        assert str(parse_move("e4")) == "e4"

    def test_is_pure(self) -> None:
        assert parse_move("Nf3") == parse_move("Nf3")


class TestParseMoveErrors:
    @pytest.mark.parametrize("token", ["", "   ", "+", "#!?", "x"])
    def test_empty(self, token: str) -> None:
        with pytest.raises(EmptyInputError, match="Empty move token"):
            parse_move(token)

    @pytest.mark.parametrize("token", ["O-O", "O-O-O", "e8=Q", "N", "z9", "e9", "Ni4"])
    def test_invalid_square(self, token: str) -> None:
        with pytest.raises(InvalidSquareError, match="No destination square"):
            parse_move(token)

    def test_error_carries_token(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_move("O-O+")
        assert info.value.token == "O-O+"

    def test_parse_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_move("")


class TestTokenize:
    def test_whitespace(self) -> None:
        assert list(tokenize("e4 e5\nNf3\tNc6")) == ["e4", "e5", "Nf3", "Nc6"]

    def test_move_numbers_dropped(self) -> None:
        assert list(tokenize("1. e4 e5 2. Nf3 Nc6")) == ["e4", "e5", "Nf3", "Nc6"]

    def test_glued_move_numbers(self) -> None:
        assert list(tokenize("1.e4 e5 2.Nf3 2...Nc6")) == ["e4", "e5", "Nf3", "Nc6"]

    @pytest.mark.parametrize("result", ["1-0", "0-1", "1/2-1/2", "*"])
    def test_results_dropped(self, result: str) -> None:
        assert list(tokenize(f"e4 e5 {result}")) == ["e4", "e5"]

    def test_empty(self) -> None:
        assert list(tokenize("")) == []
        assert list(tokenize(" \n ")) == []

    def test_bad_tokens_kept_for_parser(self) -> None:
        assert list(tokenize("e4 O-O zz")) == ["e4", "O-O", "zz"]
