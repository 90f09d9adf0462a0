"""Tests for coordinates and the Piece / Move value objects."""

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.piece import Piece
from chessmoves.core.types import Coordinate, is_on_board


class TestCoordinate:
    def test_parse_and_str(self) -> None:
        coord = Coordinate.parse("e4")
        assert coord == Coordinate(4, 5)
        assert str(coord) == "e4"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "E4", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Coordinate.parse(name)

    @pytest.mark.parametrize("row, column", [(0, 1), (9, 1), (1, 0), (1, 9)])
    def test_out_of_range_rejected(self, row: int, column: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Coordinate(row, column)

    def test_value_semantics(self) -> None:
        assert Coordinate(2, 3) == Coordinate(2, 3)
        assert len({Coordinate(2, 3), Coordinate(2, 3), Coordinate(3, 2)}) == 2

    def test_offset_clips_at_edge(self) -> None:
        assert Coordinate(1, 1).offset(1, 1) == Coordinate(2, 2)
        assert Coordinate(1, 1).offset(-1, 0) is None
        assert Coordinate(8, 8).offset(0, 1) is None

    def test_all_covers_board(self) -> None:
        squares = list(Coordinate.all())
        assert len(squares) == 64
        assert squares[0] == Coordinate(1, 1)
        assert squares[-1] == Coordinate(8, 8)

    def test_is_on_board(self) -> None:
        assert is_on_board(1, 8)
        assert not is_on_board(0, 4)
        assert not is_on_board(4, 9)


class TestPiece:
    def test_from_char_roundtrip(self) -> None:
        for char in "PNBRQKpnbrqk":
            assert str(Piece.from_char(char)) == char

    def test_from_char_color(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    @pytest.mark.parametrize("char", ["x", "", "NN", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"

    def test_enemy(self) -> None:
        white = Piece(Color.WHITE, PieceType.ROOK)
        assert white.is_enemy_of(Piece(Color.BLACK, PieceType.PAWN))
        assert not white.is_enemy_of(Piece(Color.WHITE, PieceType.PAWN))

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.BLACK) == "black"


class TestMove:
    def test_equality_includes_promotion(self) -> None:
        a, b = Coordinate.parse("e7"), Coordinate.parse("e8")
        assert Move(a, b) == Move(a, b)
        assert Move(a, b, PieceType.QUEEN) != Move(a, b)
        assert Move(a, b, PieceType.QUEEN) != Move(a, b, PieceType.KNIGHT)
        assert len({Move(a, b), Move(a, b), Move(a, b, PieceType.ROOK)}) == 2

    def test_uci(self) -> None:
        move = Move(Coordinate.parse("e7"), Coordinate.parse("e8"), PieceType.QUEEN)
        assert move.uci == "e7e8q"
        assert move.is_promotion
        plain = Move(Coordinate.parse("g1"), Coordinate.parse("f3"))
        assert str(plain) == "g1f3"
        assert not plain.is_promotion
