"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.interfaces import IBoard
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Coordinate

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(coord: Coordinate) -> int:
    return (coord.row - 1) * BOARD_SIZE + (coord.column - 1)


class Board(IBoard):
    """Mutable 64-square board; the reference :class:`IBoard`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._squares[_index(coord)]

    def __setitem__(self, coord: Coordinate, piece: Piece | None) -> None:
        self._squares[_index(coord)] = piece

    def piece_at(self, coordinate: Coordinate) -> Piece | None:
        return self._squares[_index(coordinate)]

    def is_empty(self, coord: Coordinate) -> bool:
        return self._squares[_index(coord)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Coordinate, Piece]]:
        """All (coordinate, piece) pairs belonging to *color*."""
        found: list[tuple[Coordinate, Piece]] = []
        for coord in Coordinate.all():
            piece = self[coord]
            if piece is not None and piece.color == color:
                found.append((coord, piece))
        return found

    def king_coordinate(self, color: Color) -> Coordinate:
        """Return the first king square for *color*."""
        king = Piece(color, PieceType.KING)
        for coord in Coordinate.all():
            if self[coord] == king:
                return coord
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column, pt in enumerate(_BACK_RANK, start=1):
            b[Coordinate(1, column)] = Piece(Color.WHITE, pt)
            b[Coordinate(2, column)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Coordinate(7, column)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Coordinate(8, column)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for column in range(1, BOARD_SIZE + 1):
                p = self[Coordinate(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
