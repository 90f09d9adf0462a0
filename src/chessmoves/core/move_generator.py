"""Pseudo-legal move generation for a single piece."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.types import Coordinate

if TYPE_CHECKING:
    from chessmoves.core.interfaces import IBoard


# Offsets and directions are (d_row, d_column).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Pawn geometry, indexed by int(Color).
_PAWN_FORWARD: tuple[int, int] = (1, -1)
_PAWN_START_ROW: tuple[int, int] = (2, 7)
_PAWN_LAST_ROW: tuple[int, int] = (8, 1)
_PAWN_CAPTURE_COLUMNS: tuple[int, int] = (-1, 1)


# -- Precomputed lookup tables ---------------------------------------------

Targets = dict[Coordinate, tuple[Coordinate, ...]]
Rays = dict[Coordinate, tuple[tuple[Coordinate, ...], ...]]


def _walk(origin: Coordinate, d_row: int, d_column: int) -> Iterator[Coordinate]:
    """Squares along one direction from *origin*, nearest first, until the edge."""
    coord = origin.offset(d_row, d_column)
    while coord is not None:
        yield coord
        coord = coord.offset(d_row, d_column)


def _build_targets(offsets: tuple[tuple[int, int], ...]) -> Targets:
    targets: Targets = {}
    for coord in Coordinate.all():
        reachable: list[Coordinate] = []
        for d_row, d_column in offsets:
            to_coord = coord.offset(d_row, d_column)
            if to_coord is not None:
                reachable.append(to_coord)
        targets[coord] = tuple(reachable)
    return targets


def _build_rays(directions: tuple[tuple[int, int], ...]) -> Rays:
    return {
        coord: tuple(
            tuple(_walk(coord, d_row, d_column)) for d_row, d_column in directions
        )
        for coord in Coordinate.all()
    }


_STEP_TARGETS: dict[PieceType, Targets] = {
    PieceType.KNIGHT: _build_targets(KNIGHT_OFFSETS),
    PieceType.KING: _build_targets(KING_OFFSETS),
}

_SLIDER_RAYS: dict[PieceType, Rays] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


def _pawn_advance(
    source: Coordinate, dest: Coordinate, color: Color
) -> tuple[Move, ...]:
    """One pawn advance as Move values: four on the last row, otherwise one."""
    if dest.row == _PAWN_LAST_ROW[int(color)]:
        return tuple(Move(source, dest, pt) for pt in PROMOTION_TYPES)
    return (Move(source, dest),)


class MoveGenerator:
    """Generates pseudo-legal moves from an :class:`IBoard`.

    Moves ignore check, pins, castling and en passant. The board is only
    read through ``piece_at`` and is never mutated, so one generator can be
    shared across threads as long as the board itself is not modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: IBoard) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, source: Coordinate) -> set[Move]:
        """Every pseudo-legal move for the piece standing on *source*.

        Raises:
            ValueError: *source* is empty.
        """
        piece = self._board.piece_at(source)
        if piece is None:
            raise ValueError(f"No piece on {source}")

        moves: set[Move] = set()
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(source, piece.color, moves)
        elif ptype in _STEP_TARGETS:
            targets = _STEP_TARGETS[ptype][source]
            self._gen_stepping(source, piece.color, targets, moves)
        else:
            rays = _SLIDER_RAYS[ptype][source]
            self._gen_sliding(source, piece.color, rays, moves)
        return moves

    def destinations(self, source: Coordinate) -> set[Coordinate]:
        """Target squares of :meth:`piece_moves`, promotions collapsed."""
        return {move.end for move in self.piece_moves(source)}

    def pseudo_legal_moves(self, color: Color) -> set[Move]:
        """All pseudo-legal moves for every piece of *color*."""
        board = self._board
        moves: set[Move] = set()
        for coord in Coordinate.all():
            piece = board.piece_at(coord)
            if piece is not None and piece.color == color:
                moves |= self.piece_moves(coord)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_stepping(
        self,
        source: Coordinate,
        color: Color,
        targets: tuple[Coordinate, ...],
        moves: set[Move],
    ) -> None:
        board = self._board
        for to_coord in targets:
            target = board.piece_at(to_coord)
            if target is None or target.color != color:
                moves.add(Move(source, to_coord))

    def _gen_sliding(
        self,
        source: Coordinate,
        color: Color,
        rays: tuple[tuple[Coordinate, ...], ...],
        moves: set[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_coord in ray:
                target = board.piece_at(to_coord)
                if target is None:
                    moves.add(Move(source, to_coord))
                    continue
                if target.color != color:
                    moves.add(Move(source, to_coord))
                break

    def _gen_pawn(self, source: Coordinate, color: Color, moves: set[Move]) -> None:
        board = self._board
        idx = int(color)
        forward = _PAWN_FORWARD[idx]

        one_step = source.offset(forward, 0)
        if one_step is None:
            # Pawn already on its last row: nothing ahead of it.
            return

        if board.piece_at(one_step) is None:
            moves.update(_pawn_advance(source, one_step, color))
            if source.row == _PAWN_START_ROW[idx]:
                two_step = one_step.offset(forward, 0)
                if two_step is not None and board.piece_at(two_step) is None:
                    moves.add(Move(source, two_step))

        for d_column in _PAWN_CAPTURE_COLUMNS:
            cap_coord = source.offset(forward, d_column)
            if cap_coord is None:
                continue
            target = board.piece_at(cap_coord)
            if target is not None and target.color != color:
                moves.update(_pawn_advance(source, cap_coord, color))


def piece_moves(board: IBoard, source: Coordinate) -> set[Move]:
    """Shortcut for ``MoveGenerator(board).piece_moves(source)``."""
    return MoveGenerator(board).piece_moves(source)
