"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Coordinate, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.piece_moves(Coordinate.parse("g1")):
        print(move)
"""

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.interfaces import IBoard
from chessmoves.core.move import Move
from chessmoves.core.move_generator import PROMOTION_TYPES, MoveGenerator, piece_moves
from chessmoves.core.piece import Piece
from chessmoves.core.types import BOARD_SIZE, Coordinate, is_on_board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "is_on_board",
    # Domain objects
    "Board",
    "IBoard",
    "Move",
    "MoveGenerator",
    "Piece",
    # Generation
    "PROMOTION_TYPES",
    "piece_moves",
]
