"""Abstract board capability consumed by the move generator.

Follows Dependency Inversion: :class:`MoveGenerator` depends on this ABC,
not on a concrete board. Foreign board classes can either subclass it or
be registered with ``IBoard.register(SomeBoard)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmoves.core.piece import Piece
    from chessmoves.core.types import Coordinate


class IBoard(ABC):
    """Read-only view of piece placement."""

    @abstractmethod
    def piece_at(self, coordinate: Coordinate) -> Piece | None:
        """Piece occupying *coordinate*, or ``None`` if the square is empty."""
