"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import PieceType
from chessmoves.core.types import Coordinate

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single candidate move.

    ``promotion`` is only set for pawn moves into the far rank.
    """

    start: Coordinate
    end: Coordinate
    promotion: PieceType | None = None

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.start}{self.end}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
