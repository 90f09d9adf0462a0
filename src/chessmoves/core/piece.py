"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# White glyphs start at U+2654 (king), black ones six code points later.
_GLYPH_OFFSET: dict[PieceType, int] = {
    PieceType.KING: 0,
    PieceType.QUEEN: 1,
    PieceType.ROOK: 2,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 4,
    PieceType.PAWN: 5,
}

_TYPE_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        ptype = _TYPE_BY_LETTER.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        base = 0x2654 if self.color == Color.WHITE else 0x265A
        return chr(base + _GLYPH_OFFSET[self.piece_type])

    def is_enemy_of(self, other: Piece) -> bool:
        return self.color != other.color
