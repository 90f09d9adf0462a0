"""Board coordinates and square-name helpers.

Coordinates are 1-based, matching rank/file numbering on a real board:
    row 1 = rank 1 (white's back rank), row 8 = rank 8
    column 1 = file a, column 8 = file h
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8
MIN_INDEX = 1
MAX_INDEX = BOARD_SIZE

_FILES = "abcdefgh"


def is_on_board(row: int, column: int) -> bool:
    """Whether (*row*, *column*) lies inside the 8x8 board."""
    return MIN_INDEX <= row <= MAX_INDEX and MIN_INDEX <= column <= MAX_INDEX


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Immutable (row, column) pair, each axis 1–8."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.column):
            raise ValueError(
                f"Coordinate out of range: ({self.row}, {self.column})"
            )

    # ── Navigation ───────────────────────────────────────────────────────

    def offset(self, d_row: int, d_column: int) -> Coordinate | None:
        """Shifted coordinate, or ``None`` if it falls off the board."""
        row = self.row + d_row
        column = self.column + d_column
        if not is_on_board(row, column):
            return None
        return Coordinate(row, column)

    @classmethod
    def all(cls) -> Iterator[Coordinate]:
        """All 64 coordinates, row by row from a1 to h8."""
        for row in range(MIN_INDEX, MAX_INDEX + 1):
            for column in range(MIN_INDEX, MAX_INDEX + 1):
                yield cls(row, column)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Square name, e.g. (4, 5) → 'e4'."""
        return f"{_FILES[self.column - 1]}{self.row}"

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse square name, e.g. 'e4' → Coordinate(4, 5)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(int(name[1]), _FILES.index(name[0]) + 1)
