"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Othello is always played on an 8x8 board (rows, cols).
BOARD_DIMENSIONS = (8, 8)

COLUMN_LETTERS = "abcdefgh"


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7).

        The letter picks the column, the number the row (counted from the top of the board).
        So the standard opening move 'd3' is row 2, col 3.
        """
        col = ord(sq[0].lower()) - ord("a")
        row = int(sq[1:]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{COLUMN_LETTERS[self.col]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def shifted(self, d_row: int, d_col: int) -> Square:
        """Neighbouring square one step along the given direction (may leave the board)."""
        return Square(self.row + d_row, self.col + d_col)


def all_squares() -> list[Square]:
    """All 64 squares, row by row."""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
