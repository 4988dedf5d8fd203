"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Board is always 8x8 (rows, columns). Row 0 is the top row as seen on screen.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Coordinate:
    row: int
    column: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Coordinate:
        """Algebraic notation: 'a8' is the top-left cell (0,0), 'h1' the bottom-right cell (7,7)"""
        column = ord(sq[0]) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, column)

    def to_algebraic(self) -> str:
        return f"{chr(self.column + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_valid(self) -> bool:
        return is_valid_coordinate(self.row, self.column)

    def offset(self, d_row: int, d_column: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.column + d_column)


def is_valid_coordinate(row: int, column: int) -> bool:
    return (0 <= row < BOARD_DIMENSIONS[0]) and (0 <= column < BOARD_DIMENSIONS[1])
