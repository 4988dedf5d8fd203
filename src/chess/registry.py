"""The board registry is the single authoritative mapping of coordinates to the pieces occupying them"""

import logging
from typing import Iterable, Iterator, Optional

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Coordinate, is_valid_coordinate

logger = logging.getLogger(__name__)


class BoardRegistry:
    """
    8x8 grid of (optional) pieces.

    Knows nothing about how pieces move. Coordinates outside of the board are never an error:
    lookups there return None and writes there are ignored (ray casting looks past the edges all the time).
    """

    def __init__(self) -> None:
        self._grid: list[list[Optional[Piece]]] = self._empty_grid()
        self._initialized = False

    @staticmethod
    def _empty_grid() -> list[list[Optional[Piece]]]:
        rows, columns = BOARD_DIMENSIONS
        return [[None] * columns for _ in range(rows)]

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def is_valid_coordinate(self, row: int, column: int) -> bool:
        return is_valid_coordinate(row, column)

    def piece_at(self, row: int, column: int) -> Optional[Piece]:
        if not self.is_valid_coordinate(row, column):
            return None
        return self._grid[row][column]

    def place(self, piece: Piece, row: int, column: int) -> None:
        if not self.is_valid_coordinate(row, column):
            logger.debug("Ignoring placement of %r at (%d, %d)", piece, row, column)
            return
        self._grid[row][column] = piece

    def clear(self, row: int, column: int) -> None:
        if self.is_valid_coordinate(row, column):
            self._grid[row][column] = None

    def initialize_once(self, pieces: Iterable[Piece]) -> None:
        """
        Snapshot of the starting position.

        Only the first call per registry does anything: the grid is emptied and every piece is placed
        at its declared coordinate. Later calls are ignored.
        """
        if self._initialized:
            logger.debug("Registry already initialized, skipping")
            return

        self._grid = self._empty_grid()
        count = 0
        for piece in pieces:
            self.place(piece, piece.row, piece.column)
            count += 1
        self._initialized = True
        logger.info("Registry initialized with %d pieces", count)

    def relocate(self, piece: Piece, row: int, column: int) -> Optional[Piece]:
        """
        Move a piece to a new coordinate: clear the old cell, update the piece, write the new cell (in that order).

        Returns the piece that was standing on the target cell, if any. That piece is simply overwritten,
        its own coordinate is left untouched.
        """
        old = piece.coordinate
        if self.piece_at(old.row, old.column) is piece:
            self.clear(old.row, old.column)

        displaced = self.piece_at(row, column)
        if displaced is piece:
            displaced = None
        piece.coordinate = Coordinate(row, column)
        self.place(piece, row, column)
        logger.debug(
            "Relocated %s from %s, displaced: %r", piece.to_symbol(), old, displaced
        )
        return displaced

    def pieces(self) -> Iterator[Piece]:
        """All occupants, top row first, left to right"""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def to_layout(self) -> str:
        """Rows are separated by slashes, the first one is row 0."""
        return "/".join(self._row_to_layout(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_layout(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for column in range(BOARD_DIMENSIONS[1]):
            piece = self._grid[row][column]
            if piece is not None:
                if empty_count > 0:
                    characters.append(str(empty_count))
                    empty_count = 0
                characters.append(piece.to_symbol())
            else:
                empty_count += 1

        # an entirely empty row still gets its number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def __str__(self) -> str:
        return "\n".join(
            " ".join(piece.to_symbol() if piece else "." for piece in row)
            for row in self._grid
        )
