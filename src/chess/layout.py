"""
Starting layouts, written like the board part of a FEN string.

ex. the standard arrangement:
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
means:
* the first segment is row 0 (the top row on screen), read left-to-right from column 0
* a letter is a piece: upper case for White, lower case for Black
* a digit is that many empty squares in a row
"""

from src.chess.pieces import SYMBOL_TO_KIND, Piece
from src.chess.square import BOARD_DIMENSIONS, Coordinate
from src.core.exceptions import InvalidLayoutError

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_DIMENSIONS[0])

# Only plain ASCII digits count as runs of empty squares
EMPTY_RUN_DIGITS = "12345678"


def is_valid_layout(layout: str) -> bool:
    """Every row must be present and describe exactly as many squares as the board is wide"""
    rows = layout.split("/")
    if len(rows) != BOARD_DIMENSIONS[0]:
        return False

    for layout_row in rows:
        square_count = 0
        for character in layout_row:
            if character in EMPTY_RUN_DIGITS:
                square_count += int(character)
            elif character.lower() in SYMBOL_TO_KIND:
                square_count += 1
            else:
                return False
        if square_count != BOARD_DIMENSIONS[1]:
            return False
    return True


def pieces_from_layout(layout: str) -> list[Piece]:
    """Create all pieces described by the layout, each with its declared starting coordinate."""
    if not is_valid_layout(layout):
        raise InvalidLayoutError(f"Cannot interpret {layout!r} as a board layout.")

    pieces: list[Piece] = []
    for row, layout_row in enumerate(layout.split("/")):
        column = 0
        for character in layout_row:
            if character in EMPTY_RUN_DIGITS:
                column += int(character)
            else:
                pieces.append(Piece.from_symbol(character, Coordinate(row, column)))
                column += 1
    return pieces
