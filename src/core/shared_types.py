"""
Type definitions used across layers
"""

from enum import StrEnum

# --- Transport versions of the domain enums in src/chess/pieces.py (same member names, readable values).
# --- Convert between them by name, ex. Color[piece.color.name]


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(StrEnum):
    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
