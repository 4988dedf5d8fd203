"""Defines the kinds of chess pieces and the piece objects tracked by the registry"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.chess.square import Coordinate


class PieceKind(Enum):
    PAWN = auto()
    ROOK = auto()
    KNIGHT = auto()
    BISHOP = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


SYMBOL_TO_KIND: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "r": PieceKind.ROOK,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

KIND_TO_SYMBOL: dict[PieceKind, str] = {
    value: key for key, value in SYMBOL_TO_KIND.items()
}


@dataclass(eq=False)
class Piece:
    """
    A single piece on the board.

    NOTE: compared by identity, two white pawns are different pieces. Kind and color never change,
    only the coordinate (moved through the registry) and the selection flag (owned by the SelectionController).
    """

    kind: PieceKind
    color: Color
    coordinate: Coordinate
    is_selected: bool = False

    @classmethod
    def from_symbol(cls, character: str, coordinate: Coordinate) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        kind = SYMBOL_TO_KIND[character.lower()]
        return cls(kind, color, coordinate)

    def to_symbol(self) -> str:
        symbol = KIND_TO_SYMBOL[self.kind]
        return symbol.upper() if self.color == Color.WHITE else symbol

    @property
    def row(self) -> int:
        return self.coordinate.row

    @property
    def column(self) -> int:
        return self.coordinate.column

    def __repr__(self) -> str:
        return f"Piece({self.color.name} {self.kind.name} at {self.coordinate.to_algebraic()})"
