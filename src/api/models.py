"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceKind

SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False
    return value[0] in "abcdefgh" and value[1] in "12345678"


# --- REQUEST MODELS ---
class SelectRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class MovesRequest(SelectRequest):
    """Same data as a selection, but only asks for the moves (selection is left alone)."""


class MovePieceRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class MoveResponse(BaseModel):
    square: SquareName
    row: int
    column: int
    is_capture: bool


class PieceResponse(BaseModel):
    square: SquareName
    kind: PieceKind
    color: Color


class SelectionResponse(BaseModel):
    selected: Optional[PieceResponse]
    moves: list[MoveResponse]


class MovesResponse(BaseModel):
    piece: PieceResponse
    moves: list[MoveResponse]


class BoardResponse(BaseModel):
    layout: str
    selected: Optional[PieceResponse]
