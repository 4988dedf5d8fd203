"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the candidate move set for each piece kind.

Moves are pseudo-legal: they follow piece geometry and blocking, but nothing checks whether
the mover's own king is left in check.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceKind
from src.chess.square import BOARD_DIMENSIONS, Coordinate


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, row: int, column: int) -> Optional[Piece]: ...


Vector = tuple[int, int]

# A ray never needs more steps than the board is wide
MAX_RAY_DISTANCE = BOARD_DIMENSIONS[0] - 1

# Pawn direction and home rank per color
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}

ORTHOGONALS: list[Vector] = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = ORTHOGONALS + DIAGONALS


@dataclass(frozen=True)
class Move:
    """A candidate destination. `is_capture` means an enemy piece currently stands there."""

    row: int
    column: int
    is_capture: bool = False

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.column)


def is_free(square: Coordinate, board: Board) -> bool:
    return square.is_valid() and board.piece_at(square.row, square.column) is None


def has_enemy_piece(square: Coordinate, color: Color, board: Board) -> bool:
    occupant = board.piece_at(square.row, square.column)
    return occupant is not None and occupant.color != color


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Coordinate, color: Color, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    Walk outward along every direction until the edge of the board or the first occupied square.
    The first occupied square is included as a capture only when it holds an opponent's piece.
    """
    moves: list[Move] = []
    for d_row, d_column in directions:
        for distance in range(1, MAX_RAY_DISTANCE + 1):
            target = square.offset(d_row * distance, d_column * distance)
            if not target.is_valid():
                break

            if is_free(target, board):
                moves.append(Move(target.row, target.column))
                continue

            if has_enemy_piece(target, color, board):
                moves.append(Move(target.row, target.column, is_capture=True))
            break
    return moves


def single_step_move(
    square: Coordinate, color: Color, board: Board, deltas: list[Vector]
) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that jump to a fixed offset"""
    moves: list[Move] = []
    for d_row, d_column in deltas:
        target = square.offset(d_row, d_column)
        if not target.is_valid():
            continue

        if is_free(target, board):
            moves.append(Move(target.row, target.column))
        elif has_enemy_piece(target, color, board):
            moves.append(Move(target.row, target.column, is_capture=True))
    return moves


def candidate_pawn_moves(square: Coordinate, color: Color, board: Board) -> list[Move]:
    """
    A pawn:
    - moves a single square forward onto an empty square
    - can move by two from its home row, if both squares on the way are empty
    - takes diagonally (only when an opponent's piece is there, no en passant)

    NOTE: White moves towards row 0, Black towards row 7.
    """
    moves: list[Move] = []
    direction = PAWN_DIRECTION[color]

    one_step = square.offset(direction, 0)
    if is_free(one_step, board):
        moves.append(Move(one_step.row, one_step.column))

        # double step is only looked at when the single step was possible
        if square.row == PAWN_HOME_ROW[color]:
            two_step = square.offset(2 * direction, 0)
            if is_free(two_step, board):
                moves.append(Move(two_step.row, two_step.column))

    for d_column in (-1, 1):
        target = square.offset(direction, d_column)
        if target.is_valid() and has_enemy_piece(target, color, board):
            moves.append(Move(target.row, target.column, is_capture=True))
    return moves


def candidate_knight_moves(
    square: Coordinate, color: Color, board: Board
) -> list[Move]:
    """Knights always jump such that |delta_row| + |delta_column| = 3"""
    return single_step_move(square, color, board, KNIGHT_DELTAS)


def candidate_bishop_moves(
    square: Coordinate, color: Color, board: Board
) -> list[Move]:
    """Bishops move diagonally: |delta_row| = |delta_column|"""
    return raycasting_move(square, color, board, DIAGONALS)


def candidate_rook_moves(square: Coordinate, color: Color, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, color, board, ORTHOGONALS)


def candidate_queen_moves(
    square: Coordinate, color: Color, board: Board
) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, color, board, ORTHOGONALS + DIAGONALS)


def candidate_king_moves(square: Coordinate, color: Color, board: Board) -> list[Move]:
    """The king can move by a single square at the time."""
    return single_step_move(square, color, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Coordinate, Color, Board], list[Move]]
MOVEMENT_RULES: dict[PieceKind, CandidateMovesFn] = {
    PieceKind.PAWN: candidate_pawn_moves,
    PieceKind.ROOK: candidate_rook_moves,
    PieceKind.KNIGHT: candidate_knight_moves,
    PieceKind.BISHOP: candidate_bishop_moves,
    PieceKind.QUEEN: candidate_queen_moves,
    PieceKind.KING: candidate_king_moves,
}


def generate_moves(piece: Piece, board: Board) -> list[Move]:
    """
    Candidate moves of a piece against the occupancy currently recorded on the board.

    ---
    NOTE: No staleness check is done. If the piece was moved (or captured) after this call, the result
    is outdated and the caller should simply query again.
    """
    movement_rule = MOVEMENT_RULES.get(piece.kind)
    if movement_rule is None:
        return []
    return movement_rule(piece.coordinate, piece.color, board)
