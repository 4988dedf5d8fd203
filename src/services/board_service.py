"""Orchestration of requests from the presentation side to the registry, move generation and selection (and the reverse direction)."""

import logging
from threading import Lock
from typing import Optional

from src.api.models import (
    BoardResponse,
    MovePieceRequest,
    MoveResponse,
    MovesRequest,
    MovesResponse,
    PieceResponse,
    SelectionResponse,
    SelectRequest,
)
from src.chess.layout import pieces_from_layout
from src.chess.moves import Move, generate_moves
from src.chess.pieces import Piece
from src.chess.registry import BoardRegistry
from src.chess.selection import HighlightRenderer, SelectionController
from src.chess.square import Coordinate
from src.core.exceptions import EmptySquareError
from src.core.settings import get_settings
from src.core.shared_types import Color, PieceKind

logger = logging.getLogger(__name__)


class BoardService:
    """
    One board, shared by every caller.

    All registry mutations and selection transitions go through a single lock, so concurrent callers
    never observe a piece on two squares or two pieces selected.
    """

    def __init__(
        self,
        registry: Optional[BoardRegistry] = None,
        renderer: Optional[HighlightRenderer] = None,
    ) -> None:
        self.registry = registry if registry is not None else BoardRegistry()
        self.selection = SelectionController(self.registry, renderer)
        self._lock = Lock()

    # -- Requests ---
    def setup(self, layout: Optional[str] = None) -> BoardResponse:
        """Populate the registry with the starting position. Only the first call has an effect."""
        layout = layout if layout is not None else get_settings().starting_layout
        with self._lock:
            if not self.registry.is_initialized:
                self.registry.initialize_once(pieces_from_layout(layout))
            return self._board_response()

    def select(self, request: SelectRequest) -> SelectionResponse:
        """The user clicked on a piece."""
        with self._lock:
            piece = self._fetch_piece(request.square)
            event = self.selection.select(piece)
            return SelectionResponse(
                selected=self._piece_response(event.selected),
                moves=[self._move_response(move) for move in event.moves],
            )

    def candidate_moves(self, request: MovesRequest) -> MovesResponse:
        """Moves of the piece on the given square, without changing the selection."""
        with self._lock:
            piece = self._fetch_piece(request.square)
            moves = generate_moves(piece, self.registry)
            return MovesResponse(
                piece=self._piece_response(piece),
                moves=[self._move_response(move) for move in moves],
            )

    def move_piece(self, request: MovePieceRequest) -> BoardResponse:
        """
        Relocate a piece.

        ---
        NOTE: No legality check: turn order and check are not handled here. Whoever drives the pieces decides.
        A piece that stays selected gets its moves recomputed against the new occupancy.
        """
        with self._lock:
            piece = self._fetch_piece(request.from_square)
            if piece is self.selection.selected:
                self.selection.deselect()

            target = Coordinate.from_algebraic(request.to_square)
            displaced = self.registry.relocate(piece, target.row, target.column)
            if displaced is not None:
                if displaced is self.selection.selected:
                    self.selection.deselect()
                logger.info("%r took %r", piece, displaced)
            self.selection.refresh()
            return self._board_response()

    def board_state(self) -> BoardResponse:
        with self._lock:
            return self._board_response()

    # -- Internal helpers --
    def _fetch_piece(self, square_name: str) -> Piece:
        """Find the piece on the square and raise error if there is none."""
        square = Coordinate.from_algebraic(square_name)
        piece = self.registry.piece_at(square.row, square.column)
        if piece is None:
            raise EmptySquareError(f"No piece on {square_name}.")
        return piece

    def _board_response(self) -> BoardResponse:
        return BoardResponse(
            layout=self.registry.to_layout(),
            selected=self._piece_response(self.selection.selected),
        )

    @staticmethod
    def _piece_response(piece: Optional[Piece]) -> Optional[PieceResponse]:
        if piece is None:
            return None
        return PieceResponse(
            square=piece.coordinate.to_algebraic(),
            kind=PieceKind[piece.kind.name],
            color=Color[piece.color.name],
        )

    @staticmethod
    def _move_response(move: Move) -> MoveResponse:
        return MoveResponse(
            square=move.coordinate.to_algebraic(),
            row=move.row,
            column=move.column,
            is_capture=move.is_capture,
        )
