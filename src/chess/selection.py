"""
Selection state machine: at most one piece is selected at any time.

Selecting a piece computes its candidate moves; selecting it again clears the selection;
selecting another piece switches over in a single call.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from src.chess.moves import Board, Move, generate_moves
from src.chess.pieces import Piece

logger = logging.getLogger(__name__)


class HighlightRenderer(Protocol):
    """Presentation side: draws/erases the markers for candidate moves"""

    def show_moves(self, piece: Piece, moves: list[Move]) -> None: ...
    def clear_highlights(self) -> None: ...


@dataclass(frozen=True)
class SelectionEvent:
    """Outcome of a selection: the newly selected piece with its moves, or a cleared selection."""

    selected: Optional[Piece]
    moves: list[Move] = field(default_factory=list)

    @property
    def cleared(self) -> bool:
        return self.selected is None


class SelectionController:
    def __init__(
        self, board: Board, renderer: Optional[HighlightRenderer] = None
    ) -> None:
        self.board = board
        self.renderer = renderer
        self._selected: Optional[Piece] = None

    @property
    def selected(self) -> Optional[Piece]:
        return self._selected

    def select(self, piece: Piece) -> SelectionEvent:
        # clicking the selected piece again toggles it off
        if self._selected is piece:
            return self.deselect()

        if self._selected is not None:
            self._clear_selection(self._selected)

        self._selected = piece
        piece.is_selected = True
        moves = generate_moves(piece, self.board)
        logger.debug("Selected %r, %d candidate moves", piece, len(moves))
        if self.renderer is not None:
            self.renderer.show_moves(piece, moves)
        return SelectionEvent(selected=piece, moves=moves)

    def deselect(self) -> SelectionEvent:
        """Clear the selection (no-op on the state if nothing is selected)."""
        if self._selected is not None:
            self._clear_selection(self._selected)
        return SelectionEvent(selected=None)

    def refresh(self) -> SelectionEvent:
        """
        Recompute the moves of the selected piece after the board changed, and redraw its highlights.
        Nothing happens when no piece is selected.
        """
        piece = self._selected
        if piece is None:
            return SelectionEvent(selected=None)

        moves = generate_moves(piece, self.board)
        logger.debug("Refreshed %r, %d candidate moves", piece, len(moves))
        if self.renderer is not None:
            self.renderer.clear_highlights()
            self.renderer.show_moves(piece, moves)
        return SelectionEvent(selected=piece, moves=moves)

    def _clear_selection(self, piece: Piece) -> None:
        logger.debug("Deselected %r", piece)
        piece.is_selected = False
        self._selected = None
        if self.renderer is not None:
            self.renderer.clear_highlights()
