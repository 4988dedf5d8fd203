"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.layout import pieces_from_layout
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.registry import BoardRegistry


def _layout_with(*placements: tuple[str, int, int]) -> str:
    """Build a layout string from (symbol, row, column) triples, ex. ("R", 3, 3)"""
    rows = [["1"] * 8 for _ in range(8)]
    for symbol, row, column in placements:
        rows[row][column] = symbol

    def _compress(cells: list[str]) -> str:
        result: list[str] = []
        empty_count = 0
        for cell in cells:
            if cell == "1":
                empty_count += 1
                continue
            if empty_count:
                result.append(str(empty_count))
                empty_count = 0
            result.append(cell)
        if empty_count:
            result.append(str(empty_count))
        return "".join(result)

    return "/".join(_compress(row) for row in rows)


@pytest.fixture
def layout_with() -> Callable[..., str]:
    """Call the inner function with (symbol, row, column) triples to get a layout string"""
    return _layout_with


@pytest.fixture
def registry_from_layout() -> Callable[[str], BoardRegistry]:
    """Call the inner function with a layout string to get an initialized registry"""

    def _create_registry(layout: str) -> BoardRegistry:
        registry = BoardRegistry()
        registry.initialize_once(pieces_from_layout(layout))
        return registry

    return _create_registry


class RecordingRenderer:
    """Stand-in for the presentation layer: remembers what it was asked to draw"""

    def __init__(self) -> None:
        self.shown: list[tuple[Piece, list[Move]]] = []
        self.clear_count = 0

    def show_moves(self, piece: Piece, moves: list[Move]) -> None:
        self.shown.append((piece, moves))

    def clear_highlights(self) -> None:
        self.clear_count += 1


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
