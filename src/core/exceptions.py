"""
Custom exceptions.

The rules core itself never raises: out-of-range coordinates and empty squares are ordinary results there.
These are only used at the edges (parsing layouts, handling requests).
"""


class ChessboardError(Exception):
    """Top-level exception, anything raised on purpose by this package derives from it."""


class InvalidLayoutError(ChessboardError):
    """Placement string cannot be parsed into pieces."""


class InvalidRequestError(ChessboardError):
    """Request data cannot be interpreted."""


class EmptySquareError(ChessboardError):
    """A request refers to a square without a piece on it."""
