"""Wiring: builds the board service the presentation side talks to."""

from typing import Optional

from src.chess.selection import HighlightRenderer
from src.core.logging_config import setup_logging
from src.core.settings import Settings, get_settings
from src.services.board_service import BoardService


def create_board_service(
    settings: Optional[Settings] = None,
    renderer: Optional[HighlightRenderer] = None,
) -> BoardService:
    """Configure logging, create the service and populate the board with the configured starting layout."""
    settings = settings if settings is not None else get_settings()
    setup_logging(settings.log_level)
    service = BoardService(renderer=renderer)
    service.setup(settings.starting_layout)
    return service
