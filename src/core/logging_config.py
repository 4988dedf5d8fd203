"""Logging setup for the application."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Attach a console handler to the package logger. Calling it again only changes the level."""
    package_logger = logging.getLogger("src")
    package_logger.setLevel(level)

    if any(
        getattr(handler, "name", None) == "chessboard-console"
        for handler in package_logger.handlers
    ):
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name("chessboard-console")
    console_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    package_logger.addHandler(console_handler)
