"""
Package logger. Nothing is printed unless the application opts in, either
through its own logging configuration or by calling `setup_logger()`.
"""

import logging

from rich.logging import RichHandler

LOGGER_NAME = "gceinfo"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    level: int = logging.WARNING, *, rich_tracebacks: bool = True
) -> logging.Logger:
    """Sends gceinfo records to the console through rich, at `level`."""
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # Payload values may contain [brackets]; don't read them as markup
        handler = RichHandler(
            rich_tracebacks=rich_tracebacks, markup=False, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
