"""Centralized logger configuration.

Usage:
    from carbook.logger import get_logger
    logger = get_logger(__name__)

Log records go to the Textual devtools console by default so they never
draw over the terminal UI. Pass a file path to ``setup_logging`` to write
them to disk instead.
"""

import logging
import os

from textual.logging import TextualHandler

DEFAULT_LEVEL = os.getenv("CARBOOK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL, log_file: str | None = None) -> None:
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
