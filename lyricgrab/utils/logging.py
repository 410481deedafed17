from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "lyricgrab"

# Chatty third-party loggers kept at WARNING unless we are debugging
_NOISY = ("httpx", "httpcore", "hpack")


def setup_logger(level: str = "INFO") -> logging.Logger:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    console = Console(stderr=True, highlight=False)
    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False, rich_tracebacks=True)
    logging.basicConfig(level=numeric_level, format="%(message)s", handlers=[handler], force=True)
    for name in _NOISY:
        logging.getLogger(name).setLevel(numeric_level if numeric_level <= logging.DEBUG else logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)
