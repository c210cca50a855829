"""Logging configuration for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nzbsplit"


def configure_logging(verbose: bool = False, *, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Repeated calls only adjust the level.
    """
    level = logging.INFO if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console, show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
