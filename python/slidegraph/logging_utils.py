"""Logging setup: every diagnostic goes to stderr through Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

DEFAULT_LEVEL = "info"

stderr_console = Console(stderr=True)


def setup_logging(level: str = DEFAULT_LEVEL, console: Console | None = None) -> logging.Logger:
    """Configure the ``slidegraph`` logger and return it.

    Calling this again replaces the handler instead of stacking a second
    one.
    """
    logger = logging.getLogger("slidegraph")
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(LOG_LEVELS[level])
    handler = RichHandler(
        console=console or stderr_console,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
