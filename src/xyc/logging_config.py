"""
Logging configuration for xyc.

Log records go to stderr through a rich handler so they never mix with the
tables printed on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Route xyc log records to stderr through a rich handler.

    Calling it again replaces the handler, so the level can be raised or
    lowered once the configuration file has been read.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings), or
            "verbose" (debug, with source locations)

    Returns:
        Configured logger instance for xyc
    """
    level = LEVELS.get(verbosity, logging.WARNING)
    verbose = verbosity == "verbose"

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    logger = logging.getLogger("xyc")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'xyc.scanning.scanner')
              If None, returns the root xyc logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("xyc")

    if not name.startswith("xyc"):
        name = f"xyc.{name}"

    return logging.getLogger(name)
