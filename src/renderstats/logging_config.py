"""
Logging configuration.

Sets up the ``renderstats`` logger that the log renderer writes to.
By default records are written as bare messages on stderr so
report lines keep their exact text. Rich output is opt-in for terminals.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    rich_output: bool = False,
) -> logging.Logger:
    """
    Configure the ``renderstats`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write log lines to
        rich_output: Decorate terminal output with Rich (level column, colors)
            instead of bare lines on stderr

    Returns:
        The configured logger
    """
    logger = logging.getLogger("renderstats")
    logger.setLevel(level)

    # Avoid duplicate lines when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(message)s")

    console_handler: logging.Handler
    if rich_output:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(file_handler)

    return logger
