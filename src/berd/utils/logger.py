"""Minimal logging utilities for Berd.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from berd.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "berd." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'berd.mymodule'
    """
    if not (name == "berd" or name.startswith("berd.")):
        name = f"berd.{name}"
    return logging.getLogger(name)
