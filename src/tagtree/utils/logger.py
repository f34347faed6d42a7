"""Minimal logging utilities for tagtree.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tagtree.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing markup")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tagtree." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tagtree.mymodule'
    """
    if not (name == "tagtree" or name.startswith("tagtree.")):
        name = f"tagtree.{name}"
    return logging.getLogger(name)
