"""Minimal logging utilities for patchmark.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications decide where records go.

Example:
    >>> from patchmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Splitting document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "patchmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'patchmark.mymodule'
    """
    if not (name == "patchmark" or name.startswith("patchmark.")):
        name = f"patchmark.{name}"
    return logging.getLogger(name)
