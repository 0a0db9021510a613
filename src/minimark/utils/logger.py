"""Logging helpers for minimark.

minimark never installs handlers; applications configure logging as usual
and opt in to parser diagnostics with e.g.
``logging.getLogger("minimark").setLevel(logging.DEBUG)``.

Example:
    >>> from minimark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``minimark.``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'minimark.mymodule'
    """
    if not (name == "minimark" or name.startswith("minimark.")):
        name = f"minimark.{name}"
    return logging.getLogger(name)
