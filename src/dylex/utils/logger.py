"""Logging helpers for dylex.

Lexing is silent by default; loggers are namespaced under ``dylex.`` so a
host can enable DEBUG output for mode transitions and incremental reuse.

Example:
    >>> from dylex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("header ended at line %d", 4)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger under the "dylex." namespace

    Example:
        >>> get_logger("highlight").name
        'dylex.highlight'
    """
    if not (name == "dylex" or name.startswith("dylex.")):
        name = f"dylex.{name}"
    return logging.getLogger(name)
