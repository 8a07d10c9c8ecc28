"""Utility modules for dylex.

Provides:
- logger: get_logger for namespaced logging
"""

from dylex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
