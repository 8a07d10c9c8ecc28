"""Continuation scanners for the dylex analyzer.

Each scanner is a mixin handling one construct that may span calls and
lines (STRING, COMMENT).
"""

from dylex.lexer.scanners.comment import CommentScannerMixin
from dylex.lexer.scanners.string import StringScannerMixin

__all__ = [
    "CommentScannerMixin",
    "StringScannerMixin",
]
