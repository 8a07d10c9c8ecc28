"""Lexeme classifiers for the dylex analyzer.

Each classifier is a mixin providing the classification logic for one
tokenizer mode or lexeme family.
"""

from dylex.lexer.classifiers.body import BodyClassifierMixin
from dylex.lexer.classifiers.header import HeaderClassifierMixin
from dylex.lexer.classifiers.numbers import NumberClassifierMixin

__all__ = [
    "BodyClassifierMixin",
    "HeaderClassifierMixin",
    "NumberClassifierMixin",
]
