"""Tokenizer modes for the dylex analyzer.

The active tokenizer is a value, not a function reference: a frozen
Tokenizer records which scanner runs next and, for string continuations,
the quote it waits for and the category it reports. Values compare by
content, so saved states can be compared and serialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dylex.tokens import TokenCategory


class TokenizerKind(Enum):
    """Which scanner handles the next call.

    - HEADER: RFC-822 style header block, until the first blank line
    - BODY: program text, dispatching on the leading character
    - STRING: inside a quoted string or #"symbol", possibly across lines
    - COMMENT: inside a /* block comment */, possibly across lines

    """

    HEADER = auto()
    BODY = auto()
    STRING = auto()
    COMMENT = auto()


@dataclass(frozen=True, slots=True)
class Tokenizer:
    """The resumption point of an AnalyzerState.

    Attributes:
        kind: Scanner to run
        quote: Closing quote character (STRING only)
        category: Category reported while scanning (STRING only)

    """

    kind: TokenizerKind
    quote: str = ""
    category: TokenCategory | None = None

    @property
    def is_continuation(self) -> bool:
        """True while inside a construct that spans calls."""
        return self.kind in (TokenizerKind.STRING, TokenizerKind.COMMENT)


HEADER = Tokenizer(TokenizerKind.HEADER)
BODY = Tokenizer(TokenizerKind.BODY)
COMMENT = Tokenizer(TokenizerKind.COMMENT, category=TokenCategory.COMMENT)


def string_continuation(quote: str, category: TokenCategory) -> Tokenizer:
    """Tokenizer that scans to ``quote`` and reports ``category``."""
    return Tokenizer(TokenizerKind.STRING, quote=quote, category=category)
