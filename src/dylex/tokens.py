"""Token categories and Token spans produced by the dylex lexer.

The analyzer emits one TokenCategory (or None, the null category) per call.
The document driver pairs each category with the text it covered and the
span's source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenCategory is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenCategory(Enum):
    """Highlighting categories.

    Values are the CSS-style names a renderer uses (``cm-<value>``).
    The null category, "no highlighting", is represented by ``None``.

    """

    # Header block
    HEADER_KEYWORD = "header-keyword"  # Module:
    HEADER_VALUE = "header-value"

    # Body
    STRING = "string"  # "text" or 'c'
    COMMENT = "comment"  # // line or /* block */
    NUMBER = "number"  # 12, 1.5e3, #b101, #xFF, #o17
    ATOM = "atom"  # #t, #key, #"symbol"
    OPERATOR = "operator"  # /foo
    DEF = "def"  # define
    VARIABLE = "variable"  # <object>, make, *global*

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of one source line.

    Attributes:
        category: Highlighting category, or None for unhighlighted text
        value: The exact source text of the span
        lineno: Line number (1-indexed)
        col: Column of the first character (1-indexed)
        start_offset: Absolute start position in source
        end_offset: Absolute end position in source (exclusive)
        source_file: Optional source file path

    """

    category: TokenCategory | None
    value: str
    lineno: int
    col: int
    start_offset: int
    end_offset: int
    source_file: str | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        name = self.category.name if self.category is not None else "NULL"
        return f"Token({name}, {val!r}, {self.lineno}:{self.col})"

    @property
    def css_class(self) -> str | None:
        """CSS class for renderers, or None for the null category."""
        if self.category is None:
            return None
        return f"cm-{self.category.value}"
