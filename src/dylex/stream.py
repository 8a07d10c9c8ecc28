"""Cursor over a single source line.

LineStream is what the host hands to ``Analyzer.token``: the full text of
the current line plus a position that tokenizers advance. ``start`` marks
where the current token began so ``current()`` can report its text.

Positions never move backwards during a call, and the host keeps calling
until ``eol()`` is true.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Container

CharTest = Container[str] | Callable[[str], bool]

# Characters eat_space treats as whitespace: ASCII space, tab and line
# breaks, NBSP, and the Unicode space separators. Control characters such as
# \x1c-\x1f and \x85 are not whitespace here even though str.isspace says so.
WHITESPACE: frozenset[str] = frozenset(
    " \t\n\v\f\r\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _accepts(test: CharTest, ch: str) -> bool:
    if callable(test):
        return bool(test(ch))
    return ch in test


class LineStream:
    """Incremental cursor into one line of text.

    Usage:
            >>> stream = LineStream("define x")
            >>> stream.match("define") is not None
            True
            >>> stream.current()
            'define'

    """

    __slots__ = ("string", "pos", "start", "_tab_size")

    def __init__(self, string: str, tab_size: int = 4) -> None:
        """Initialize stream at the start of a line.

        Args:
            string: Line content without its line terminator
            tab_size: Tab width used by indentation()
        """
        self.string = string
        self.pos = 0
        self.start = 0
        self._tab_size = tab_size

    def __repr__(self) -> str:
        return f"LineStream({self.string!r}, pos={self.pos})"

    def sol(self) -> bool:
        """True when the cursor is at the start of the line."""
        return self.pos == 0

    def eol(self) -> bool:
        """True when the whole line has been consumed."""
        return self.pos >= len(self.string)

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end)."""
        if self.pos >= len(self.string):
            return ""
        return self.string[self.pos]

    def next(self) -> str:
        """Consume and return one character ("" at end)."""
        if self.pos >= len(self.string):
            return ""
        ch = self.string[self.pos]
        self.pos += 1
        return ch

    def eat(self, test: str | CharTest) -> str:
        """Consume the next character if it matches.

        Args:
            test: A single character to compare against, a container of
                characters, or a predicate.

        Returns:
            The consumed character, or "" if nothing matched.
        """
        ch = self.peek()
        if not ch:
            return ""
        ok = ch == test if isinstance(test, str) else _accepts(test, ch)
        if ok:
            self.pos += 1
            return ch
        return ""

    def eat_while(self, test: CharTest) -> bool:
        """Consume characters while they match. Returns True if any were eaten."""
        start = self.pos
        string = self.string
        length = len(string)
        while self.pos < length and _accepts(test, string[self.pos]):
            self.pos += 1
        return self.pos > start

    def eat_space(self) -> bool:
        """Consume a run of whitespace. Returns True if any was eaten."""
        start = self.pos
        string = self.string
        length = len(string)
        while self.pos < length and string[self.pos] in WHITESPACE:
            self.pos += 1
        return self.pos > start

    def skip_to_end(self) -> None:
        """Consume the rest of the line."""
        self.pos = len(self.string)

    def skip_to(self, ch: str) -> bool:
        """Move to the next occurrence of ch, leaving it unconsumed.

        Returns:
            True if ch was found. The position is unchanged otherwise.
        """
        found = self.string.find(ch, self.pos)
        if found == -1:
            return False
        self.pos = found
        return True

    def match(
        self, pattern: str | re.Pattern[str], consume: bool = True
    ) -> str | re.Match[str] | None:
        """Match a literal or compiled pattern anchored at the cursor.

        Args:
            pattern: Literal text, or a compiled regex
            consume: Advance past the match when True

        Returns:
            The literal (for str patterns) or the Match object, or None.
        """
        if isinstance(pattern, str):
            if not self.string.startswith(pattern, self.pos):
                return None
            if consume:
                self.pos += len(pattern)
            return pattern

        m = pattern.match(self.string, self.pos)
        if m is not None and consume:
            self.pos = m.end()
        return m

    def current(self) -> str:
        """Text consumed since ``start``."""
        return self.string[self.start : self.pos]

    def indentation(self) -> int:
        """Leading whitespace width, tabs expanded to ``tab_size`` stops."""
        width = 0
        for char in self.string:
            if char == " ":
                width += 1
            elif char == "\t":
                width += self._tab_size - (width % self._tab_size)
            else:
                break
        return width
