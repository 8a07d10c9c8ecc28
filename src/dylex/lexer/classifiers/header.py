"""Header block classifier mixin."""

from dylex.lexer.charsets import HEADER_KEYWORD
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class HeaderClassifierMixin:
    """Mixin providing header-mode classification.

    A header line is either a keyword line ("Module: foo") or a value or
    continuation line. A keyword begins at the start of a line with an ASCII
    word character (letter, digit or underscore), continues with word
    characters or hyphens, and ends with a colon.

    """

    def _token_header(self, stream: LineStream, state: AnalyzerState) -> TokenCategory:
        """Classify one header span.

        The keyword span covers the keyword, its colon and the character
        after the colon. Everything else is reported one character at a time.
        """
        if stream.sol() and stream.match(HEADER_KEYWORD):
            stream.next()
            return TokenCategory.HEADER_KEYWORD
        stream.next()
        return TokenCategory.HEADER_VALUE
