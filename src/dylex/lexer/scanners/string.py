"""String continuation scanner mixin."""

from dylex.lexer.modes import BODY
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class StringScannerMixin:
    """Mixin scanning the inside of a quoted string or ``#"symbol"``.

    There are no escapes: the first matching quote closes the string.
    A string left open at end of line stays installed and resumes on the
    next line.

    """

    def _scan_string(self, stream: LineStream, state: AnalyzerState) -> TokenCategory | None:
        tokenizer = state.tokenizer
        quote = tokenizer.quote
        found = stream.string.find(quote, stream.pos)
        if found == -1:
            stream.skip_to_end()
        else:
            stream.pos = found + 1
            state.tokenizer = BODY
        return tokenizer.category
