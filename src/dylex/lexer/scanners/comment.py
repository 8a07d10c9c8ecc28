"""Block comment continuation scanner mixin."""

from dylex.lexer.modes import BODY
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class CommentScannerMixin:
    """Mixin scanning the inside of a ``/* ... */`` comment.

    Comments do not nest: the first ``*/`` closes the comment whatever
    ``/*`` sequences precede it.

    """

    def _scan_comment(self, stream: LineStream, state: AnalyzerState) -> TokenCategory:
        maybe_end = False
        while ch := stream.next():
            if ch == "/" and maybe_end:
                state.tokenizer = BODY
                break
            maybe_end = ch == "*"
        return TokenCategory.COMMENT
