"""Body (program text) classifier mixin."""

from dylex.lexer.charsets import DEFINE, DIGITS, QUOTES, SYMBOL, SYMBOL_CHARS
from dylex.lexer.modes import COMMENT, Tokenizer, string_continuation
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class BodyClassifierMixin:
    """Mixin providing body-mode dispatch.

    Peeks the next character and either classifies a self-contained lexeme
    in one call or installs a continuation scanner. Order matters:

    1. quotes           -> string continuation
    2. ``/``            -> block comment, line comment, or operator
    3. digit            -> decimal number
    4. ``#``            -> hash literal
    5. ``define``       -> definition keyword
    6. symbol           -> variable
    7. anything else    -> one character, no category

    """

    def _chain(
        self, stream: LineStream, state: AnalyzerState, tokenizer: Tokenizer
    ) -> TokenCategory | None:
        """Install tokenizer and run it. Implemented by Analyzer."""
        raise NotImplementedError

    def _classify_decimal(self, stream: LineStream) -> TokenCategory:
        """Consume a decimal literal. Implemented by NumberClassifierMixin."""
        raise NotImplementedError

    def _classify_hash(
        self, stream: LineStream, state: AnalyzerState
    ) -> TokenCategory | None:
        """Consume a hash literal. Implemented by NumberClassifierMixin."""
        raise NotImplementedError

    def _token_base(self, stream: LineStream, state: AnalyzerState) -> TokenCategory | None:
        """Classify one body lexeme starting at a non-space character."""
        ch = stream.peek()

        if ch in QUOTES:
            stream.next()
            return self._chain(stream, state, string_continuation(ch, TokenCategory.STRING))

        if ch == "/":
            stream.next()
            if stream.eat("*"):
                return self._chain(stream, state, COMMENT)
            if stream.eat("/"):
                stream.skip_to_end()
                return TokenCategory.COMMENT
            stream.skip_to(" ")
            return TokenCategory.OPERATOR

        if ch in DIGITS:
            return self._classify_decimal(stream)

        if ch == "#":
            return self._classify_hash(stream, state)

        if self._at_define(stream):
            stream.match(DEFINE)
            return TokenCategory.DEF

        if stream.match(SYMBOL):
            return TokenCategory.VARIABLE

        stream.next()
        return None

    def _at_define(self, stream: LineStream) -> bool:
        """True if ``define`` starts here as a whole symbol, not a prefix."""
        if stream.match(DEFINE, consume=False) is None:
            return False
        end = stream.pos + len(DEFINE)
        return end >= len(stream.string) or stream.string[end] not in SYMBOL_CHARS
