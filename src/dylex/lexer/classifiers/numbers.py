"""Numeric and hash-literal classifier mixin."""

from dylex.lexer.charsets import (
    BINARY_DIGITS,
    DECIMAL,
    HASH_SYMBOL_CHARS,
    HEX_DIGITS,
    OCTAL_DIGITS,
)
from dylex.lexer.modes import Tokenizer, string_continuation
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class NumberClassifierMixin:
    """Mixin classifying decimal numbers and ``#`` literals."""

    def _chain(
        self, stream: LineStream, state: AnalyzerState, tokenizer: Tokenizer
    ) -> TokenCategory | None:
        """Install tokenizer and run it. Implemented by Analyzer."""
        raise NotImplementedError

    def _classify_decimal(self, stream: LineStream) -> TokenCategory:
        """Consume a decimal literal. The cursor is on a digit."""
        stream.match(DECIMAL)
        return TokenCategory.NUMBER

    def _classify_hash(
        self, stream: LineStream, state: AnalyzerState
    ) -> TokenCategory | None:
        """Consume a hash literal. The cursor is on the ``#``.

        Handles:
            #"symbol"   string-syntax symbol, reported as ATOM until the
                        closing quote (may span lines)
            #b1010      binary
            #xFF        hexadecimal
            #o17        octal
            #t, #key    hash symbols
        """
        stream.next()
        ch = stream.peek()

        if ch == '"':
            stream.next()
            return self._chain(stream, state, string_continuation('"', TokenCategory.ATOM))

        if ch == "b":
            stream.next()
            stream.eat_while(BINARY_DIGITS)
            return TokenCategory.NUMBER

        if ch == "x":
            stream.next()
            stream.eat_while(HEX_DIGITS)
            return TokenCategory.NUMBER

        if ch == "o":
            stream.next()
            stream.eat_while(OCTAL_DIGITS)
            return TokenCategory.NUMBER

        stream.eat_while(HASH_SYMBOL_CHARS)
        return TokenCategory.ATOM
