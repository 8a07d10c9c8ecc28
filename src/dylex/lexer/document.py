"""Whole-document driver for the line-fed Analyzer.

Plays the role of the host editor: splits source into lines, feeds each
line to the Analyzer through a LineStream, and turns the returned
categories into Token spans with source coordinates.

Lines are separated by ``\\n``, ``\\r\\n`` or ``\\r``. Text after the final
separator is a line of its own, so ``"a\\n"`` has two lines, the second
one blank.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from dylex.config import LexerConfig
from dylex.lexer.core import Analyzer
from dylex.lexer.modes import TokenizerKind
from dylex.lexer.state import AnalyzerState
from dylex.stream import LineStream
from dylex.tokens import Token
from dylex.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(source: str) -> list[tuple[int, str]]:
    """Split source into (start_offset, line_text) pairs.

    Always returns at least one line.
    """
    lines: list[tuple[int, str]] = []
    start = 0
    for m in _LINE_BREAK.finditer(source):
        lines.append((start, source[start : m.start()]))
        start = m.end()
    lines.append((start, source[start:]))
    return lines


def lex_line(
    analyzer: Analyzer,
    state: AnalyzerState,
    text: str,
    lineno: int,
    offset: int,
    source_file: str | None = None,
) -> tuple[Token, ...]:
    """Classify one line, mutating state.

    Args:
        analyzer: Analyzer to drive
        state: Document state; left at the start of the next line
        text: Line content without terminator
        lineno: Line number (1-indexed)
        offset: Absolute offset of the line start
        source_file: Optional source path recorded on tokens

    Returns:
        Tokens covering the line left to right. Empty for a blank line.
    """
    if not text:
        was_header = state.tokenizer.kind is TokenizerKind.HEADER
        analyzer.blank_line(state)
        if was_header and state.tokenizer.kind is not TokenizerKind.HEADER:
            logger.debug("Header block ended at line %d", lineno)
        return ()

    stream = LineStream(text, tab_size=analyzer.config.tab_size)
    tokens: list[Token] = []
    while not stream.eol():
        stream.start = stream.pos
        category = analyzer.token(stream, state)
        tokens.append(
            Token(
                category=category,
                value=stream.current(),
                lineno=lineno,
                col=stream.start + 1,
                start_offset=offset + stream.start,
                end_offset=offset + stream.pos,
                source_file=source_file,
            )
        )
    return tuple(tokens)


class Lexer:
    """Tokenize a complete document.

    Usage:
            >>> lexer = Lexer("Module: hello\\n\\ndefine method")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADER_KEYWORD, 'Module: ', 1:1)
        Token(HEADER_VALUE, 'h', 1:9)
        ...
        Token(DEF, 'define', 3:1)
        Token(NULL, ' ', 3:7)
        Token(VARIABLE, 'method', 3:8)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_file", "_analyzer", "_state")

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexerConfig | None = None,
        *,
        base_column: int = 0,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Dylan source text, header included
            source_file: Optional source file path recorded on tokens
            config: Lexer configuration (uses the active context config if None)
            base_column: Base column passed to ``Analyzer.start_state``
        """
        self._source = source
        self._source_file = source_file
        self._analyzer = Analyzer(config)
        self._state = self._analyzer.start_state(base_column)

    @property
    def analyzer(self) -> Analyzer:
        return self._analyzer

    @property
    def state(self) -> AnalyzerState:
        """Analyzer state; after tokenizing, the state at end of document."""
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Yield every span of the document in order."""
        for line_tokens in self.tokenize_lines():
            yield from line_tokens

    def tokenize_lines(self) -> Iterator[tuple[Token, ...]]:
        """Yield one tuple of tokens per line (empty for blank lines)."""
        for index, (offset, text) in enumerate(split_lines(self._source)):
            yield lex_line(
                self._analyzer,
                self._state,
                text,
                index + 1,
                offset,
                self._source_file,
            )
