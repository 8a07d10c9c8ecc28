"""
dylex — Line-fed lexical analyzer for Dylan source files

Classifies Dylan source for syntax highlighting one span at a time,
keeping enough state between lines to resume inside strings, block
comments, and the RFC-822 style file header. Zero runtime dependencies.

Quick Start:
    >>> from dylex import tokenize
    >>> for token in tokenize("Module: hello\\n\\ndefine constant $x = #xFF;"):
    ...     print(token)

    >>> # Drive the analyzer line by line, as an editor does
    >>> from dylex import Analyzer, LineStream
    >>> analyzer = Analyzer()
    >>> state = analyzer.start_state()
    >>> analyzer.blank_line(state)
    >>> stream = LineStream("/* open comment")
    >>> analyzer.token(stream, state)
    <TokenCategory.COMMENT: 'comment'>

Installation:
    pip install dylex
"""

from collections.abc import Iterator

from dylex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from dylex.errors import ConfigError, DylexError, StateError, UnknownModeError
from dylex.highlighting import DylanHighlighter, Highlighter, highlight
from dylex.incremental import LexedDocument, LexedLine, lex_document, relex
from dylex.lexer import (
    Analyzer,
    AnalyzerState,
    Context,
    Lexer,
    Tokenizer,
    TokenizerKind,
)
from dylex.registry import ModeRegistry, ModeRegistryBuilder, create_default_registry
from dylex.serialization import (
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)
from dylex.stream import LineStream
from dylex.tokens import Token, TokenCategory

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexerConfig | None = None,
) -> Iterator[Token]:
    """Tokenize a whole Dylan document.

    Args:
        source: Dylan source text, header included
        source_file: Optional source file path recorded on tokens
        config: Lexer configuration (uses the active context config if None)

    Yields:
        Token spans in document order. Blank lines produce no tokens.
    """
    yield from Lexer(source, source_file=source_file, config=config).tokenize()


__all__ = [
    "Analyzer",
    "AnalyzerState",
    "ConfigError",
    "Context",
    "DylanHighlighter",
    "DylexError",
    "Highlighter",
    "LexedDocument",
    "LexedLine",
    "Lexer",
    "LexerConfig",
    "LineStream",
    "ModeRegistry",
    "ModeRegistryBuilder",
    "StateError",
    "Token",
    "TokenCategory",
    "Tokenizer",
    "TokenizerKind",
    "UnknownModeError",
    "__version__",
    "create_default_registry",
    "get_lexer_config",
    "highlight",
    "lex_document",
    "lexer_config_context",
    "relex",
    "reset_lexer_config",
    "set_lexer_config",
    "state_from_dict",
    "state_from_json",
    "state_to_dict",
    "state_to_json",
    "tokenize",
]
