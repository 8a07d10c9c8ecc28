"""Line-fed analyzer for Dylan source text.

The host owns the text and the repaint loop. For each line it builds a
LineStream and calls ``token`` until the stream is exhausted, or calls
``blank_line`` when the line is empty. All resumption state lives in the
AnalyzerState the host passes back in, so an Analyzer can be shared by
any number of documents.

Thread Safety:
Analyzer instances are immutable. AnalyzerState is per-document.

"""

from __future__ import annotations

from dylex.config import LexerConfig, get_lexer_config
from dylex.lexer.classifiers import (
    BodyClassifierMixin,
    HeaderClassifierMixin,
    NumberClassifierMixin,
)
from dylex.lexer.modes import BODY, HEADER, Tokenizer, TokenizerKind
from dylex.lexer.scanners import CommentScannerMixin, StringScannerMixin
from dylex.lexer.state import AnalyzerState, Context
from dylex.stream import LineStream
from dylex.tokens import TokenCategory


class Analyzer(
    # Classifiers (implementers before the mixins that declare them)
    HeaderClassifierMixin,
    NumberClassifierMixin,
    BodyClassifierMixin,
    # Continuation scanners
    StringScannerMixin,
    CommentScannerMixin,
):
    """Incremental classifier for Dylan source.

    Usage:
            >>> analyzer = Analyzer()
            >>> state = analyzer.start_state()
            >>> analyzer.blank_line(state)  # no header
            >>> stream = LineStream("define method")
            >>> analyzer.token(stream, state)
        <TokenCategory.DEF: 'def'>

    """

    __slots__ = ("_config",)

    # Characters that should trigger re-indentation when typed
    electric_chars = ";"

    def __init__(self, config: LexerConfig | None = None) -> None:
        """Initialize analyzer.

        Args:
            config: Lexer configuration (uses the active context config if None)
        """
        self._config = config if config is not None else get_lexer_config()

    @property
    def config(self) -> LexerConfig:
        return self._config

    def start_state(self, base_column: int = 0) -> AnalyzerState:
        """Create the state for a new document, in header mode.

        Args:
            base_column: Column the document's outermost code starts at
        """
        root = Context(
            indented=base_column - self._config.indent_unit,
            column=0,
            kind="top",
            align=False,
        )
        return AnalyzerState(tokenizer=HEADER, contexts=[root], context=0, indented=0)

    def token(self, stream: LineStream, state: AnalyzerState) -> TokenCategory | None:
        """Advance the stream past one span and return its category.

        Consumes at least one character when the stream is not exhausted.
        A run of whitespace is always its own span with no category.
        """
        if stream.sol():
            state.indented = stream.indentation()
        if stream.eat_space():
            return None
        return self._dispatch_tokenizer(stream, state)

    def blank_line(self, state: AnalyzerState) -> None:
        """Handle an empty line.

        The first blank line ends the header block; later ones change nothing.
        """
        if state.tokenizer.kind is TokenizerKind.HEADER:
            state.tokenizer = BODY

    def indent(self, state: AnalyzerState, text_after: str) -> int:
        """Indentation hint for a new line. Indentation is not computed."""
        return 0

    def _dispatch_tokenizer(
        self, stream: LineStream, state: AnalyzerState
    ) -> TokenCategory | None:
        """Run the scanner selected by the active tokenizer."""
        kind = state.tokenizer.kind
        if kind is TokenizerKind.BODY:
            return self._token_base(stream, state)
        if kind is TokenizerKind.HEADER:
            return self._token_header(stream, state)
        if kind is TokenizerKind.STRING:
            return self._scan_string(stream, state)
        return self._scan_comment(stream, state)

    def _chain(
        self, stream: LineStream, state: AnalyzerState, tokenizer: Tokenizer
    ) -> TokenCategory | None:
        """Install tokenizer as the resumption point and run it now."""
        state.tokenizer = tokenizer
        return self._dispatch_tokenizer(stream, state)
