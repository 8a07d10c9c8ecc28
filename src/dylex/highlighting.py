"""HTML syntax highlighting for Dylan source.

DylanHighlighter follows the common highlighter protocol
(``highlight(code, language, hl_lines, show_linenos)`` and
``supports_language(language)``), so it can be passed to any host that
accepts a highlighter.

Each classified span becomes ``<span class="cm-<category>">``; spans with
no category are emitted as plain escaped text.

Usage:
    from dylex.highlighting import highlight

    html = highlight("define constant $pi = 3.14159;", "dylan")
"""

from __future__ import annotations

from html import escape
from typing import Protocol

from dylex.config import LexerConfig
from dylex.errors import UnknownModeError
from dylex.lexer.document import lex_line, split_lines
from dylex.registry import ModeRegistry, create_default_registry
from dylex.tokens import Token
from dylex.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Contract:
        - MUST return valid HTML (never raise for bad input)
        - MUST escape HTML entities in code
        - MUST use CSS classes (not inline styles)
        - SHOULD fall back to plain text for unknown languages
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str: ...

    def supports_language(self, language: str) -> bool: ...


class DylanHighlighter:
    """Highlighter for Dylan source, header block included.

    Thread Safety:
        Stateless apart from its immutable registry and config; a fresh
        analyzer state is created for every call.
    """

    __slots__ = ("_registry", "_config")

    def __init__(
        self,
        registry: ModeRegistry | None = None,
        config: LexerConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else create_default_registry()
        self._config = config

    def supports_language(self, language: str) -> bool:
        """True for registered mode names and MIME types (case-insensitive)."""
        return language.lower() in self._registry

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code as HTML.

        Args:
            code: Source code to highlight
            language: Mode name or MIME type
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Prefix each line with its number

        Returns:
            HTML markup. Unsupported languages are returned escaped but
            otherwise unhighlighted.
        """
        try:
            mode = self._registry.mode_for(language.lower())
        except UnknownModeError:
            logger.debug("No highlighting for language %r", language)
            return _wrap(escape(code), language)

        analyzer = self._registry.get(mode, self._config)
        state = analyzer.start_state()
        emphasized = set(hl_lines) if hl_lines else set()
        rendered = []
        for index, (offset, text) in enumerate(split_lines(code), start=1):
            tokens = lex_line(analyzer, state, text, index, offset)
            html = "".join(_render_token(t) for t in tokens)
            if show_linenos:
                html = f'<span class="lineno">{index}</span>{html}'
            if index in emphasized:
                html = f'<span class="hll">{html}</span>'
            rendered.append(html)
        return _wrap("\n".join(rendered), mode)


def _render_token(token: Token) -> str:
    text = escape(token.value)
    css = token.css_class
    if css is None:
        return text
    return f'<span class="{css}">{text}</span>'


def _wrap(body: str, language: str) -> str:
    lang_class = f' class="language-{escape(language)}"' if language else ""
    return f'<pre class="dylex"><code{lang_class}>{body}</code></pre>'


_default_highlighter = DylanHighlighter()


def highlight(
    code: str,
    language: str = "dylan",
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code with the default DylanHighlighter."""
    return _default_highlighter.highlight(
        code, language, hl_lines=hl_lines, show_linenos=show_linenos
    )
