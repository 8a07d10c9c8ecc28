"""Line-fed lexical analyzer for Dylan source files.

Dylan files start with an optional RFC-822 style header block ended by the
first blank line; the rest is program text. The analyzer classifies one
span per call and keeps resumption state between calls, so strings and
block comments may span lines.

Architecture:
lexer/
├── __init__.py          # Re-exports Analyzer, Lexer, AnalyzerState
├── core.py              # Analyzer (mixin composition + tokenizer dispatch)
├── document.py          # Lexer: whole-document driver
├── modes.py             # Tokenizer values (HEADER, BODY, STRING, COMMENT)
├── state.py             # AnalyzerState and Context arena
├── charsets.py          # Character sets and anchored patterns
├── classifiers/
│   ├── header.py        # Header keyword/value lines
│   ├── body.py          # Body dispatch
│   └── numbers.py       # Decimal and # literals
└── scanners/
    ├── string.py        # Quoted strings and #"symbols"
    └── comment.py       # /* block comments */

Usage:
    >>> from dylex.lexer import Lexer
    >>> [t.category for t in Lexer("\\n#xFF").tokenize()]
    [<TokenCategory.NUMBER: 'number'>]

"""

from dylex.lexer.core import Analyzer
from dylex.lexer.document import Lexer, lex_line, split_lines
from dylex.lexer.modes import BODY, COMMENT, HEADER, Tokenizer, TokenizerKind
from dylex.lexer.state import AnalyzerState, Context

__all__ = [
    "Analyzer",
    "AnalyzerState",
    "BODY",
    "COMMENT",
    "Context",
    "HEADER",
    "Lexer",
    "Tokenizer",
    "TokenizerKind",
    "lex_line",
    "split_lines",
]
