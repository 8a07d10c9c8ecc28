"""Incremental relexing for edited documents.

Tokens of a line depend only on the analyzer state at the start of that
line and the line's text. ``lex_document`` records that state for every
line; after an edit, ``relex`` resumes from the recorded state at the first
changed line and stops as soon as it reaches a line whose text is in the
unchanged tail of the document and whose start state matches the previous
run. Everything after that point is reused with shifted coordinates.

The result always equals a full ``lex_document`` of the new source.

Fallback:
    Arguments that do not describe an edit of ``previous`` (line out of
    range, or lines before it that actually changed) fall back to a full
    lex.

Thread Safety:
    Both functions are pure: they never mutate ``previous``.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from dylex.config import LexerConfig, get_lexer_config
from dylex.lexer.core import Analyzer
from dylex.lexer.document import lex_line, split_lines
from dylex.lexer.state import AnalyzerState
from dylex.tokens import Token
from dylex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LexedLine:
    """One line of a lexed document.

    Attributes:
        text: Line content without terminator
        offset: Absolute offset of the line start
        tokens: Spans covering the line
        start_state: Snapshot of the analyzer state before the line

    """

    text: str
    offset: int
    tokens: tuple[Token, ...]
    start_state: AnalyzerState


@dataclass(frozen=True, slots=True)
class LexedDocument:
    """Tokens plus per-line resumption states for a whole document."""

    source: str
    lines: tuple[LexedLine, ...]
    end_state: AnalyzerState
    config: LexerConfig
    source_file: str | None = None

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All spans in document order."""
        return tuple(token for line in self.lines for token in line.tokens)


def lex_document(
    source: str,
    *,
    source_file: str | None = None,
    config: LexerConfig | None = None,
) -> LexedDocument:
    """Lex a whole document, recording the state at every line start."""
    config = config if config is not None else get_lexer_config()
    analyzer = Analyzer(config)
    state = analyzer.start_state()
    lines = []
    for index, (offset, text) in enumerate(split_lines(source)):
        snapshot = state.copy()
        tokens = lex_line(analyzer, state, text, index + 1, offset, source_file)
        lines.append(LexedLine(text, offset, tokens, snapshot))
    return LexedDocument(source, tuple(lines), state, config, source_file)


def relex(
    previous: LexedDocument,
    new_source: str,
    first_changed_line: int,
) -> LexedDocument:
    """Relex ``new_source`` reusing as much of ``previous`` as possible.

    Args:
        previous: Result of lexing the document before the edit
        new_source: The complete document after the edit
        first_changed_line: First line (1-indexed) whose text or line
            terminator differs between the two versions

    Returns:
        A LexedDocument equal to ``lex_document(new_source)``.
    """
    old_lines = previous.lines
    new_lines = split_lines(new_source)
    start = first_changed_line - 1

    if not 0 <= start < min(len(old_lines), len(new_lines)):
        logger.debug("Edit at line %d out of range, full relex", first_changed_line)
        return _full_lex(previous, new_source)

    for old, (offset, text) in zip(old_lines[:start], new_lines[:start], strict=True):
        if old.text != text or old.offset != offset:
            logger.debug("Line %d changed before the edit start, full relex", first_changed_line)
            return _full_lex(previous, new_source)

    common_tail = _common_tail(old_lines, new_lines, start)
    shift = len(new_lines) - len(old_lines)
    tail_start = len(new_lines) - common_tail

    analyzer = Analyzer(previous.config)
    state = old_lines[start].start_state.copy()
    lines = list(old_lines[:start])

    for j in range(start, len(new_lines)):
        old_index = j - shift
        if j >= tail_start and state == old_lines[old_index].start_state:
            reused = old_lines[old_index:]
            lines.extend(
                _shift_line(old, new_lines[j + k][0], shift)
                for k, old in enumerate(reused)
            )
            logger.debug(
                "Relexed lines %d-%d, reused %d", start + 1, j, len(reused)
            )
            return LexedDocument(
                new_source,
                tuple(lines),
                previous.end_state.copy(),
                previous.config,
                previous.source_file,
            )

        offset, text = new_lines[j]
        snapshot = state.copy()
        tokens = lex_line(analyzer, state, text, j + 1, offset, previous.source_file)
        lines.append(LexedLine(text, offset, tokens, snapshot))

    return LexedDocument(
        new_source, tuple(lines), state, previous.config, previous.source_file
    )


def _common_tail(
    old_lines: tuple[LexedLine, ...],
    new_lines: list[tuple[int, str]],
    start: int,
) -> int:
    """Number of trailing lines with identical text, not reaching before start."""
    limit = min(len(old_lines), len(new_lines)) - start
    count = 0
    while count < limit and old_lines[-1 - count].text == new_lines[-1 - count][1]:
        count += 1
    return count


def _shift_line(line: LexedLine, new_offset: int, line_shift: int) -> LexedLine:
    """Move a reused line to its new offset and line number."""
    delta = new_offset - line.offset
    if delta == 0 and line_shift == 0:
        return line
    tokens = tuple(
        replace(
            token,
            lineno=token.lineno + line_shift,
            start_offset=token.start_offset + delta,
            end_offset=token.end_offset + delta,
        )
        for token in line.tokens
    )
    return replace(line, offset=new_offset, tokens=tokens)


def _full_lex(previous: LexedDocument, new_source: str) -> LexedDocument:
    """Fall back to lexing the whole document."""
    return lex_document(
        new_source, source_file=previous.source_file, config=previous.config
    )
