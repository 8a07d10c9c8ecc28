"""Per-document analyzer state.

AnalyzerState is created once per document by ``Analyzer.start_state`` and
mutated in place by every ``token`` call. Contexts live in an arena and
refer to their enclosing context by index; the root context at index 0
always exists and is never removed.

Thread Safety:
An AnalyzerState belongs to exactly one document. Do not share it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from dylex.lexer.modes import HEADER, Tokenizer


@dataclass(frozen=True, slots=True)
class Context:
    """Indentation context record.

    Attributes:
        indented: Indentation of the line that opened the context
        column: Column the context opened at
        kind: Context tag ("top" for the root)
        align: Whether following lines align to ``column``
        parent: Arena index of the enclosing context (None at the root)

    """

    indented: int
    column: int
    kind: str
    align: bool
    parent: int | None = None


# Root context of a state built without an Analyzer (base column 0, unit 0)
ROOT_CONTEXT = Context(indented=0, column=0, kind="top", align=False)


@dataclass(slots=True)
class AnalyzerState:
    """Mutable resumption state for one document.

    Attributes:
        tokenizer: Scanner that handles the next call
        contexts: Context arena; index 0 is the root
        context: Arena index of the innermost context
        indented: Leading whitespace width of the current line

    """

    tokenizer: Tokenizer = HEADER
    contexts: list[Context] = field(default_factory=lambda: [ROOT_CONTEXT])
    context: int = 0
    indented: int = 0

    @property
    def current_context(self) -> Context:
        """The innermost context."""
        return self.contexts[self.context]

    def copy(self) -> AnalyzerState:
        """Independent copy, safe to mutate without affecting this state.

        Context records are frozen, so the arena list is copied shallowly.
        """
        return replace(self, contexts=list(self.contexts))
