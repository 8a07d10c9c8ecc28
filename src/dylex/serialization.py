"""AnalyzerState serialization: JSON round-trip for resumption state.

Lets a host persist the state at a line start (for example alongside a
cached rendering) and resume lexing later from exactly that point.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from dylex.serialization import state_to_json, state_from_json

    restored = state_from_json(state_to_json(state))
    assert restored == state

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from dylex.errors import StateError
from dylex.lexer.modes import Tokenizer, TokenizerKind
from dylex.lexer.state import AnalyzerState, Context
from dylex.tokens import TokenCategory


def state_to_dict(state: AnalyzerState) -> dict[str, Any]:
    """Convert an AnalyzerState to a JSON-compatible dict."""
    tokenizer = state.tokenizer
    return {
        "tokenizer": {
            "kind": tokenizer.kind.name,
            "quote": tokenizer.quote,
            "category": tokenizer.category.value if tokenizer.category is not None else None,
        },
        "contexts": [
            {
                "indented": ctx.indented,
                "column": ctx.column,
                "kind": ctx.kind,
                "align": ctx.align,
                "parent": ctx.parent,
            }
            for ctx in state.contexts
        ],
        "context": state.context,
        "indented": state.indented,
    }


def state_from_dict(data: dict[str, Any], *, lineno: int | None = None) -> AnalyzerState:
    """Rebuild an AnalyzerState from ``state_to_dict`` output.

    Args:
        data: Serialized state
        lineno: Line the state belongs to, used in error messages

    Raises:
        StateError: If the payload is incomplete or inconsistent.
    """
    try:
        tok = data["tokenizer"]
        category = tok.get("category")
        tokenizer = Tokenizer(
            kind=TokenizerKind[tok["kind"]],
            quote=tok.get("quote", ""),
            category=TokenCategory(category) if category is not None else None,
        )
        contexts = [
            Context(
                indented=c["indented"],
                column=c["column"],
                kind=c["kind"],
                align=c["align"],
                parent=c.get("parent"),
            )
            for c in data["contexts"]
        ]
        context = data["context"]
        indented = data["indented"]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise StateError(f"Malformed analyzer state: {e!r}", lineno=lineno) from e

    _check_int("context", context, lineno)
    _check_int("indented", indented, lineno)
    if not contexts:
        raise StateError("Analyzer state has no root context", lineno=lineno)
    for index, ctx in enumerate(contexts):
        _check_context(index, ctx, lineno)
    if not 0 <= context < len(contexts):
        raise StateError(f"Context index {context} out of range", lineno=lineno)
    _check_tokenizer(tokenizer, lineno)

    return AnalyzerState(
        tokenizer=tokenizer, contexts=contexts, context=context, indented=indented
    )


def _check_int(name: str, value: object, lineno: int | None) -> None:
    # bool is an int subclass but never a valid width or index
    if not isinstance(value, int) or isinstance(value, bool):
        raise StateError(f"{name} must be an integer, got {value!r}", lineno=lineno)


def _check_context(index: int, ctx: Context, lineno: int | None) -> None:
    _check_int(f"contexts[{index}].indented", ctx.indented, lineno)
    _check_int(f"contexts[{index}].column", ctx.column, lineno)
    if not isinstance(ctx.kind, str):
        raise StateError(f"contexts[{index}].kind must be a string", lineno=lineno)
    if not isinstance(ctx.align, bool):
        raise StateError(f"contexts[{index}].align must be a boolean", lineno=lineno)
    if index == 0:
        if ctx.parent is not None:
            raise StateError("Root context cannot have a parent", lineno=lineno)
        return
    # Parents precede their children, so the arena has no cycles
    _check_int(f"contexts[{index}].parent", ctx.parent, lineno)
    if not 0 <= ctx.parent < index:
        raise StateError(
            f"contexts[{index}].parent {ctx.parent} must refer to an earlier context",
            lineno=lineno,
        )


def _check_tokenizer(tokenizer: Tokenizer, lineno: int | None) -> None:
    if not isinstance(tokenizer.quote, str):
        raise StateError("Tokenizer quote must be a string", lineno=lineno)
    if tokenizer.kind is TokenizerKind.STRING:
        if len(tokenizer.quote) != 1:
            raise StateError(
                f"String tokenizer needs one quote character, got {tokenizer.quote!r}",
                lineno=lineno,
            )
        if tokenizer.category is None:
            raise StateError("String tokenizer without a category", lineno=lineno)


def state_to_json(state: AnalyzerState, *, indent: int | None = None) -> str:
    """Serialize an AnalyzerState to a JSON string."""
    return json.dumps(state_to_dict(state), indent=indent, sort_keys=True)


def state_from_json(payload: str, *, lineno: int | None = None) -> AnalyzerState:
    """Deserialize an AnalyzerState from a JSON string.

    Raises:
        StateError: If the payload is not valid JSON or not a valid state.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise StateError(f"Invalid JSON: {e.msg}", lineno=lineno) from e
    if not isinstance(data, dict):
        raise StateError("Analyzer state must be a JSON object", lineno=lineno)
    return state_from_dict(data, lineno=lineno)
