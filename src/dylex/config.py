"""ContextVar-based lexer configuration for dylex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
An Analyzer created without an explicit config reads the active one.

Usage:
    from dylex.config import LexerConfig, lexer_config_context
    from dylex.lexer import Analyzer

    with lexer_config_context(LexerConfig(indent_unit=4)):
        analyzer = Analyzer()  # indent_unit == 4

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from dylex.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        indent_unit: Width of one indentation level. The root context of a
            new state sits one unit left of the base column.
        tab_size: Tab stop width used when measuring line indentation

    """

    indent_unit: int = 2
    tab_size: int = 4

    def __post_init__(self) -> None:
        if self.indent_unit < 0:
            raise ConfigError("indent_unit", self.indent_unit, "must be >= 0")
        if self.tab_size < 1:
            raise ConfigError("tab_size", self.tab_size, "must be >= 1")

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexerConfig:
        """Create LexerConfig from dictionary.

        Unknown keys are silently ignored so editor settings can be passed
        through wholesale.

        Example:
            >>> LexerConfig.from_dict({"indent_unit": 4, "theme": "dark"}).indent_unit
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for the current context."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(tab_size=8)):
        ...     get_lexer_config().tab_size
        8

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
