"""Exception classes for dylex.

Lexing itself is total and never raises. These exceptions cover the
surrounding surface: configuration, mode lookup, and state restoration.
"""

from __future__ import annotations


class DylexError(Exception):
    """Base exception for all dylex errors."""

    pass


class ConfigError(DylexError):
    """Invalid lexer configuration value."""

    def __init__(self, field: str, value: object, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending LexerConfig field
            value: The rejected value
            message: Why the value was rejected
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {message}")


class UnknownModeError(DylexError, LookupError):
    """No mode is registered under the requested name or MIME type."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No mode registered for {key!r}")


class StateError(DylexError):
    """Serialized analyzer state could not be restored.

    Raised by the serialization helpers when a payload is missing keys or
    names an unknown tokenizer.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize state error with optional location.

        Args:
            message: Error description
            lineno: Line whose saved state was being restored (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
