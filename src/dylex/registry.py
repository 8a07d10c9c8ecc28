"""Mode registry: mode names and MIME types to analyzers.

Editors select a tokenizer either by mode name ("dylan") or by content
type ("text/x-dylan"). The registry resolves both to an Analyzer factory.

Thread Safety:
ModeRegistry is immutable after creation. Safe to share.
Use ModeRegistryBuilder for mutable construction.

Example:
    >>> registry = create_default_registry()
    >>> analyzer = registry.get("text/x-dylan")
    >>> registry.mode_for("text/x-dylan")
    'dylan'

"""

from __future__ import annotations

from collections.abc import Callable

from dylex.config import LexerConfig
from dylex.errors import UnknownModeError
from dylex.lexer.core import Analyzer

AnalyzerFactory = Callable[[LexerConfig | None], Analyzer]


class ModeRegistry:
    """Immutable registry of analyzer factories."""

    __slots__ = ("_modes", "_mimes")

    def __init__(
        self,
        modes: dict[str, AnalyzerFactory],
        mimes: dict[str, str],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use ModeRegistryBuilder to create instances.
        """
        self._modes = modes
        self._mimes = mimes

    def mode_for(self, key: str) -> str:
        """Resolve a mode name or MIME type to a mode name.

        Raises:
            UnknownModeError: If key is neither a mode nor a known MIME type
        """
        if key in self._modes:
            return key
        mode = self._mimes.get(key)
        if mode is None:
            raise UnknownModeError(key)
        return mode

    def get(self, key: str, config: LexerConfig | None = None) -> Analyzer:
        """Create an analyzer for a mode name or MIME type.

        Raises:
            UnknownModeError: If key is not registered
        """
        return self._modes[self.mode_for(key)](config)

    def has(self, key: str) -> bool:
        """Check if a mode name or MIME type is registered."""
        return key in self._modes or key in self._mimes

    @property
    def modes(self) -> frozenset[str]:
        """All registered mode names."""
        return frozenset(self._modes)

    @property
    def mimes(self) -> dict[str, str]:
        """MIME type to mode name mapping (copy)."""
        return dict(self._mimes)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        """Number of registered modes."""
        return len(self._modes)


class ModeRegistryBuilder:
    """Mutable builder for ModeRegistry.

    Example:
            >>> builder = ModeRegistryBuilder()
            >>> builder = builder.define_mode("dylan", Analyzer)
            >>> registry = builder.define_mime("text/x-dylan", "dylan").build()

    """

    __slots__ = ("_modes", "_mimes")

    def __init__(self) -> None:
        self._modes: dict[str, AnalyzerFactory] = {}
        self._mimes: dict[str, str] = {}

    def define_mode(self, name: str, factory: AnalyzerFactory) -> ModeRegistryBuilder:
        """Register an analyzer factory under a mode name.

        Returns:
            Self for chaining

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._modes:
            msg = f"Mode '{name}' already registered"
            raise ValueError(msg)
        self._modes[name] = factory
        return self

    def define_mime(self, mime: str, mode: str) -> ModeRegistryBuilder:
        """Map a MIME type to a registered mode name.

        Returns:
            Self for chaining

        Raises:
            ValueError: If the MIME type is taken or the mode is unknown
        """
        if mime in self._mimes:
            msg = f"MIME type '{mime}' already mapped to '{self._mimes[mime]}'"
            raise ValueError(msg)
        if mode not in self._modes:
            msg = f"Cannot map '{mime}' to unregistered mode '{mode}'"
            raise ValueError(msg)
        self._mimes[mime] = mode
        return self

    def build(self) -> ModeRegistry:
        """Build immutable registry from registered modes."""
        return ModeRegistry(modes=dict(self._modes), mimes=dict(self._mimes))

    def __len__(self) -> int:
        return len(self._modes)


def create_default_registry() -> ModeRegistry:
    """Create registry with the Dylan mode and its MIME type."""
    return (
        ModeRegistryBuilder()
        .define_mode("dylan", Analyzer)
        .define_mime("text/x-dylan", "dylan")
        .build()
    )
