"""Tests for utility modules and error types."""

from dylex.errors import ConfigError, DylexError, StateError, UnknownModeError
from dylex.tokens import Token, TokenCategory
from dylex.utils import get_logger


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("highlight").name == "dylex.highlight"

    def test_prefix_not_duplicated(self) -> None:
        assert get_logger("dylex.lexer.document").name == "dylex.lexer.document"
        assert get_logger("dylex").name == "dylex"


class TestErrors:
    def test_hierarchy(self) -> None:
        for exc in (ConfigError("f", 1, "bad"), UnknownModeError("x"), StateError("m")):
            assert isinstance(exc, DylexError)

    def test_config_error_message(self) -> None:
        assert str(ConfigError("tab_size", 0, "must be >= 1")) == "Invalid tab_size=0: must be >= 1"

    def test_state_error_location(self) -> None:
        assert str(StateError("bad", lineno=3, source_file="a.dylan")) == "a.dylan:3 bad"
        assert str(StateError("bad")) == "bad"


class TestToken:
    def test_css_class(self) -> None:
        token = Token(TokenCategory.HEADER_KEYWORD, "Module: ", 1, 1, 0, 8)
        assert token.css_class == "cm-header-keyword"
        assert Token(None, " ", 1, 1, 0, 1).css_class is None

    def test_repr(self) -> None:
        assert repr(Token(None, " ", 2, 3, 0, 1)) == "Token(NULL, ' ', 2:3)"
        long = Token(TokenCategory.COMMENT, "// " + "x" * 30, 1, 1, 0, 33)
        assert repr(long) == "Token(COMMENT, '// xxxxxxxxxxxxxx...', 1:1)"

    def test_category_str(self) -> None:
        assert str(TokenCategory.DEF) == "def"
