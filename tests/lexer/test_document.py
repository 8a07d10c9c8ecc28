"""Tests for the whole-document Lexer driver and its coordinates."""

import logging

import pytest

from dylex.lexer import Lexer, TokenizerKind, split_lines
from dylex.tokens import Token, TokenCategory


class TestSplitLines:
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("", [(0, "")]),
            ("a", [(0, "a")]),
            ("a\n", [(0, "a"), (2, "")]),
            ("a\nb", [(0, "a"), (2, "b")]),
            ("a\r\nb", [(0, "a"), (3, "b")]),
            ("a\rb", [(0, "a"), (2, "b")]),
            ("\n\n", [(0, ""), (1, ""), (2, "")]),
        ],
    )
    def test_split(self, source: str, expected: list[tuple[int, str]]) -> None:
        assert split_lines(source) == expected


class TestCoordinates:
    def test_token_positions(self) -> None:
        tokens = list(Lexer("\nab cd").tokenize())
        assert tokens == [
            Token(TokenCategory.VARIABLE, "ab", 2, 1, 1, 3),
            Token(None, " ", 2, 3, 3, 4),
            Token(TokenCategory.VARIABLE, "cd", 2, 4, 4, 6),
        ]

    def test_crlf_offsets(self) -> None:
        source = "Module: m\r\n\r\nx"
        tokens = list(Lexer(source).tokenize())
        last = tokens[-1]
        assert last.lineno == 3
        assert source[last.start_offset : last.end_offset] == "x"

    def test_source_file_recorded(self) -> None:
        tokens = list(Lexer("\nx", source_file="lib.dylan").tokenize())
        assert tokens[0].source_file == "lib.dylan"

    def test_values_rebuild_each_line(self) -> None:
        source = 'Module: m\nAuthor: a\n\ndefine constant $x = #"s"; // c\n/* a\n b */ 1.5e3'
        lexer = Lexer(source)
        lines = source.split("\n")
        for text, tokens in zip(lines, lexer.tokenize_lines(), strict=True):
            assert "".join(t.value for t in tokens) == text

    def test_blank_lines_have_no_tokens(self) -> None:
        assert list(Lexer("\n\n").tokenize_lines()) == [(), (), ()]


class TestDocument:
    def test_full_document(self) -> None:
        source = "Module: hello\n\ndefine constant $pi = 3.14;"
        tokens = [(t.category, t.value) for t in Lexer(source).tokenize() if t.lineno == 3]
        assert tokens == [
            (TokenCategory.DEF, "define"),
            (None, " "),
            (TokenCategory.VARIABLE, "constant"),
            (None, " "),
            (TokenCategory.VARIABLE, "$pi"),
            (None, " "),
            (None, "="),
            (None, " "),
            (TokenCategory.NUMBER, "3.14"),
            (None, ";"),
        ]

    def test_state_after_tokenize(self) -> None:
        lexer = Lexer("Module: a\n\n/* open")
        list(lexer.tokenize())
        assert lexer.state.tokenizer.kind is TokenizerKind.COMMENT

    def test_header_end_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="dylex"):
            list(Lexer("Module: a\n\nx\n\ny").tokenize())
        messages = [r.getMessage() for r in caplog.records]
        assert messages.count("Header block ended at line 2") == 1

    def test_base_column(self) -> None:
        lexer = Lexer("", base_column=10)
        assert lexer.state.current_context.indented == 8
