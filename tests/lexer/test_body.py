"""Tests for body-mode dispatch."""

import pytest

from dylex.lexer import Analyzer, TokenizerKind
from dylex.stream import LineStream
from dylex.tokens import TokenCategory

ATOM = TokenCategory.ATOM
COMMENT = TokenCategory.COMMENT
DEF = TokenCategory.DEF
NUMBER = TokenCategory.NUMBER
OPERATOR = TokenCategory.OPERATOR
STRING = TokenCategory.STRING
VARIABLE = TokenCategory.VARIABLE


def _body_spans(line: str) -> list[tuple[TokenCategory | None, str]]:
    analyzer = Analyzer()
    state = analyzer.start_state()
    analyzer.blank_line(state)
    stream = LineStream(line)
    spans = []
    while not stream.eol():
        stream.start = stream.pos
        category = analyzer.token(stream, state)
        spans.append((category, stream.current()))
    return spans


class TestDefine:
    def test_define_keyword(self) -> None:
        assert _body_spans("define method foo") == [
            (DEF, "define"),
            (None, " "),
            (VARIABLE, "method"),
            (None, " "),
            (VARIABLE, "foo"),
        ]

    @pytest.mark.parametrize("word", ["defined", "define-method", "define?", "define*"])
    def test_define_prefix_is_variable(self, word: str) -> None:
        assert _body_spans(word) == [(VARIABLE, word)]

    def test_define_followed_by_punctuation(self) -> None:
        assert _body_spans("define;") == [(DEF, "define"), (None, ";")]

    def test_define_followed_by_digit(self) -> None:
        assert _body_spans("define1") == [(DEF, "define"), (NUMBER, "1")]


class TestSymbols:
    @pytest.mark.parametrize(
        "symbol",
        ["foo", "<object>", "*global*", "$constant", "empty?", "set!", "a-b_c", "%x", "@y"],
    )
    def test_symbol_is_variable(self, symbol: str) -> None:
        assert _body_spans(symbol) == [(VARIABLE, symbol)]

    def test_keyword_form_is_variable_then_colon(self) -> None:
        assert _body_spans("size:") == [(VARIABLE, "size"), (None, ":")]

    def test_digits_split_symbols(self) -> None:
        assert _body_spans("x1") == [(VARIABLE, "x"), (NUMBER, "1")]

    @pytest.mark.parametrize("ch", [";", "(", ")", ",", "=", ":", "[", "}", "~", "é"])
    def test_fallback_consumes_one_char(self, ch: str) -> None:
        assert _body_spans(ch + ch) == [(None, ch), (None, ch)]


class TestNumbers:
    @pytest.mark.parametrize("literal", ["0", "42", "3.14", "1.", "6.02e23", "1e-3", "1E+7"])
    def test_decimal(self, literal: str) -> None:
        assert _body_spans(literal) == [(NUMBER, literal)]

    def test_digit_then_symbol(self) -> None:
        assert _body_spans("12abc") == [(NUMBER, "12"), (VARIABLE, "abc")]

    def test_exponent_without_digits(self) -> None:
        assert _body_spans("2e") == [(NUMBER, "2"), (VARIABLE, "e")]

    @pytest.mark.parametrize("literal", ["#b1010", "#xFF", "#xdeadBEEF", "#o17", "#b", "#x"])
    def test_radix(self, literal: str) -> None:
        assert _body_spans(literal) == [(NUMBER, literal)]

    def test_binary_stops_at_non_binary_digit(self) -> None:
        assert _body_spans("#b102") == [(NUMBER, "#b10"), (NUMBER, "2")]

    def test_octal_stops_at_eight(self) -> None:
        assert _body_spans("#o78") == [(NUMBER, "#o7"), (NUMBER, "8")]

    def test_hash_b_wins_over_hash_symbol(self) -> None:
        assert _body_spans("#bar") == [(NUMBER, "#b"), (VARIABLE, "ar")]


class TestHashLiterals:
    @pytest.mark.parametrize("literal", ["#t", "#f", "#foo", "#all-keys", "#rest", "#"])
    def test_hash_symbol(self, literal: str) -> None:
        assert _body_spans(literal) == [(ATOM, literal)]

    def test_hash_symbol_stops_at_punctuation(self) -> None:
        assert _body_spans("#key:") == [(ATOM, "#key"), (None, ":")]

    def test_hash_paren(self) -> None:
        assert _body_spans("#(1)") == [(ATOM, "#"), (None, "("), (NUMBER, "1"), (None, ")")]

    def test_string_syntax_symbol(self) -> None:
        assert _body_spans('#"hello world" x') == [
            (ATOM, '#"hello world"'),
            (None, " "),
            (VARIABLE, "x"),
        ]


class TestStringsAndComments:
    def test_double_quoted_string(self) -> None:
        assert _body_spans('"abc" x') == [(STRING, '"abc"'), (None, " "), (VARIABLE, "x")]

    def test_single_quoted_char(self) -> None:
        assert _body_spans("'a'") == [(STRING, "'a'")]

    def test_quotes_do_not_close_each_other(self) -> None:
        assert _body_spans("\"it's\"") == [(STRING, "\"it's\"")]

    def test_backslash_is_not_escape(self) -> None:
        assert _body_spans('"a\\" b') == [(STRING, '"a\\"'), (None, " "), (VARIABLE, "b")]

    def test_line_comment(self) -> None:
        assert _body_spans("x // rest of line") == [
            (VARIABLE, "x"),
            (None, " "),
            (COMMENT, "// rest of line"),
        ]

    def test_block_comment_on_one_line(self) -> None:
        assert _body_spans("/* c */ x") == [(COMMENT, "/* c */"), (None, " "), (VARIABLE, "x")]

    def test_slash_star_slash_does_not_close(self) -> None:
        assert _body_spans("/*/ x") == [(COMMENT, "/*/ x")]


class TestOperators:
    def test_operator_runs_to_space(self) -> None:
        assert _body_spans("/foo bar") == [(OPERATOR, "/foo"), (None, " "), (VARIABLE, "bar")]

    def test_lone_slash(self) -> None:
        assert _body_spans("a / b") == [
            (VARIABLE, "a"),
            (None, " "),
            (OPERATOR, "/"),
            (None, " "),
            (VARIABLE, "b"),
        ]

    def test_slash_without_following_space(self) -> None:
        assert _body_spans("/foo") == [(OPERATOR, "/"), (VARIABLE, "foo")]


class TestDispatchState:
    def test_self_contained_lexemes_keep_body_tokenizer(self) -> None:
        analyzer = Analyzer()
        state = analyzer.start_state()
        analyzer.blank_line(state)
        stream = LineStream('define 1 #t "s" // c')
        while not stream.eol():
            analyzer.token(stream, state)
        assert state.tokenizer.kind is TokenizerKind.BODY

    def test_whitespace_only_line(self) -> None:
        assert _body_spans(" \t  ") == [(None, " \t  ")]
