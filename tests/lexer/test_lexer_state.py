"""Tests for lexer dispatch and run scanning."""

import pytest

from minimark.cursor import StringCursor
from minimark.errors import InternalError
from minimark.lexer import Lexer
from minimark.tokens import TokenType

T = TokenType


def _lex(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer.from_string(source).tokenize()]


class TestDelimiterRuns:
    """Delimiter runs keep their exact length."""

    def test_consecutive_runs(self) -> None:
        tokens = list(Lexer.from_string("#####**```---__").tokenize())

        assert [(t.type, t.count) for t in tokens] == [
            (T.HASH, 5),
            (T.ASTERISK, 2),
            (T.BACKTICKS, 3),
            (T.DASH, 3),
            (T.UNDERSCORE, 2),
            (T.EOF, 0),
        ]

    @pytest.mark.parametrize("count", [1, 2, 6, 7, 12])
    def test_hash_run_not_clamped(self, count: int) -> None:
        token = Lexer.from_string("#" * count).next_token()
        assert token.type is T.HASH
        assert token.count == count

    def test_run_stops_at_different_character(self) -> None:
        assert _lex("**_") == [(T.ASTERISK, "**"), (T.UNDERSCORE, "_"), (T.EOF, "")]

    def test_runs_separated_by_whitespace_stay_separate(self) -> None:
        assert _lex("* *") == [
            (T.ASTERISK, "*"),
            (T.WHITESPACE, " "),
            (T.ASTERISK, "*"),
            (T.EOF, ""),
        ]


class TestSingleCharacters:
    def test_brackets_and_parens(self) -> None:
        assert _lex("[]()") == [
            (T.OPENING_BRACKET, "["),
            (T.CLOSING_BRACKET, "]"),
            (T.OPENING_PAREN, "("),
            (T.CLOSING_PAREN, ")"),
            (T.EOF, ""),
        ]

    def test_repeated_brackets_are_not_runs(self) -> None:
        assert [t for t, _ in _lex("((")] == [T.OPENING_PAREN, T.OPENING_PAREN, T.EOF]

    def test_exclamation_mark(self) -> None:
        assert _lex("!!") == [
            (T.EXCLAMATION_MARK, "!"),
            (T.EXCLAMATION_MARK, "!"),
            (T.EOF, ""),
        ]

    def test_angle_bracket_is_plain_text(self) -> None:
        """``>`` is not a boundary character and lexes as text."""
        assert _lex("> quote") == [
            (T.TEXT, ">"),
            (T.WHITESPACE, " "),
            (T.TEXT, "quote"),
            (T.EOF, ""),
        ]


class TestWhitespace:
    def test_mixed_whitespace_is_one_token(self) -> None:
        assert _lex("a \t\n  b") == [
            (T.TEXT, "a"),
            (T.WHITESPACE, " \t\n  "),
            (T.TEXT, "b"),
            (T.EOF, ""),
        ]

    def test_blank_lines_kept_verbatim(self) -> None:
        assert _lex("\n\n\n") == [(T.WHITESPACE, "\n\n\n"), (T.EOF, "")]


class TestTextRuns:
    def test_text_stops_at_boundary_characters(self) -> None:
        for stop in "[]()#*_!":
            tokens = _lex(f"ab{stop}")
            assert tokens[0] == (T.TEXT, "ab"), stop

    def test_dash_inside_text_does_not_split(self) -> None:
        """Dash only starts a run at token start; inside a word it is text."""
        assert _lex("well-known") == [(T.TEXT, "well-known"), (T.EOF, "")]

    def test_backtick_inside_text_does_not_split(self) -> None:
        """Backtick does not end a text run; this asymmetry is intentional."""
        assert _lex("`code`") == [
            (T.BACKTICKS, "`"),
            (T.TEXT, "code`"),
            (T.EOF, ""),
        ]

    def test_leading_dash_starts_run(self) -> None:
        assert _lex("-x") == [(T.DASH, "-"), (T.TEXT, "x"), (T.EOF, "")]

    def test_unicode_text(self) -> None:
        assert _lex("héllo wörld") == [
            (T.TEXT, "héllo"),
            (T.WHITESPACE, " "),
            (T.TEXT, "wörld"),
            (T.EOF, ""),
        ]


class TestInterleavedConstructs:
    def test_heading_bold_italic_link(self) -> None:
        source = "### heading\n**bold**\n_italic_\n[text](link)\n"

        assert _lex(source) == [
            (T.HASH, "###"),
            (T.WHITESPACE, " "),
            (T.TEXT, "heading"),
            (T.WHITESPACE, "\n"),
            (T.ASTERISK, "**"),
            (T.TEXT, "bold"),
            (T.ASTERISK, "**"),
            (T.WHITESPACE, "\n"),
            (T.UNDERSCORE, "_"),
            (T.TEXT, "italic"),
            (T.UNDERSCORE, "_"),
            (T.WHITESPACE, "\n"),
            (T.OPENING_BRACKET, "["),
            (T.TEXT, "text"),
            (T.CLOSING_BRACKET, "]"),
            (T.OPENING_PAREN, "("),
            (T.TEXT, "link"),
            (T.CLOSING_PAREN, ")"),
            (T.WHITESPACE, "\n"),
            (T.EOF, ""),
        ]

    def test_image(self) -> None:
        assert [t for t, _ in _lex("![alt](a.png)")] == [
            T.EXCLAMATION_MARK,
            T.OPENING_BRACKET,
            T.TEXT,
            T.CLOSING_BRACKET,
            T.OPENING_PAREN,
            T.TEXT,
            T.CLOSING_PAREN,
            T.EOF,
        ]


class TestEndOfInput:
    def test_empty_source(self) -> None:
        assert _lex("") == [(T.EOF, "")]

    def test_next_token_after_eof_keeps_returning_eof(self) -> None:
        lexer = Lexer.from_string("a")
        assert lexer.next_token().type is T.TEXT

        for _ in range(5):
            token = lexer.next_token()
            assert token.type is T.EOF
            assert token.value == ""
        assert lexer.position == 1

    def test_tokenize_stops_after_single_eof(self) -> None:
        tokens = list(Lexer.from_string("a b").tokenize())
        assert sum(1 for t in tokens if t.type is T.EOF) == 1
        assert tokens[-1].type is T.EOF


class TestCursorContract:
    def test_accepts_any_cursor(self) -> None:
        class ListCursor:
            def __init__(self, chars: list[str]) -> None:
                self._chars = chars

            def current(self) -> str:
                return self._chars[0] if self._chars else ""

            def read(self) -> str:
                return self._chars.pop(0) if self._chars else ""

        tokens = list(Lexer(ListCursor(list("# hi"))).tokenize())
        assert [t.type for t in tokens] == [T.HASH, T.WHITESPACE, T.TEXT, T.EOF]

    def test_cursor_that_never_advances_is_internal_error(self) -> None:
        class StuckCursor:
            def current(self) -> str:
                return "a"

            def read(self) -> str:
                return ""

        with pytest.raises(InternalError):
            Lexer(StuckCursor()).next_token()

    def test_lexer_consumes_through_cursor(self) -> None:
        cursor = StringCursor("ab cd")
        lexer = Lexer(cursor)
        lexer.next_token()
        assert cursor.position == 2
        assert cursor.current() == " "
