"""Tests for accurate source location tracking in the lexer.

Token locations feed every error message, so line numbers, columns and
offsets must match the source exactly.
"""

from minimark.lexer import Lexer
from minimark.tokens import TokenType


class TestSingleLineLocations:
    """Test location tracking for single-line tokens."""

    def test_first_token_location(self) -> None:
        tokens = list(Lexer.from_string("# Heading").tokenize())

        heading = tokens[0]
        assert heading.type is TokenType.HASH
        assert heading.location.lineno == 1
        assert heading.location.col_offset == 1
        assert heading.location.offset == 0
        assert heading.location.end_offset == 1

    def test_columns_advance_by_token_length(self) -> None:
        tokens = list(Lexer.from_string("## ab**").tokenize())

        assert [t.col for t in tokens] == [1, 3, 4, 6, 8]
        assert [t.location.offset for t in tokens] == [0, 2, 3, 5, 7]

    def test_eof_sits_after_last_character(self) -> None:
        tokens = list(Lexer.from_string("abc").tokenize())

        eof = tokens[-1]
        assert eof.location.offset == 3
        assert eof.location.end_offset == 3
        assert eof.col == 4


class TestMultiLineLocations:
    """Line numbers and columns across newlines."""

    def test_line_after_newline_starts_at_column_one(self) -> None:
        tokens = list(Lexer.from_string("a\n- b").tokenize())

        dash = tokens[2]
        assert dash.type is TokenType.DASH
        assert dash.lineno == 2
        assert dash.col == 1

    def test_indentation_moves_column(self) -> None:
        tokens = list(Lexer.from_string("- a\n  - b").tokenize())

        nested = [t for t in tokens if t.type is TokenType.DASH][1]
        assert nested.lineno == 2
        assert nested.col == 3

    def test_whitespace_spanning_lines_records_end(self) -> None:
        tokens = list(Lexer.from_string("a\n\n  b").tokenize())

        ws = tokens[1]
        assert ws.type is TokenType.WHITESPACE
        assert ws.location.lineno == 1
        assert ws.location.end_lineno == 3
        assert ws.location.end_col_offset == 3

    def test_source_file_recorded(self) -> None:
        token = Lexer.from_string("x", source_file="notes.md").next_token()

        assert token.location.source_file == "notes.md"
        assert str(token.location) == "notes.md:1:1"

    def test_location_is_cached(self) -> None:
        token = Lexer.from_string("x").next_token()
        assert token.location is token.location
