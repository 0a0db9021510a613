"""Pull-based lexer producing one token per call.

The lexer is stateless between calls apart from its read position: each
``next_token()`` looks at the cursor's current character, scans the
longest run for that character's class, and returns it as a token.

The lexer never fails on input. Every character belongs to some class, so
every call either consumes at least one character or returns EOF.

Thread Safety:
Lexer instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from minimark.cursor import EOF, CharCursor, StringCursor
from minimark.errors import InternalError
from minimark.lexer.charsets import DELIMITER_RUNS, SINGLE_CHARS
from minimark.lexer.scanners import ScannerMixin
from minimark.tokens import Token, TokenType


class Lexer(ScannerMixin):
    """Turns a character cursor into a stream of tokens.

    Usage:
            >>> lexer = Lexer.from_string("**hi**")
            >>> [t.type.name for t in lexer.tokenize()]
            ['ASTERISK', 'TEXT', 'ASTERISK', 'EOF']

    Position Tracking:
        The cursor contract has no notion of position, so the lexer counts
        lines, columns and offsets itself from the characters it reads.

    """

    __slots__ = (
        "_cursor",
        "_source_file",
        "_pos",
        "_lineno",
        "_col",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, cursor: CharCursor, source_file: str | None = None) -> None:
        """Initialize lexer over a character cursor.

        Args:
            cursor: Source of characters (see minimark.cursor.CharCursor)
            source_file: Optional source file path recorded on tokens
        """
        self._cursor = cursor
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1
        self._col = 1

        # Start of the token being scanned
        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    @classmethod
    def from_string(cls, source: str, source_file: str | None = None) -> Lexer:
        """Create a lexer over an in-memory string."""
        return cls(StringCursor(source), source_file)

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    def next_token(self) -> Token:
        """Scan and return the next token.

        At end of input returns an EOF token. Calling again after that keeps
        returning EOF without advancing.

        Raises:
            InternalError: if a scan consumed nothing (cursor misbehaving).
        """
        char = self._cursor.current()
        if char == EOF:
            return self._make_token_at_current(TokenType.EOF)

        self._save_location()

        if char in DELIMITER_RUNS:
            token_type = DELIMITER_RUNS[char]
            value = self._scan_run(char)
        elif char in SINGLE_CHARS:
            token_type = SINGLE_CHARS[char]
            value = self._advance()
        elif char.isspace():
            token_type = TokenType.WHITESPACE
            value = self._scan_whitespace()
        else:
            token_type = TokenType.TEXT
            value = self._scan_text()

        if not value:
            msg = (
                f"lexer consumed nothing for {token_type.name} at "
                f"{self._saved_lineno}:{self._saved_col} (current={char!r})"
            )
            raise InternalError(msg)

        return self._make_token(token_type, value)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF.

        Complexity: O(n) where n = number of characters
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _advance(self) -> str:
        """Consume one character, updating line/column tracking.

        Only called after current() reported a character, so the cursor
        must hand one over.

        Raises:
            InternalError: if the cursor returns EOF instead.
        """
        char = self._cursor.read()
        if char == EOF:
            msg = f"cursor returned EOF at {self._lineno}:{self._col} after reporting a character"
            raise InternalError(msg)

        self._pos += 1
        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        return char

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Remember where the token being scanned starts."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a token spanning from the saved location to the current one."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _make_token_at_current(self, token_type: TokenType, value: str = "") -> Token:
        """Create a zero-width token at the current position (EOF)."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
