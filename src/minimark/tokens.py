"""Token and TokenType definitions for the minimark lexer.

The lexer produces a stream of Token objects that the parser consumes one
at a time. Each Token has a type, the exact text it was scanned from, and
a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens are consumed by the parser without their location ever being
read.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minimark.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Document structure
    EOF = auto()

    # Character runs
    TEXT = auto()
    WHITESPACE = auto()

    # Delimiter runs (count = run length)
    HASH = auto()  # #, ##, ###, ...
    ASTERISK = auto()  # * or **
    BACKTICKS = auto()  # `
    DASH = auto()  # -
    UNDERSCORE = auto()  # _

    # Single characters
    OPENING_PAREN = auto()  # (
    CLOSING_PAREN = auto()  # )
    OPENING_BRACKET = auto()  # [
    CLOSING_BRACKET = auto()  # ]
    ANGLE_BRACKET = auto()  # > (reserved, not produced by the lexer)
    EXCLAMATION_MARK = auto()  # !


# Token types whose count carries meaning (heading level, bold vs italic, ...)
RUN_TOKEN_TYPES = frozenset(
    {
        TokenType.HASH,
        TokenType.ASTERISK,
        TokenType.BACKTICKS,
        TokenType.DASH,
        TokenType.UNDERSCORE,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    ``value`` is the exact source text the token was scanned from, so
    joining the values of a full token stream reproduces the input.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source ("" for EOF)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _end_lineno: End line number (for tokens spanning newlines)
        _end_col: End column
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def count(self) -> int:
        """Run length of a delimiter token.

        Preserved exactly as scanned: ``###`` is 3, never clamped. For other
        token types this is simply the length of the scanned text.
        """
        return len(self.value)

    def matches(self, token_type: TokenType, count: int | None = None) -> bool:
        """Check the tag and, optionally, the run length."""
        if self.type is not token_type:
            return False
        return count is None or len(self.value) == count

    def describe(self) -> str:
        """Human-readable form for error messages."""
        if self.type is TokenType.EOF:
            return "end of input"
        if self.type in RUN_TOKEN_TYPES:
            return f"{self.type.name} run {self.value!r}"
        return f"{self.type.name} {self.value!r}"

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from minimark.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col
