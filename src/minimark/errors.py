"""Exception classes for minimark.

Every error raised on purpose by the package derives from MinimarkError.
ParseError and its subclasses mean the input is malformed or truncated;
InternalError means minimark itself reached a state it should never reach.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minimark.tokens import Token, TokenType


class MinimarkError(Exception):
    """Base exception for all minimark errors."""

    pass


class ParseError(MinimarkError):
    """Error during parsing.

    Raised when the parser cannot fit the input to the grammar. Parsing
    stops at the first error; no partial document is returned.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnexpectedTokenError(ParseError):
    """The lookahead token fits no alternative of the construct being parsed.

    Attributes:
        token: The offending token
        construct: Name of the construct being parsed (e.g. "link")
    """

    def __init__(self, token: Token, construct: str, expected: str | None = None) -> None:
        self.token = token
        self.construct = construct
        self.expected = expected

        message = f"unexpected {token.describe()} in {construct}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message, token.lineno, token.col, token._source_file)


class UnterminatedConstructError(ParseError):
    """End of input was reached before a construct's closing delimiter.

    Kept distinct from UnexpectedTokenError so callers can tell truncated
    input from malformed input.

    Attributes:
        construct: Name of the unterminated construct
        expected: Type of the closing token that never arrived
        opener: Token that opened the construct
    """

    def __init__(
        self,
        construct: str,
        expected: TokenType,
        opener: Token,
        reached: str = "end of input",
    ) -> None:
        self.construct = construct
        self.expected = expected
        self.opener = opener
        super().__init__(
            f"unterminated {construct}: reached {reached} before {expected.name}",
            opener.lineno,
            opener.col,
            opener._source_file,
        )


class NestingDepthError(ParseError):
    """Block or inline nesting went deeper than the configured limit."""

    def __init__(self, limit: int, token: Token) -> None:
        self.limit = limit
        super().__init__(
            f"nesting deeper than {limit} levels",
            token.lineno,
            token.col,
            token._source_file,
        )


class InternalError(MinimarkError):
    """An internal invariant was violated.

    Signals a defect in minimark (or misuse of a single-use object), never
    a problem with the document being parsed.
    """

    pass
