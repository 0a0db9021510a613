"""Token navigation for the minimark parser.

The parser sees the token stream through exactly one buffered lookahead
token, ``_current``. Every decision is made by inspecting it; ``_eat()``
hands it over and refills the buffer with one pull from the lexer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minimark.errors import InternalError, UnexpectedTokenError, UnterminatedConstructError
from minimark.tokens import Token, TokenType

if TYPE_CHECKING:
    from minimark.lexer import Lexer
    from minimark.location import SourceLocation


class TokenNavigationMixin:
    """Mixin providing lookahead and consumption primitives.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token | None
        - _previous: Token | None

    Required Host Methods (from other mixins):
        - _at_inline_boundary() -> bool

    """

    _lexer: Lexer
    _current: Token | None
    _previous: Token | None

    def _eat(self) -> Token:
        """Return the lookahead token and buffer the next one."""
        token = self._current
        if token is None:
            msg = "lookahead buffer is empty; parse() primes it before any rule runs"
            raise InternalError(msg)
        self._current = self._lexer.next_token()
        self._previous = token
        return token

    def _at_end(self) -> bool:
        """Check if the lookahead is end of input."""
        return self._current is None or self._current.type is TokenType.EOF

    def _check(self, token_type: TokenType, count: int | None = None) -> bool:
        """Check the lookahead without consuming it."""
        return self._current is not None and self._current.matches(token_type, count)

    def _expect(
        self,
        token_type: TokenType,
        construct: str,
        opener: Token,
        count: int | None = None,
    ) -> Token:
        """Consume a token the construct requires here, or fail.

        Raises:
            UnterminatedConstructError: the enclosing block (or the input)
                ended before the required token.
            UnexpectedTokenError: some other token is in the way.
        """
        if self._at_inline_boundary():
            reached = "end of input" if self._at_end() else "end of block"
            raise UnterminatedConstructError(construct, token_type, opener, reached)
        if self._current.matches(token_type, count):
            return self._eat()
        expected = token_type.name if count is None else f"{token_type.name} run of {count}"
        raise UnexpectedTokenError(self._current, construct, expected=expected)

    def _skip_whitespace(self) -> None:
        """Consume whitespace tokens separating blocks.

        Separators are not content, so ``_previous`` keeps pointing at the
        last content token.
        """
        content_end = self._previous
        while self._current is not None and self._current.type is TokenType.WHITESPACE:
            self._eat()
        self._previous = content_end

    def _span(self, start: Token) -> SourceLocation:
        """Location from ``start`` to the last consumed content token.

        A line break consumed as a block separator does not count.
        """
        if self._previous is None:
            return start.location
        return start.location.span_to(self._previous.location)
