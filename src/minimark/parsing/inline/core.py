"""Core inline parsing for the minimark parser.

Dispatches on the lookahead token to the inline construct it opens and
accumulates plain text.

Boundaries:
Inline content ends at end of input, or earlier where the enclosing block
ends:
- in a heading, at the first whitespace token containing a newline
  (left unconsumed)
- in a paragraph, at a line break followed by a block marker or at a
  blank line (consumed as the separator; ``_block_ended`` is set)

Thread Safety:
All state is instance-local. One parser instance per thread.

"""

from __future__ import annotations

from minimark.errors import UnexpectedTokenError, UnterminatedConstructError
from minimark.nodes import Inline, Text
from minimark.tokens import Token, TokenType

# Tokens merged into a single Text node
TEXT_TOKEN_TYPES = frozenset({TokenType.TEXT, TokenType.WHITESPACE})


class InlineParsingCoreMixin:
    """Inline dispatch, text accumulation, and boundary detection.

    Required Host Attributes:
        - _current: Token | None
        - _previous: Token | None
        - _single_line: bool
        - _block_ended: bool

    Required Host Methods (from other mixins):
        - _eat() -> Token
        - _at_end() -> bool
        - _span(start) -> SourceLocation
        - _starts_block(token) -> bool
        - _splits_on_blank_line() -> bool
        - _parse_image() -> Image
        - _parse_code() -> Code
        - _parse_italic() -> Italic
        - _parse_bold() -> Bold
        - _parse_link() -> Link

    """

    def _parse_inlines(self, stop: tuple[TokenType, int] | None = None) -> tuple[Inline, ...]:
        """Parse inline tokens until a boundary or the ``stop`` token.

        The stop token (a construct's closing delimiter) is left for the
        caller to consume.
        """
        children: list[Inline] = []
        while not self._at_inline_boundary():
            if stop is not None and self._current.matches(*stop):
                break
            node = self._parse_inline_token()
            if node is not None:
                children.append(node)
        return tuple(children)

    def _parse_inline_token(self) -> Inline | None:
        """Parse one inline construct chosen by the lookahead token.

        Returns None when only a paragraph separator was consumed.

        Raises:
            UnexpectedTokenError: the lookahead opens no inline construct.
        """
        token = self._current

        if token.type is TokenType.EXCLAMATION_MARK:
            return self._parse_image()
        if token.matches(TokenType.BACKTICKS, 1):
            return self._parse_code()
        if token.matches(TokenType.ASTERISK, 1) or token.matches(TokenType.UNDERSCORE, 1):
            return self._parse_italic()
        if token.matches(TokenType.ASTERISK, 2):
            return self._parse_bold()
        if token.type is TokenType.OPENING_BRACKET:
            return self._parse_link()
        if token.type in TEXT_TOKEN_TYPES:
            content = self._parse_text()
            if not content:
                return None
            return Text(location=self._span(token), content=content)

        raise UnexpectedTokenError(token, "inline content")

    def _parse_text(self) -> str:
        """Merge consecutive TEXT and WHITESPACE tokens into one string.

        Stops at the first other token without consuming it. A line break
        that ends the block is consumed as the separator but left out of
        the text and out of the node spans.
        """
        parts: list[str] = []
        while True:
            token = self._current
            if token.type is TokenType.TEXT:
                parts.append(self._eat().value)
                continue
            if token.type is not TokenType.WHITESPACE:
                break
            if "\n" not in token.value:
                parts.append(self._eat().value)
                continue
            if self._single_line:
                break

            content_end = self._previous
            separator = self._eat()
            if self._line_break_ends_paragraph(separator):
                self._previous = content_end
                self._block_ended = True
                break
            parts.append(separator.value)
        return "".join(parts)

    def _parse_required_text(self, construct: str, opener: Token) -> str:
        """Parse the non-empty text a construct requires (link target, code body)."""
        if self._at_inline_boundary():
            reached = "end of input" if self._at_end() else "end of block"
            raise UnterminatedConstructError(construct, TokenType.TEXT, opener, reached)
        if self._current.type not in TEXT_TOKEN_TYPES:
            raise UnexpectedTokenError(self._current, construct, expected="text")
        return self._parse_text()

    def _line_break_ends_paragraph(self, separator: Token) -> bool:
        """Decide whether a consumed line break closes the paragraph.

        Called with the line break already consumed, so the lookahead is the
        first token of the next line.
        """
        if self._at_end():
            return True
        if self._splits_on_blank_line() and separator.value.count("\n") >= 2:
            return True
        return self._starts_block(self._current)

    def _at_inline_boundary(self) -> bool:
        """Check whether the enclosing block's inline content has ended."""
        if self._block_ended or self._at_end():
            return True
        token = self._current
        return (
            self._single_line
            and token.type is TokenType.WHITESPACE
            and "\n" in token.value
        )
