"""Link and image parsing for the minimark parser.

Only inline links are supported:

    [text](href)
    ![alt](src)

The target is merged text and whitespace between the parentheses and must
not be empty. The bracketed part is full inline content; for images it is
flattened to a plain string for ``Image.alt``.

"""

from __future__ import annotations

from minimark.nodes import Image, Inline, Link, plain_text
from minimark.tokens import Token, TokenType


class LinkParsingMixin:
    """Link and image parsing.

    Required Host Methods:
        - _eat() -> Token
        - _expect(token_type, construct, opener, count) -> Token
        - _nesting(token) -> context manager
        - _parse_inlines(stop) -> tuple[Inline, ...]
        - _parse_required_text(construct, opener) -> str
        - _span(start) -> SourceLocation

    """

    def _parse_link(self) -> Link:
        """Link := [ InlineToken* ] ( Text )"""
        opener = self._eat()
        children = self._parse_bracketed("link", opener)
        href = self._parse_target("link", opener)
        return Link(location=self._span(opener), href=href, children=children)

    def _parse_image(self) -> Image:
        """Image := ! [ InlineToken* ] ( Text )"""
        opener = self._eat()
        self._expect(TokenType.OPENING_BRACKET, "image", opener)
        children = self._parse_bracketed("image", opener)
        src = self._parse_target("image", opener)
        return Image(location=self._span(opener), src=src, alt=plain_text(children))

    def _parse_bracketed(self, construct: str, opener: Token) -> tuple[Inline, ...]:
        """Parse inline content up to and including the closing bracket.

        The opening bracket has already been consumed.
        """
        with self._nesting(opener):
            children = self._parse_inlines(stop=(TokenType.CLOSING_BRACKET, 1))
        self._expect(TokenType.CLOSING_BRACKET, construct, opener)
        return children

    def _parse_target(self, construct: str, opener: Token) -> str:
        """Parse ``( Text )`` and return the text."""
        self._expect(TokenType.OPENING_PAREN, construct, opener)
        target = self._parse_required_text(construct, opener)
        self._expect(TokenType.CLOSING_PAREN, construct, opener)
        return target
