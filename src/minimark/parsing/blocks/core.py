"""Block dispatch, headings, and paragraphs for the minimark parser.

A block starts wherever the previous block ended, after any separating
whitespace. The lookahead token alone picks the block type:

- HASH run: heading
- DASH run or ordered marker (``1.``): list
- anything else: paragraph

Thread Safety:
All state is instance-local. One parser instance per thread.

"""

from __future__ import annotations

from minimark.config import ParseConfig
from minimark.nodes import Block, Heading, ListKind, Paragraph
from minimark.tokens import Token, TokenType


def ordered_marker(token: Token) -> bool:
    """Check for an ordered list marker: ASCII digits followed by a period.

    ``1)`` cannot be a marker here because ``)`` always ends a text run.
    """
    value = token.value
    if token.type is not TokenType.TEXT or len(value) < 2 or value[-1] != ".":
        return False
    number = value[:-1]
    return number.isascii() and number.isdigit()


class BlockParsingCoreMixin:
    """Block dispatch plus heading and paragraph rules.

    Required Host Attributes:
        - _current: Token | None
        - _single_line: bool
        - _block_ended: bool
        - _config: ParseConfig

    Required Host Methods (from other mixins):
        - _eat() -> Token
        - _span(start) -> SourceLocation
        - _parse_inlines(stop) -> tuple[Inline, ...]
        - _parse_list(kind) -> List

    """

    _config: ParseConfig

    def _parse_block(self) -> Block:
        """Parse one block starting at the lookahead token."""
        self._block_ended = False
        token = self._current

        if token.type is TokenType.HASH:
            return self._parse_heading()
        kind = self._list_marker_kind(token)
        if kind is not None:
            return self._parse_list(kind)
        return self._parse_paragraph()

    def _parse_heading(self) -> Heading:
        """Heading := HASH(n) InlineToken*

        Content runs to the end of the line; the level is the run length.
        """
        marker = self._eat()
        self._single_line = True
        try:
            children = self._parse_inlines()
        finally:
            self._single_line = False
        return Heading(location=self._span(marker), level=marker.count, children=children)

    def _parse_paragraph(self) -> Paragraph:
        """Paragraph := InlineToken+

        Continues across line breaks until a line starts with a block
        marker, a blank line, or end of input.
        """
        start = self._current
        children = self._parse_inlines()
        return Paragraph(location=self._span(start), children=children)

    def _starts_block(self, token: Token) -> bool:
        """Check whether a token at the start of a line opens a new block."""
        return token.type is TokenType.HASH or self._list_marker_kind(token) is not None

    def _list_marker_kind(self, token: Token) -> ListKind | None:
        if token.type is TokenType.DASH:
            return ListKind.UNORDERED
        if ordered_marker(token):
            return ListKind.ORDERED
        return None

    def _splits_on_blank_line(self) -> bool:
        return self._config.blank_line_splits_paragraphs
