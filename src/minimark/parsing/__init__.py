"""Parsing subsystem for the minimark parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: One-token lookahead, eat, expect
- `InlineParsingMixin`: Inline content (text, emphasis, code, links, images)
- `BlockParsingMixin`: Block-level content (headings, paragraphs, lists)

Example:
    >>> from minimark.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from minimark.parsing.blocks import BlockParsingMixin
from minimark.parsing.inline import InlineParsingMixin
from minimark.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
]
