"""Inline parsing subsystem for the minimark parser.

Provides mixins for parsing inline content:
- Text (merged text and whitespace tokens)
- Italic (*, _) and bold (**)
- Code (`)
- Links and images

Architecture:
Plain recursive descent over the token stream. Each construct is chosen by
the lookahead token's type and run length; no delimiter stack is needed
because the dialect only matches delimiters of identical run length.

"""

from __future__ import annotations

from minimark.parsing.inline.core import InlineParsingCoreMixin
from minimark.parsing.inline.emphasis import EmphasisMixin
from minimark.parsing.inline.links import LinkParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
):
    """Combined inline parsing mixin.

    Required Host Attributes:
        - _current: Token | None
        - _single_line: bool
        - _block_ended: bool

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "EmphasisMixin",
    "LinkParsingMixin",
]
