"""Block parsing subsystem for the minimark parser.

Provides mixins for parsing block-level content:
- Headings
- Paragraphs
- Lists (ordered and unordered, nested by column)

Architecture:
- core: Block dispatch, headings, paragraphs
- list: Lists and list items

"""

from minimark.parsing.blocks.core import BlockParsingCoreMixin, ordered_marker
from minimark.parsing.blocks.list import ListParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Required Host Attributes:
        - _current: Token | None
        - _block_ended: bool
        - _single_line: bool
        - _config: ParseConfig

    Required Host Methods:
        - _eat() -> Token
        - _at_end() -> bool
        - _nesting(token) -> context manager
        - _parse_inlines(stop) -> tuple[Inline, ...]

    """

    pass


__all__ = [
    "BlockParsingMixin",
    "BlockParsingCoreMixin",
    "ListParsingMixin",
    "ordered_marker",
]
