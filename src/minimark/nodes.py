"""Typed AST nodes for minimark.

All AST nodes are frozen dataclasses with slots:
- Immutability: the tree is built once per parse and never modified
- Pattern matching: match statements work naturally on the node classes
- Memory efficiency: __slots__ on every node

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── List
│   └── ListItem
└── Inline (inline elements)
    ├── Text
    ├── Bold
    ├── Italic
    ├── Link
    ├── Image
    └── Code

Each node exclusively owns its children; tuples keep that ownership
immutable.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from minimark.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text, including any whitespace merged into it."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markup: **text**

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markup: *text* or _text_

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markup: [text](href)

    """

    href: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image. The alt text is the flattened bracket content.

    Markup: ![alt](src)

    """

    src: str
    alt: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Markup: `code`

    """

    code: str


type Inline = Text | Bold | Italic | Link | Image | Code


# =============================================================================
# Block Nodes
# =============================================================================


class ListKind(Enum):
    """How a list's items are marked: ``1.`` or ``-``."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading.

    Markup: # Heading

    The level is the number of ``#`` characters and is not limited to 6.

    """

    level: int
    children: tuple[Inline, ...]

    def __post_init__(self) -> None:
        if self.level < 1:
            msg = f"Heading level must be at least 1, got {self.level}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Run of inline content not introduced by a block marker."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """A single list item.

    Holds block content, so an item may contain paragraphs, headings,
    and nested lists. May be empty (a bare marker).

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markup: - item  /  1. item

    Always has at least one item.

    """

    kind: ListKind
    items: tuple[ListItem, ...]

    def __post_init__(self) -> None:
        if not self.items:
            msg = "List must have at least one item"
            raise ValueError(msg)

    @property
    def ordered(self) -> bool:
        return self.kind is ListKind.ORDERED


type Block = Heading | Paragraph | List


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node. Owns the whole tree."""

    children: tuple[Block, ...]


# =============================================================================
# Helpers
# =============================================================================


def plain_text(inlines: Iterable[Inline]) -> str:
    """Flatten inline content to a string, dropping all markup.

    Images contribute their alt text, code spans their code.

    Example:
        >>> from minimark import parse
        >>> plain_text(parse("**bold** and *it*").children[0].children)
        'bold and it'

    """
    parts: list[str] = []
    for node in inlines:
        match node:
            case Text(content=content):
                parts.append(content)
            case Code(code=code):
                parts.append(code)
            case Image(alt=alt):
                parts.append(alt)
            case Bold(children=children) | Italic(children=children) | Link(children=children):
                parts.append(plain_text(children))
    return "".join(parts)
