"""Immutable AST transform: push every heading one level down."""

import dataclasses

from minimark import parse, transform
from minimark.nodes import Heading, Node


def shift_headings(node: Node) -> Node:
    """Shift heading levels down (e.g. # -> ##). Levels are not capped."""
    if isinstance(node, Heading):
        return dataclasses.replace(node, level=node.level + 1)
    return node


source = """# Top Level

Content here.

## Section

More content.
"""

doc = parse(source)
new_doc = transform(doc, shift_headings)

print("Original levels:", [b.level for b in doc.children if isinstance(b, Heading)])
print("Shifted levels: ", [b.level for b in new_doc.children if isinstance(b, Heading)])
