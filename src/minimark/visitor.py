"""AST Visitor and Transformer for minimark.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example, collecting all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.hrefs.append(node.href)

    collector = LinkCollector()
    collector.visit(doc)

Example, demoting every heading one level:

    def demote(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=node.level + 1)
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from minimark.nodes import (
    Bold,
    Code,
    Document,
    Heading,
    Image,
    Italic,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Text,
)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case Code():
                return self.visit_code(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case List(items=items):
                for item in items:
                    self.visit(item)
            case (
                Document(children=children)
                | Heading(children=children)
                | Paragraph(children=children)
                | ListItem(children=children)
                | Bold(children=children)
                | Italic(children=children)
                | Link(children=children)
            ):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: Text, Image, Code


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node. Removing every item of a
    List removes the List as well, since an empty List cannot exist. The
    root Document cannot be removed; returning None for it raises TypeError.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied. The original tree
        is untouched.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    if transformed is None:
        return None
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Produce a new node with children transformed; filter out removed nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case List(items=items):
            new_items = _filtered(items)
            if not new_items:
                return None
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case (
            Document(children=children)
            | Heading(children=children)
            | Paragraph(children=children)
            | ListItem(children=children)
            | Bold(children=children)
            | Italic(children=children)
            | Link(children=children)
        ):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
