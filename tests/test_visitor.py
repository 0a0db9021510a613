"""Tests for the AST visitor and transform utilities."""

import dataclasses

import pytest

from minimark import parse
from minimark.location import SourceLocation
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
    ListKind,
    Node,
    Paragraph,
    Text,
)
from minimark.visitor import BaseVisitor, transform

LOC = SourceLocation(lineno=1, col_offset=0)


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(location=LOC, children=tuple(blocks))


def _para(*inlines) -> Paragraph:  # type: ignore[no-untyped-def]
    return Paragraph(location=LOC, children=tuple(inlines))


def _text(content: str) -> Text:
    return Text(location=LOC, content=content)


def _list(*items: ListItem, kind: ListKind = ListKind.UNORDERED) -> List:
    return List(location=LOC, kind=kind, items=items)


def _item(*blocks) -> ListItem:  # type: ignore[no-untyped-def]
    return ListItem(location=LOC, children=tuple(blocks))


# =============================================================================
# Visitor dispatch tests
# =============================================================================


class NodeCollector(BaseVisitor[None]):
    """Collects all visited node type names."""

    def __init__(self) -> None:
        self.visited: list[str] = []

    def visit_default(self, node) -> None:  # type: ignore[override]
        self.visited.append(type(node).__name__)


class TestVisitorDispatch:
    """Tests that every node type dispatches to its visit_* method."""

    def test_visits_whole_parsed_tree_in_order(self) -> None:
        doc = parse("# *t*\n\n- a **b**\n  1. [l](u) ![i](s) `c `")
        collector = NodeCollector()
        collector.visit(doc)

        assert collector.visited == [
            "Document",
            "Heading",
            "Text",
            "Italic",
            "Text",
            "List",
            "ListItem",
            "Paragraph",
            "Text",
            "Bold",
            "Text",
            "List",
            "ListItem",
            "Paragraph",
            "Link",
            "Text",
            "Text",
            "Image",
            "Text",
            "Code",
        ]

    def test_specific_method_overrides_default(self) -> None:
        class LinkCollector(BaseVisitor[None]):
            def __init__(self) -> None:
                self.hrefs: list[str] = []

            def visit_link(self, node: Link) -> None:
                self.hrefs.append(node.href)

        collector = LinkCollector()
        collector.visit(parse("[a](one) and [b](two)\n\n- [c](three)"))
        assert collector.hrefs == ["one", "two", "three"]

    def test_visit_returns_dispatch_result(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_default(self, node: Node) -> str:
                return type(node).__name__

        assert Namer().visit(_doc()) == "Document"

    def test_leaf_nodes_have_no_children_walked(self) -> None:
        collector = NodeCollector()
        collector.visit(Image(location=LOC, src="s", alt="a"))
        collector.visit(Code(location=LOC, code="x"))
        assert collector.visited == ["Image", "Code"]


# =============================================================================
# Transform tests
# =============================================================================


class TestTransform:
    def test_identity_returns_equal_tree(self) -> None:
        doc = parse("# a\n\n- b\n- c")
        assert transform(doc, lambda n: n) == doc

    def test_demote_headings(self) -> None:
        doc = parse("# a\n\n## b")

        def demote(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=node.level + 1)
            return node

        new_doc = transform(doc, demote)
        assert [h.level for h in new_doc.children] == [2, 3]
        assert [h.level for h in doc.children] == [1, 2]

    def test_rewrite_link_targets(self) -> None:
        doc = parse("[docs](/guide)")

        def absolute(node: Node) -> Node:
            if isinstance(node, Link):
                return dataclasses.replace(node, href="https://example.com" + node.href)
            return node

        (link,) = transform(doc, absolute).children[0].children
        assert link.href == "https://example.com/guide"

    def test_bottom_up_order(self) -> None:
        order: list[str] = []

        def record(node: Node) -> Node:
            order.append(type(node).__name__)
            return node

        transform(_doc(_para(Bold(location=LOC, children=(_text("x"),)))), record)
        assert order == ["Text", "Bold", "Paragraph", "Document"]

    def test_unchanged_subtrees_are_shared(self) -> None:
        doc = parse("a\n\nb")
        new_doc = transform(doc, lambda n: n)
        assert new_doc is doc


class TestTransformRemoval:
    def test_remove_inline(self) -> None:
        doc = _doc(_para(_text("a"), Italic(location=LOC, children=(_text("b"),))))

        new_doc = transform(doc, lambda n: None if isinstance(n, Italic) else n)
        assert new_doc.children[0].children == (_text("a"),)

    def test_remove_block(self) -> None:
        doc = parse("# drop\n\nkeep")

        new_doc = transform(doc, lambda n: None if isinstance(n, Heading) else n)
        assert len(new_doc.children) == 1
        assert isinstance(new_doc.children[0], Paragraph)

    def test_removing_all_items_removes_list(self) -> None:
        doc = _doc(_list(_item(_para(_text("x")))), _para(_text("y")))

        new_doc = transform(doc, lambda n: None if isinstance(n, ListItem) else n)
        assert new_doc.children == (_para(_text("y")),)

    def test_removing_some_items_keeps_list(self) -> None:
        doc = parse("- a\n- b")

        def drop_b(node: Node) -> Node | None:
            if isinstance(node, ListItem) and node.children[0].children[0].content == "b":
                return None
            return node

        (lst,) = transform(doc, drop_b).children
        assert len(lst.items) == 1

    def test_root_cannot_be_removed(self) -> None:
        with pytest.raises(TypeError, match="cannot remove root"):
            transform(_doc(), lambda n: None if isinstance(n, Document) else n)
