"""Tests for the tree visitor, walker and transform utilities."""

import dataclasses

import pytest

from tagtree import parse
from tagtree.nodes import Attribute, Element, Node, Text
from tagtree.visitor import BaseVisitor, transform, walk


def _root(source: str) -> Element:
    root = parse(source)
    assert root is not None
    return root


SOURCE = '<div id="a"><p class="x">one</p><img src="b.png" />two</div>'


# =============================================================================
# Visitor dispatch tests
# =============================================================================


class NodeCollector(BaseVisitor[None]):
    """Collects all visited node type names."""

    def __init__(self) -> None:
        self.visited: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.visited.append(type(node).__name__)


class HrefCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.values: list[str] = []

    def visit_attribute(self, node: Attribute) -> None:
        self.values.append(node.value)


class TestVisitorDispatch:
    def test_visit_order(self) -> None:
        collector = NodeCollector()
        collector.visit(_root(SOURCE))
        assert collector.visited == [
            "Element",  # div
            "Attribute",  # id
            "Element",  # p
            "Attribute",  # class
            "Text",  # one
            "Element",  # img
            "Attribute",  # src
            "Text",  # two
        ]

    def test_attribute_visitor(self) -> None:
        collector = HrefCollector()
        collector.visit(_root(SOURCE))
        assert collector.values == ["a", "x", "b.png"]

    def test_visit_returns_dispatch_result(self) -> None:
        class NameVisitor(BaseVisitor[str]):
            def visit_element(self, node: Element) -> str:
                return node.tag_name

        assert NameVisitor().visit(_root(SOURCE)) == "div"

    def test_visit_leaf(self) -> None:
        collector = NodeCollector()
        collector.visit(Text(content="x"))
        assert collector.visited == ["Text"]


# =============================================================================
# Walk
# =============================================================================


class TestWalk:
    def test_pre_order(self) -> None:
        nodes = list(walk(_root(SOURCE)))
        described = [n.tag_name if isinstance(n, Element) else n.content for n in nodes]
        assert described == ["div", "p", "one", "img", "two"]

    def test_walk_text_node(self) -> None:
        text = Text(content="x")
        assert list(walk(text)) == [text]

    def test_attributes_not_yielded(self) -> None:
        assert not any(isinstance(n, Attribute) for n in walk(_root(SOURCE)))


# =============================================================================
# Transform
# =============================================================================


class TestTransform:
    def test_identity_returns_equal_tree(self) -> None:
        root = _root(SOURCE)
        assert transform(root, lambda n: n) == root

    def test_remove_nodes(self) -> None:
        root = _root(SOURCE)

        def drop_images(node):  # type: ignore[no-untyped-def]
            if isinstance(node, Element) and node.tag_name == "img":
                return None
            return node

        result = transform(root, drop_images)
        assert [type(c).__name__ for c in result.children] == ["Element", "Text"]
        # Original untouched
        assert len(root.children) == 3

    def test_rewrite_text(self) -> None:
        def upper(node):  # type: ignore[no-untyped-def]
            if isinstance(node, Text):
                return dataclasses.replace(node, content=node.content.upper())
            return node

        result = transform(_root(SOURCE), upper)
        texts = [n.content for n in walk(result) if isinstance(n, Text)]
        assert texts == ["ONE", "TWO"]

    def test_bottom_up_order(self) -> None:
        seen: list[str] = []

        def record(node):  # type: ignore[no-untyped-def]
            seen.append(node.tag_name if isinstance(node, Element) else node.content)
            return node

        transform(_root(SOURCE), record)
        assert seen == ["one", "p", "img", "two", "div"]

    def test_cannot_remove_root(self) -> None:
        with pytest.raises(TypeError):
            transform(_root(SOURCE), lambda n: None)

    def test_root_must_stay_element(self) -> None:
        def to_text(node):  # type: ignore[no-untyped-def]
            return Text(content="x") if isinstance(node, Element) and node.tag_name == "div" else node

        with pytest.raises(TypeError):
            transform(_root(SOURCE), to_text)
