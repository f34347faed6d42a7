"""Tree visitor, walker and transformer for tagtree.

Provides a base visitor class with match-based dispatch, a pre-order walk,
and an immutable transform function for rewriting frozen trees.

Example: collect every link target:

    class HrefCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_attribute(self, node: Attribute) -> None:
            if node.name == "href":
                self.hrefs.append(node.value)

    collector = HrefCollector()
    collector.visit(root)

Example: drop every <script> element:

    def drop_scripts(node: Node) -> Node | None:
        if isinstance(node, Element) and node.tag_name == "script":
            return None
        return node

    cleaned = transform(root, drop_scripts)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. ``walk``
    and ``transform`` are pure.

"""

import dataclasses
from collections.abc import Callable, Iterator

from tagtree.nodes import Attribute, ChildNode, Element, Node, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. After
    ``visit_element`` returns, the element's props and then its children are
    visited automatically.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk below it."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_attribute(self, node: Attribute) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Element():
                return self.visit_element(node)
            case Text():
                return self.visit_text(node)
            case Attribute():
                return self.visit_attribute(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Element(props=props, children=children):
                for prop in props:
                    self.visit(prop)
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes


def walk(root: ChildNode) -> Iterator[ChildNode]:
    """Yield ``root`` and every descendant element or text node, pre-order.

    Attributes are not yielded; reach them through ``Element.props``.
    """
    stack: list[ChildNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Element):
            stack.extend(reversed(node.children))


def transform(root: Element, fn: Callable[[ChildNode], ChildNode | None]) -> Element:
    """Apply ``fn`` to every element and text node, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent with its new children. Return ``None`` to remove a node. The root
    cannot be removed and must stay an Element; otherwise TypeError is raised.

    The original tree is untouched.
    """
    result = _transform_node(root, fn)
    if result is None or not isinstance(result, Element):
        msg = "transform fn must return an Element for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(
    node: ChildNode, fn: Callable[[ChildNode], ChildNode | None]
) -> ChildNode | None:
    """Transform a single node bottom-up: children first, then self."""
    if isinstance(node, Element) and node.children:
        new_children = tuple(
            result for child in node.children
            if (result := _transform_node(child, fn)) is not None
        )
        if new_children != node.children:
            node = dataclasses.replace(node, children=new_children)
    return fn(node)
