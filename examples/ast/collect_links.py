"""Typed tree — collect every link target with a visitor."""

from tagtree import parse
from tagtree.nodes import Element
from tagtree.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect href values of <a> elements."""

    def __init__(self) -> None:
        self.links: list[str] = []

    def visit_element(self, node: Element) -> None:
        if node.tag_name == "a":
            self.links.extend(p.value for p in node.props if p.name == "href")


source = (
    '<nav><ul>'
    '<li><a href="/">Home</a></li>'
    '<li><a href="/docs" class="active">Docs</a></li>'
    '</ul></nav>'
)

root = parse(source)
collector = LinkCollector()
if root is not None:
    collector.visit(root)
for href in collector.links:
    print(href)
