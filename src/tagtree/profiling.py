"""Opt-in parse statistics for tagtree.

Accumulates, across every ``parse()`` call inside a ``profiled_parse()``
block, the shape of the trees produced and the child-collection work spent
producing them. Elements and text nodes are tallied separately by their
``NodeType`` discriminant. Loop iterations are the passes the tree builder
made while collecting children, so a parse that faulted on a missing close
tag still reports how far it got.

Nothing is recorded while no block is active (get_parse_accumulator()
returns None).

Example:
    from tagtree import parse
    from tagtree.profiling import profiled_parse

    with profiled_parse() as stats:
        parse("<p>Hello <b>World</b></p>")

    stats.summary()
    # {"total_ms": 0.1, "parse_calls": 1, "faults": 0, "source_length": 25,
    #  "elements": 2, "texts": 2, "iterations": 2, "max_depth": 2}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from tagtree.nodes import Element, NodeType


@dataclass
class ParseAccumulator:
    """Parse statistics summed over a profiling block.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: parse() calls recorded, faulted ones included.
        faults: Calls aborted by UnboundedLoopError.
        source_length: Total length of sources parsed.
        elements: Element nodes produced.
        texts: Text nodes produced.
        iterations: Child-collection loop passes spent.
        max_depth: Deepest element nesting seen (a lone root is depth 1).

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    faults: int = 0
    source_length: int = 0
    elements: int = 0
    texts: int = 0
    iterations: int = 0
    max_depth: int = 0

    def record_parse(self, source_length: int, root: Element | None, iterations: int) -> None:
        """Record a completed parse and tally the tree it produced."""
        self.parse_calls += 1
        self.source_length += source_length
        self.iterations += iterations
        if root is None:
            return
        for node_type, depth in _nodes_with_depth(root):
            if node_type is NodeType.ELEMENT:
                self.elements += 1
                self.max_depth = max(self.max_depth, depth)
            else:
                self.texts += 1

    def record_fault(self, source_length: int, iterations: int) -> None:
        """Record a parse that raised UnboundedLoopError."""
        self.parse_calls += 1
        self.faults += 1
        self.source_length += source_length
        self.iterations += iterations

    @property
    def node_count(self) -> int:
        """Element and text nodes together."""
        return self.elements + self.texts

    @property
    def total_duration_ms(self) -> float:
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "faults": self.faults,
            "source_length": self.source_length,
            "elements": self.elements,
            "texts": self.texts,
            "iterations": self.iterations,
            "max_depth": self.max_depth,
        }


def _nodes_with_depth(root: Element) -> Iterator[tuple[NodeType, int]]:
    """Yield each child node's type with its element depth, pre-order.

    Text nodes report the depth of the element that holds them.
    """
    stack: list[tuple[Element, int]] = [(root, 1)]
    while stack:
        element, depth = stack.pop()
        yield NodeType.ELEMENT, depth
        for child in element.children:
            if child.type is NodeType.ELEMENT:
                stack.append((child, depth + 1))  # type: ignore[arg-type]
            else:
                yield child.type, depth


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect parse statistics for every parse() call inside the block.

    Blocks nest; the innermost one receives the records.

    Yields:
        ParseAccumulator populated by parse() calls inside the block.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
