"""Typed tree nodes for tagtree.

All nodes are frozen dataclasses with slots. A parsed document is a single
Element root whose children are Elements and Text nodes. Attributes hang
off ``Element.props`` and never appear among children.

Node Hierarchy:
Node (base)
├── Element
├── Text
└── Attribute

Every node class carries a ``type`` discriminant (NodeType) so downstream
consumers can dispatch without isinstance checks.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class NodeType(Enum):
    """Discriminant for the three node variants."""

    ELEMENT = "ELEMENT"
    TEXT = "TEXT"
    ATTRIBUTE = "ATTRIBUTE"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""

    type: ClassVar[NodeType]


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Text found between two markup boundaries."""

    type: ClassVar[NodeType] = NodeType.TEXT

    content: str


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """A ``name="value"`` pair from an opening tag.

    The value has one layer of surrounding quotes stripped.

    """

    type: ClassVar[NodeType] = NodeType.ATTRIBUTE

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An element with its opening tag, attributes and children.

    Attributes:
        tag: Verbatim opening tag source, e.g. ``<div class="x">``
        tag_name: Bare name derived from ``tag``, e.g. ``div``
        is_self_closing: True when ``tag`` ends with `` />``
        props: Attributes in source order
        children: Child elements and text, empty for self-closing elements

    """

    type: ClassVar[NodeType] = NodeType.ELEMENT

    tag: str
    tag_name: str
    is_self_closing: bool
    props: tuple[Attribute, ...] = ()
    children: tuple[ChildNode, ...] = ()


type ChildNode = Element | Text
