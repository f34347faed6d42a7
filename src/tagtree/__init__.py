"""
tagtree — a small recursive-descent parser for HTML-like template markup.

Turns a markup string into a tree of typed, immutable nodes (Element, Text,
Attribute) for a template compiler to consume. The grammar is deliberately
minimal: no entities, comments, doctypes, void elements or implicit closing.

Quick Start:
    >>> from tagtree import parse
    >>> root = parse('<div class="box"><span>a</span></div>')
    >>> root.tag_name
    'div'
    >>> root.props[0].name, root.props[0].value
    ('class', 'box')
    >>> root.children[0].children[0].content
    'a'

    >>> # Object form, single-use
    >>> from tagtree import Parser
    >>> Parser('<img src="a.png" />').parse().is_self_closing
    True
"""

from tagtree.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagtree.cursor import Cursor
from tagtree.errors import ParseError, TagTreeError, UnboundedLoopError
from tagtree.lexer import Lexeme, LexemeKind, attributes_of, classify, is_self_closing, tag_name_of
from tagtree.nodes import Attribute, ChildNode, Element, Node, NodeType, Text
from tagtree.parser import Parser
from tagtree.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from tagtree.visitor import BaseVisitor, transform, walk

__version__ = "0.1.0"


def parse(source: str, *, config: ParseConfig | None = None) -> Element | None:
    """Parse markup into a tree rooted at its first element.

    Args:
        source: Markup source text
        config: Optional configuration for this call only (the active
            context configuration is used when None)

    Returns:
        Root Element, or None when the input does not start with an element.

    Raises:
        UnboundedLoopError: An element's close tag never appeared.

    Example:
        >>> parse("just text") is None
        True

    """
    # The iteration cap is captured when the parser is built
    if config is None:
        parser = Parser(source)
    else:
        with parse_config_context(config):
            parser = Parser(source)

    acc = get_parse_accumulator()
    if acc is None:
        return parser.parse()

    try:
        root = parser.parse()
    except UnboundedLoopError:
        acc.record_fault(len(source), parser.iterations)
        raise
    acc.record_parse(len(source), root, parser.iterations)
    return root


__all__ = [
    # Main API
    "Parser",
    "parse",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Nodes
    "Attribute",
    "ChildNode",
    "Element",
    "Node",
    "NodeType",
    "Text",
    # Lexical layer
    "Cursor",
    "Lexeme",
    "LexemeKind",
    "attributes_of",
    "classify",
    "is_self_closing",
    "tag_name_of",
    # Errors
    "ParseError",
    "TagTreeError",
    "UnboundedLoopError",
    # Traversal
    "BaseVisitor",
    "transform",
    "walk",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
]
