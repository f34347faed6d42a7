"""Recursive descent tree builder producing typed nodes.

Reads markup straight off a shared Cursor; there is no token stream. Each
call to ``_parse_node`` consumes one element: its opening tag, its children
(recursing for nested elements), and its matching close tag.

Per element the builder is a small state machine:

    Start -> SelfClosing (terminal)
    Start -> CollectingChildren -> close tag matched (terminal)

``CollectingChildren`` loops on text and child production and is bounded by
``ParseConfig.max_iterations``. Exceeding the bound raises
UnboundedLoopError and aborts the whole parse.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per parse
operation. The resulting tree is immutable.

"""

from __future__ import annotations

import dataclasses

from tagtree.config import get_parse_config
from tagtree.cursor import Cursor
from tagtree.errors import UnboundedLoopError
from tagtree.lexer import attributes_of, classify, is_self_closing, tag_name_of
from tagtree.lexer.patterns import CLOSE_TAG_NAME, OPEN_TAG_START, WHOLE_CLOSE_TAG, WHOLE_TAG
from tagtree.nodes import ChildNode, Element, Text
from tagtree.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser for HTML-like markup.

    Usage:
            >>> root = Parser('<div class="x">hello</div>').parse()
            >>> root.tag_name, root.children
            ('div', (Text(content='hello'),))

    """

    __slots__ = ("_cursor", "_max_iterations", "_iterations")

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text

        """
        self._cursor = Cursor(source)
        self._max_iterations = get_parse_config().max_iterations
        self._iterations = 0

    @property
    def cursor(self) -> Cursor:
        """The shared cursor; exposes how much input has been consumed."""
        return self._cursor

    @property
    def iterations(self) -> int:
        """Child-collection loop passes made so far, across all elements."""
        return self._iterations

    def parse(self) -> Element | None:
        """Parse the root element.

        Returns:
            The root Element, or None when no element starts the input.

        Raises:
            UnboundedLoopError: An element's close tag never appeared.

        """
        return self._parse_node()

    # =========================================================================
    # Tree building
    # =========================================================================

    def _parse_node(self) -> Element | None:
        """Parse one element and everything up to its matching close tag."""
        element = self._find_next_element()
        if element is None:
            return None
        if element.is_self_closing:
            return element

        cursor = self._cursor
        children: list[ChildNode] = []
        iterations = 0
        while True:
            self._iterations += 1
            cursor.skip_leading_whitespace()
            lexeme = classify(cursor)
            if lexeme.text:
                cursor.advance(len(lexeme.text))
                children.append(Text(content=lexeme.text))
            if lexeme.descends:
                child = self._parse_node()
                if child is not None:
                    children.append(child)

            if self._is_next_close_tag(element.tag_name):
                break

            iterations += 1
            if iterations > self._max_iterations:
                logger.warning(
                    "No close tag for <%s> after %d iterations at offset %d",
                    element.tag_name,
                    iterations,
                    cursor.position,
                )
                raise UnboundedLoopError(element.tag_name, iterations, cursor.position)

        logger.debug("Closed <%s> with %d children", element.tag_name, len(children))
        return dataclasses.replace(element, children=tuple(children))

    def _find_next_element(self) -> Element | None:
        """Consume the opening tag at the cursor and build a childless Element.

        Returns None, leaving the cursor past any whitespace, when no opening
        tag starts here or when it cannot be delimited on the current line.
        """
        cursor = self._cursor
        cursor.skip_leading_whitespace()
        if not cursor.match(OPEN_TAG_START):
            logger.debug("No element at offset %d", cursor.position)
            return None

        match = cursor.match(WHOLE_TAG)
        if not match:
            logger.debug("Unterminated tag at offset %d", cursor.position)
            return None
        tag = match.group(1)
        cursor.advance(len(tag))
        cursor.skip_leading_whitespace()

        return Element(
            tag=tag,
            tag_name=tag_name_of(tag),
            is_self_closing=is_self_closing(tag),
            props=attributes_of(tag),
        )

    def _is_next_close_tag(self, tag_name: str) -> bool:
        """Consume ``</tag_name>`` if it is next; otherwise only whitespace is skipped.

        Name comparison is exact (case-sensitive).
        """
        cursor = self._cursor
        cursor.skip_leading_whitespace()
        match = cursor.match(CLOSE_TAG_NAME)
        if not match or match.group(1) != tag_name:
            return False

        close = cursor.match(WHOLE_CLOSE_TAG)
        if not close:
            return False
        cursor.advance(len(close.group(1)))
        return True
