"""Mutable cursor over the markup being parsed.

The cursor is an index view over an immutable source string. Consumption
moves the index forward; nothing is ever copied. Every recursive parse call
shares the same Cursor instance, so a parent observes exactly how much its
nested calls consumed.

Thread Safety:
Cursor instances are single-use and must not be shared between parses.

"""

from __future__ import annotations

import re

from tagtree.lexer.patterns import LEADING_WHITESPACE


class Cursor:
    """Index-based view over the unconsumed part of a source string.

    Usage:
            >>> cursor = Cursor("  <p>hi</p>")
            >>> cursor.skip_leading_whitespace()
            >>> cursor.remaining
            '<p>hi</p>'
            >>> cursor.advance(3)
            >>> cursor.remaining
            'hi</p>'

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def __len__(self) -> int:
        return self._source_len - self._pos

    def __repr__(self) -> str:
        rest = self.remaining
        if len(rest) > 20:
            rest = rest[:17] + "..."
        return f"Cursor({self._pos}/{self._source_len}, {rest!r})"

    @property
    def position(self) -> int:
        """Offset of the first unconsumed character."""
        return self._pos

    @property
    def remaining(self) -> str:
        """Unconsumed text (allocates a slice; prefer match() in hot paths)."""
        return self._source[self._pos :]

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def advance(self, n: int) -> None:
        """Drop the first ``n`` characters.

        Advancing past the end leaves an empty remainder; it never raises.
        """
        self._pos = min(self._pos + n, self._source_len)

    def skip_leading_whitespace(self) -> None:
        """Drop a maximal leading run of tab, CR, LF, form feed and space."""
        match = LEADING_WHITESPACE.match(self._source, self._pos)
        if match:
            self._pos = match.end()

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match ``pattern`` anchored at the current position without consuming.

        Patterns must not rely on ``^``; anchoring comes from the match position.
        """
        return pattern.match(self._source, self._pos)
