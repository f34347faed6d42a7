"""Tests for the shared parse cursor."""

from __future__ import annotations

from tagtree.cursor import Cursor
from tagtree.lexer.patterns import OPEN_TAG_START


class TestAdvance:
    def test_advance_drops_prefix(self) -> None:
        cursor = Cursor("<p>hi</p>")
        cursor.advance(3)
        assert cursor.remaining == "hi</p>"
        assert cursor.position == 3
        assert len(cursor) == 6

    def test_advance_past_end_clamps(self) -> None:
        cursor = Cursor("abc")
        cursor.advance(10)
        assert cursor.remaining == ""
        assert cursor.at_end
        assert len(cursor) == 0

    def test_advance_zero_is_noop(self) -> None:
        cursor = Cursor("abc")
        cursor.advance(0)
        assert cursor.remaining == "abc"


class TestSkipLeadingWhitespace:
    def test_skips_markup_whitespace(self) -> None:
        cursor = Cursor("\t\r\n\f  x ")
        cursor.skip_leading_whitespace()
        assert cursor.remaining == "x "

    def test_vertical_tab_is_not_whitespace(self) -> None:
        cursor = Cursor("\vx")
        cursor.skip_leading_whitespace()
        assert cursor.remaining == "\vx"

    def test_nothing_to_skip(self) -> None:
        cursor = Cursor("x")
        cursor.skip_leading_whitespace()
        assert cursor.position == 0

    def test_all_whitespace(self) -> None:
        cursor = Cursor("   ")
        cursor.skip_leading_whitespace()
        assert cursor.at_end


class TestPeek:
    def test_match_is_anchored_at_position(self) -> None:
        cursor = Cursor("ab<div>")
        assert cursor.match(OPEN_TAG_START) is None
        cursor.advance(2)
        match = cursor.match(OPEN_TAG_START)
        assert match is not None
        assert match.group(1) == "div"

    def test_match_does_not_consume(self) -> None:
        cursor = Cursor("<div>")
        cursor.match(OPEN_TAG_START)
        assert cursor.position == 0

    def test_repr_truncates(self) -> None:
        cursor = Cursor("x" * 40)
        assert repr(cursor) == f"Cursor(0/40, {'x' * 17 + '...'!r})"
