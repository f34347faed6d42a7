"""Lexical classifier for the tree builder.

Decides which of the recognized lexical situations starts at the cursor.
Patterns are tried in a fixed priority order; the first match wins. A start
tag is therefore preferred over any reading that treats leading text as
present.

The classifier is pure: it never moves the cursor. The caller is expected
to have skipped leading whitespace already.

Quirk: text followed by a self-closing tag or an end tag is trimmed, text
followed by a start tag is not. Callers advance the cursor by the length of
the text they receive, so the untrimmed form also consumes trailing spaces.
Trimming uses TRIMMED_WHITESPACE rather than the str.strip() default.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagtree.lexer import lexemes
from tagtree.lexer.lexemes import Lexeme, LexemeKind
from tagtree.lexer.patterns import (
    END_TAG,
    START_OR_SELF_CLOSING_TAG,
    TEXT_THEN_END_TAG,
    TEXT_THEN_SELF_CLOSING_TAG,
    TEXT_THEN_START_TAG,
    TRIMMED_WHITESPACE,
)

if TYPE_CHECKING:
    from tagtree.cursor import Cursor


def classify(cursor: Cursor) -> Lexeme:
    """Classify what comes next at the cursor.

    Args:
        cursor: Cursor positioned past any leading whitespace

    Returns:
        The first matching Lexeme, or a NO_MATCH lexeme when nothing applies.

    Examples:
        >>> from tagtree.cursor import Cursor
        >>> classify(Cursor("<p>x</p>")).kind
        <LexemeKind.START_TAG: 1>
        >>> classify(Cursor("hi <br />")).text
        'hi'
        >>> classify(Cursor("hi <b>x</b>")).text
        'hi '

    """
    match = cursor.match(START_OR_SELF_CLOSING_TAG)
    if match:
        return Lexeme(LexemeKind.START_TAG, tag=match.group(1))

    if cursor.match(END_TAG):
        return lexemes.END_TAG

    match = cursor.match(TEXT_THEN_SELF_CLOSING_TAG)
    if match:
        return Lexeme(
            LexemeKind.TEXT_THEN_SELF_CLOSING,
            text=match.group(1).strip(TRIMMED_WHITESPACE),
            tag=match.group(2),
        )

    match = cursor.match(TEXT_THEN_END_TAG)
    if match:
        return Lexeme(LexemeKind.TEXT_THEN_END, text=match.group(1).strip(TRIMMED_WHITESPACE))

    match = cursor.match(TEXT_THEN_START_TAG)
    if match:
        return Lexeme(LexemeKind.TEXT_THEN_START, text=match.group(1), tag=match.group(2))

    return lexemes.NO_MATCH
