"""Lexeme and LexemeKind definitions for the tagtree classifier.

The classifier inspects the cursor and reports one Lexeme describing what
comes next. The tree builder decides what to consume from it.

Thread Safety:
Lexeme is frozen (immutable). LexemeKind is an enum.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LexemeKind(Enum):
    """Lexical situations at the cursor, in classification priority order."""

    START_TAG = auto()  # <div ...> or <img ... />
    END_TAG = auto()  # </div>
    TEXT_THEN_SELF_CLOSING = auto()  # hello <br />
    TEXT_THEN_END = auto()  # hello </div>
    TEXT_THEN_START = auto()  # hello <span>
    NO_MATCH = auto()


# Kinds after which the tree builder recurses into a child element
_DESCENDING_KINDS = frozenset({LexemeKind.START_TAG, LexemeKind.TEXT_THEN_START})


@dataclass(frozen=True, slots=True)
class Lexeme:
    """Classification result.

    Attributes:
        kind: Which lexical situation was recognized
        text: Text preceding the tag (trimmed or not depending on kind)
        tag: Tag text that follows, when the kind surfaces one

    """

    kind: LexemeKind
    text: str = ""
    tag: str = ""

    @property
    def descends(self) -> bool:
        """Whether the caller should parse a child element next."""
        return self.kind in _DESCENDING_KINDS

    def __repr__(self) -> str:
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Lexeme({self.kind.name}, {text!r}, {self.tag!r})"


NO_MATCH = Lexeme(LexemeKind.NO_MATCH)
END_TAG = Lexeme(LexemeKind.END_TAG)
