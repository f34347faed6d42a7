"""Lexical layer for the tagtree parser.

There is no separate token stream. The tree builder asks the classifier
what comes next at the shared cursor and consumes input itself.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── patterns.py          # Compiled regular expressions
├── lexemes.py           # Lexeme, LexemeKind
├── classifier.py        # classify(cursor) -> Lexeme
└── tags.py              # Tag name, attributes, self-closing status

"""

from tagtree.lexer.classifier import classify
from tagtree.lexer.lexemes import Lexeme, LexemeKind
from tagtree.lexer.tags import attributes_of, is_self_closing, tag_name_of

__all__ = [
    "Lexeme",
    "LexemeKind",
    "attributes_of",
    "classify",
    "is_self_closing",
    "tag_name_of",
]
