"""Verify core module imports work correctly."""

from __future__ import annotations


def test_import_nodes() -> None:
    from tagtree.nodes import Attribute, Element, NodeType, Text

    text = Text(content="hi")
    assert text.type is NodeType.TEXT
    assert Attribute(name="a", value="b").type is NodeType.ATTRIBUTE
    element = Element(tag="<p>", tag_name="p", is_self_closing=False)
    assert element.type is NodeType.ELEMENT
    assert element.props == ()
    assert element.children == ()


def test_nodes_are_frozen() -> None:
    import dataclasses

    import pytest

    from tagtree.nodes import Text

    with pytest.raises(dataclasses.FrozenInstanceError):
        Text(content="x").content = "y"  # type: ignore[misc]


def test_import_lexer() -> None:
    from tagtree.lexer import Lexeme, LexemeKind

    lexeme = Lexeme(LexemeKind.TEXT_THEN_START, text="a " * 20, tag="<b>")
    assert lexeme.descends
    assert repr(lexeme).startswith("Lexeme(TEXT_THEN_START, ")


def test_public_api() -> None:
    import tagtree

    for name in tagtree.__all__:
        assert hasattr(tagtree, name), name
    assert tagtree.__version__
