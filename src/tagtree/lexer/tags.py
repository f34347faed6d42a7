"""Tag decomposition: name, attributes and self-closing status.

Pure functions over a raw tag string such as ``<a href="/x" class="nav">``.
"""

from __future__ import annotations

from tagtree.lexer.patterns import ATTRIBUTE, QUOTED_VALUE, SELF_CLOSING_SUFFIX, TAG_NAME
from tagtree.nodes import Attribute


def tag_name_of(tag: str) -> str:
    """Extract the bare element name from a tag.

    A string without ``<`` is assumed to be a name already and is returned
    unchanged. Returns ``""`` when no name can be found.

    Examples:
        >>> tag_name_of('<div class="x">')
        'div'
        >>> tag_name_of("</span>")
        'span'
        >>> tag_name_of("p")
        'p'

    """
    if "<" not in tag:
        return tag
    match = TAG_NAME.search(tag)
    if not match:
        return ""
    return match.group(1)


def attributes_of(tag: str) -> tuple[Attribute, ...]:
    """Extract ``name="value"`` attributes in source order.

    Only double-quoted, non-empty values are recognized. Single-quoted and
    unquoted values are dropped silently.

    Examples:
        >>> attributes_of('<img src="a.png" alt="A" />')
        (Attribute(name='src', value='a.png'), Attribute(name='alt', value='A'))
        >>> attributes_of("<div data-x='y'>")
        ()

    """
    return tuple(_to_attribute(raw) for raw in ATTRIBUTE.findall(tag))


def _to_attribute(raw: str) -> Attribute:
    name, _, value = raw.partition("=")
    return Attribute(name=name, value=QUOTED_VALUE.sub(r"\1", value))


def is_self_closing(tag: str) -> bool:
    """True iff the tag ends with `` />``; ``<br/>`` does not count."""
    return tag.endswith(SELF_CLOSING_SUFFIX)
