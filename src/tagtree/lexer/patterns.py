"""Compiled patterns shared by the cursor, classifier and tag decomposer.

Patterns applied to the cursor are anchored by ``Pattern.match(source, pos)``
and therefore carry no leading ``^``. Patterns applied to a standalone tag
string (TAG_NAME, ATTRIBUTE, QUOTED_VALUE) search anywhere in it.
"""

from __future__ import annotations

import re

# Whitespace the cursor skips between lexemes
LEADING_WHITESPACE = re.compile(r"[\t\r\n\f ]+")

# Characters trimmed from text before a self-closing or end tag: the
# ECMAScript WhiteSpace and LineTerminator sets. str.strip() differs from
# this in both directions (it drops \x1c-\x1f and \x85, and keeps \ufeff).
TRIMMED_WHITESPACE = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# -- Classifier patterns, in priority order ----------------------------------

# 1. Start or self-closing tag first
START_OR_SELF_CLOSING_TAG = re.compile(r"(<[a-z0-9].*?/*>)", re.IGNORECASE | re.ASCII)

# 2. End tag first
END_TAG = re.compile(r"(</[a-z0-9].*?>)", re.IGNORECASE | re.ASCII)

# 3. Text, then a self-closing tag
TEXT_THEN_SELF_CLOSING_TAG = re.compile(r"([^<]+?)(<[a-z0-9].*? />)", re.IGNORECASE | re.ASCII)

# 4. Text, then an end tag
TEXT_THEN_END_TAG = re.compile(r"([^<]+?)(</[a-z0-9].*?>)", re.IGNORECASE | re.ASCII)

# 5. Text, then a start tag
TEXT_THEN_START_TAG = re.compile(r"([^<]+?)(<[a-z0-9].*?>)", re.IGNORECASE | re.ASCII)

# -- Tree builder patterns ---------------------------------------------------

# An element starts here
OPEN_TAG_START = re.compile(r"<([a-z0-9]+)", re.IGNORECASE | re.ASCII)

# Smallest complete tag
WHOLE_TAG = re.compile(r"(<.+?>)")

# Name of a close tag at the cursor
CLOSE_TAG_NAME = re.compile(r"</([a-z0-9][^\t\r\n\f />]*)", re.IGNORECASE | re.ASCII)

# Smallest complete close tag
WHOLE_CLOSE_TAG = re.compile(r"(</.+?>)")

# -- Tag decomposer patterns -------------------------------------------------

TAG_NAME = re.compile(r"</*([a-z0-9]+).*>", re.IGNORECASE | re.ASCII)

# key="value" with double quotes only
ATTRIBUTE = re.compile(r"""[^"' ]+=["][^"]+?["]""", re.IGNORECASE | re.ASCII)

QUOTED_VALUE = re.compile(r"""["'](.+)["']""")

SELF_CLOSING_SUFFIX = " />"
