"""
Grammar constants for the KVParse configuration format.

The line format is::

    [ws] keyword [ws] (":"|"=") [ws] value [ws] ["#" comment]

Everything the parser and the typed accessors match against is defined here
so the accepted language can be read in one place.
"""

import re

# Everything from the first occurrence of this marker to end of line is dropped
COMMENT_MARKER = "#"

# Tried in order; the first delimiter character found in the line wins
DELIMITERS = (":", "=")

# Characters trimmed from both ends of the keyword and the value
TRIM_CHARS = " \t\r"

QUOTE = '"'

# Keywords: a letter or underscore, then letters, digits, '_', '.', '-',
# then any number of trailing apostrophes (x, x', x'' ...)
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*'*")

INTEGER_RE = re.compile(r"[-+]?[0-9]+")
UNSIGNED_RE = re.compile(r"\+?[0-9]+")
DOUBLE_RE = re.compile(r"[-+]?[0-9]*\.?[0-9]*")

TRUE_VALUES = ("true", "yes", "TRUE", "YES", "1")
FALSE_VALUES = ("false", "no", "FALSE", "NO", "0")
