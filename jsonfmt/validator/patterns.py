"""
Surface-syntax patterns shared by the repairer and the spec validator.

These are plain textual patterns with no knowledge of JSON strings, so they
also match inside string values.
"""

import re

# A line comment ends at any line terminator: \n, \r, U+2028 or U+2029
COMMENT = re.compile(r"/\*[\s\S]*?\*/|//[^\n\r\u2028\u2029]*")

TRAILING_COMMA = re.compile(r",(\s*[}\]])")

# key: 'value' where the key is a bare word or single-quoted
SINGLE_QUOTED_PAIR = re.compile(r"(\w+|'[^']*')\s*:\s*'([^']*)'", re.ASCII)

SINGLE_QUOTED_STRING = re.compile(r"'[^']*'")

UNQUOTED_KEY = re.compile(r"([{,]\s*)([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:")

NON_STANDARD_LITERAL = re.compile(r"\b(?:True|False|NULL|Null)\b", re.ASCII)
