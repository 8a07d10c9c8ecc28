"""Character sets and patterns for body and header classification.

Single-character tests use frozensets for O(1) membership. The few
multi-character lexemes (header keywords, decimals, symbols) use compiled
regexes that are always anchored at the cursor by ``LineStream.match``.

All classes are ASCII-only.
"""

import re

DIGITS: frozenset[str] = frozenset("0123456789")
BINARY_DIGITS: frozenset[str] = frozenset("01")
OCTAL_DIGITS: frozenset[str] = frozenset("01234567")
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

QUOTES: frozenset[str] = frozenset("\"'")

# Characters of a hash symbol such as #t, #f, #key, #all-keys
HASH_SYMBOL_CHARS: frozenset[str] = frozenset(
    "-abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

SYMBOL_CHARS: frozenset[str] = HASH_SYMBOL_CHARS | frozenset("_?!*@<>$%")

# Word character (letter, digit or underscore), then word characters or
# hyphens, then a colon: "Module:", "A_1-b:", "2nd-key:"
HEADER_KEYWORD = re.compile(r"\w[\w\d-]*:", re.ASCII)

# 12, 1.5, 1., 6.02e23, 1E-3
DECIMAL = re.compile(r"\d*(?:\.\d*)?(?:[eE][+\-]?\d+)?", re.ASCII)

SYMBOL = re.compile(r"[-_a-zA-Z?!*@<>$%]+")

DEFINE = "define"
