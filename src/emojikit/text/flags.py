# src/emojikit/text/flags.py
"""
flags.

Does: Build ad-hoc flag emoji from ISO 3166 codes:
      - country flags (ISO 3166-1 alpha-2) as a pair of regional indicators,
      - regional flags (ISO 3166-2, e.g. "GB-ENG") as a black flag followed
        by tag characters and a cancel tag.
Returns: country_flag(), regional_flag().
Used by: Library users and the CLI.

Notes:
- Codes are not checked against the ISO lists: "ZZ" yields a (meaningless) flag.
"""

from __future__ import annotations

import string

__all__ = ["country_flag", "regional_flag"]

REGIONAL_INDICATOR_A = 0x1F1E6
TAG_BASE = 0xE0000
CANCEL_TAG = chr(0xE007F)
BLACK_FLAG = chr(0x1F3F4)

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def country_flag(code: str) -> str:
    """
    Does: "EU" → 🇪🇺 (case-insensitive).
    Returns: Two regional indicator symbols; ValueError unless `code` is
             exactly two ASCII letters.
    """
    if not isinstance(code, str):
        raise TypeError(f"Country code must be a str, got {type(code).__name__}")
    if len(code) != 2 or not all(c in string.ascii_letters for c in code):
        raise ValueError(f"Country code must be exactly two letters A-Z, got {code!r}")
    return "".join(chr(ord(c) - ord("A") + REGIONAL_INDICATOR_A) for c in code.upper())


def regional_flag(code: str) -> str:
    """
    Does: "GB-ENG" → 🏴󠁧󠁢󠁥󠁮󠁧󠁿 (England); hyphens are dropped, letters lower-cased.
    Returns: The tag sequence flag; ValueError for characters other than
             ASCII letters, digits and '-'.
    """
    if not isinstance(code, str):
        raise TypeError(f"Region code must be a str, got {type(code).__name__}")
    if not code or not all(c in _ASCII_ALNUM or c == "-" for c in code):
        raise ValueError(f"Region code may only contain A-Z, 0-9 and '-', got {code!r}")
    tags = "".join(chr(TAG_BASE + ord(c)) for c in code.lower() if c in _ASCII_ALNUM)
    if not tags:
        raise ValueError(f"Region code has no letters or digits: {code!r}")
    return BLACK_FLAG + tags + CANCEL_TAG
