"""
emojikit
========

Does: Root package initializer: a typed emoji catalogue with chainable
      attribute customization (tone, gender, pair, hair, family), alias
      lookup, `:alias:` substitution in text and flag construction.
Returns: The public API re-exported from `emojikit.emojis` and `emojikit.text`.
Used by: Library users; constants live in `emojikit.flat`.
"""

from __future__ import annotations

from .emojis import (
    Catalog,
    Emoji,
    Family,
    Gender,
    Hair,
    Pair,
    Selection,
    Tone,
    UnsupportedAttributeError,
    UnsupportedCombinationError,
    Version,
    get_catalog,
    resolve,
)
from .text import (
    AliasTable,
    EmojiTextParser,
    country_flag,
    get_alias_table,
    parse_alias,
    parse_text,
    regional_flag,
    suggest_aliases,
)

__all__: list[str] = [
    "Emoji",
    "Tone",
    "Gender",
    "Pair",
    "Hair",
    "Family",
    "Version",
    "Selection",
    "resolve",
    "Catalog",
    "get_catalog",
    "AliasTable",
    "get_alias_table",
    "parse_alias",
    "parse_text",
    "EmojiTextParser",
    "country_flag",
    "regional_flag",
    "suggest_aliases",
    "UnsupportedAttributeError",
    "UnsupportedCombinationError",
]
__version__ = "0.1.0"
__docformat__ = "google"
