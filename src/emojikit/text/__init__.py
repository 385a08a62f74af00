# emojikit/text/__init__.py
"""
text.
=====

Does: Provide alias lookup, `:alias:` substitution in free text and flag construction.
Exports: parse_alias, parse_text, EmojiTextParser, get_alias_table,
         reset_alias_table, AliasTable, country_flag, regional_flag,
         suggest_aliases
Used by: Library users and the CLI.
"""

from __future__ import annotations

from .alias_table import (
    AliasEntry,
    AliasTable,
    build_alias_table,
    get_alias_table,
    parse_alias,
    reset_alias_table,
)
from .flags import country_flag, regional_flag
from .scanner import EmojiTextParser, parse_text
from .suggest import suggest_aliases

__all__ = [
    # aliases
    "parse_alias",
    "get_alias_table",
    "reset_alias_table",
    "build_alias_table",
    "AliasTable",
    "AliasEntry",
    # scanning
    "parse_text",
    "EmojiTextParser",
    # flags
    "country_flag",
    "regional_flag",
    # hints
    "suggest_aliases",
]
