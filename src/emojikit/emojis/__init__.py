# emojikit/emojis/__init__.py
"""
emojis.

Does: Types for representing and customizing emoji: attribute enums, the
      attribute resolver, the Emoji value and the generated catalogue.
Exports: Emoji, Tone, Gender, Pair, Hair, Family, Version, Selection,
         resolve, get_catalog and the resolver errors.
"""

from __future__ import annotations

from .attributes import Family, Gender, Hair, Pair, Tone, Version
from .catalog import Catalog, Group, Subgroup, get_catalog, reset_catalog
from .model import Emoji
from .resolver import (
    EmojiRecord,
    Selection,
    UnsupportedAttributeError,
    UnsupportedCombinationError,
    compose,
    resolve,
)

__all__ = [
    # attributes
    "Tone",
    "Gender",
    "Pair",
    "Hair",
    "Family",
    "Version",
    # model & resolver
    "Emoji",
    "EmojiRecord",
    "Selection",
    "compose",
    "resolve",
    "UnsupportedAttributeError",
    "UnsupportedCombinationError",
    # catalogue
    "Catalog",
    "Group",
    "Subgroup",
    "get_catalog",
    "reset_catalog",
]

__docformat__ = "google"
