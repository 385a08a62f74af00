# src/emojikit/flat.py
"""
flat.

Does: Expose every catalogue emoji as a module attribute named after its
      identifier (`from emojikit.flat import THUMBS_UP`), resolved lazily
      from the shared catalogue on first attribute access.
Returns: Default (attribute-free) Emoji values.
"""

from __future__ import annotations

from emojikit.emojis.catalog import get_catalog
from emojikit.emojis.model import Emoji


def __getattr__(name: str) -> Emoji:
    if name.startswith("__"):
        raise AttributeError(name)
    emoji = get_catalog().get(name)
    if emoji is None:
        raise AttributeError(f"module {__name__!r} has no emoji {name!r}")
    return emoji


def __dir__() -> list[str]:
    return sorted(e.identifier for e in get_catalog())
