# src/emojikit/text/scanner.py
# ──────────────────────────────────────────────────────────────
# Alias Scanner / Text Substitution
# "Hello :waving_hand:" → "Hello 👋"
# ──────────────────────────────────────────────────────────────
"""
scanner.

Does: Replace colon-fenced aliases (`:[a-zA-Z0-9_+-]+:`) in free text with
      their emoji, in a single left-to-right pass.
Returns: parse_text() and the EmojiTextParser fragment iterator.
Used by: Library users and the CLI.

Scanning rules:
- A ':' opens a candidate; alias characters are read greedily.
- A closing ':' around a known, non-empty alias → the glyph is emitted and
  the closing ':' is consumed.
- Anything else → the opening ':' stays plain text and scanning resumes
  right after it, so the closing ':' of a failed candidate opens the next
  one ("::+1:" → ":👍", "abc:::technologist:::def" → "abc::🧑‍💻::def").
- Emitted glyphs are never scanned again; no input makes it raise.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator

from emojikit.emojis.model import Emoji
from emojikit.text.alias_table import parse_alias

__all__ = ["ALIAS_CHARS", "EmojiTextParser", "parse_text"]

ALIAS_CHARS = frozenset(string.ascii_letters + string.digits + "_+-")

Lookup = Callable[[str], "Emoji | None"]


class EmojiTextParser:
    """Split a text into plain fragments and substituted emoji fragments.

    Iterating yields the pieces in order: plain text between substitutions is
    yielded as one fragment, every recognized alias as its glyph.
    ``str(parser)`` is the fully substituted text.

    Args:
        text: The text to scan.
        lookup: Alias resolver (defaults to the shared alias table).
    """

    def __init__(self, text: str, lookup: Lookup | None = None):
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        self.text = text
        self._lookup: Lookup = lookup or parse_alias

    def _tokens(self) -> Iterator[tuple[str, Emoji | None]]:
        # (fragment, emoji) pairs; emoji is None for plain text
        text = self.text
        n = len(text)
        pending = 0  # start of plain text not yet emitted
        opening = text.find(":")
        while opening != -1:
            end = opening + 1
            while end < n and text[end] in ALIAS_CHARS:
                end += 1
            if end < n and text[end] == ":" and end > opening + 1:
                emoji = self._lookup(text[opening + 1 : end])
                if emoji is not None:
                    if pending < opening:
                        yield text[pending:opening], None
                    yield emoji.grapheme, emoji
                    pending = end + 1
                    opening = text.find(":", pending)
                    continue
            # no colon between opening and end: resume the search at end
            opening = text.find(":", end)
        if pending < n:
            yield text[pending:], None

    def __iter__(self) -> Iterator[str]:
        return (fragment for fragment, _ in self._tokens())

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def emojis(self) -> Iterator[Emoji]:
        """Iterate the emoji recognized in the text, in order."""
        return (emoji for _, emoji in self._tokens() if emoji is not None)


def parse_text(text: str) -> str:
    """
    Does: Replace every known `:alias:` in `text` with its emoji; unknown
          or malformed tokens are kept verbatim.
    Returns: The substituted text (the input itself when nothing matched).
    """
    return str(EmojiTextParser(text))
