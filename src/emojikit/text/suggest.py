# src/emojikit/text/suggest.py
from __future__ import annotations

"""
suggest.py

Does: Rank known aliases that look like a misspelled one ("thumbsup" -> "thumbs_up")
      so callers can print a "did you mean" hint. Lookup itself stays exact:
      parse_alias never goes through here.
Returns: suggest_aliases(name, ...) -> list of alias strings, best first.
Used by: The CLI error path for unknown aliases.
"""

from typing import Iterable, List, Optional

from rapidfuzz import fuzz as rf_fuzz
from rapidfuzz import process

__all__ = ["suggest_aliases"]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_MIN_SCORE = 75   # below this a candidate is noise
SUGGEST_LIMIT = 3


def _norm(s: str) -> str:
    """
    Does: Strip surrounding colons, lowercase, map hyphens/underscores to spaces.
    """
    s = s.strip().strip(":").lower().replace("-", " ").replace("_", " ")
    return " ".join(s.split())


def suggest_aliases(
    name: str,
    aliases: Optional[Iterable[str]] = None,
    *,
    limit: int = SUGGEST_LIMIT,
    min_score: float = SUGGEST_MIN_SCORE,
) -> List[str]:
    """
    Does: Score every alias against `name` with a token-sort ratio on normalized
          spellings and keep the best `limit` at or above `min_score`.
    Returns: Matching aliases, best first; ties keep table order. Empty when
             `name` normalizes to nothing.
    """
    if not isinstance(name, str):
        raise TypeError(f"Alias must be a str, got {type(name).__name__}")
    query = _norm(name)
    if not query:
        return []
    if aliases is None:
        from emojikit.text.alias_table import get_alias_table

        aliases = get_alias_table()

    choices = list(aliases)
    matches = process.extract(
        query,
        choices,
        scorer=rf_fuzz.token_sort_ratio,
        processor=_norm,
        limit=limit,
        score_cutoff=min_score,
    )
    return [choices[index] for _, _, index in matches]
