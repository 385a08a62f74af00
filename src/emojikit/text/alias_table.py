# src/emojikit/text/alias_table.py
# ──────────────────────────────────────────────────────────────
# Alias Table
# alias ("+1", "thumbs_up", "woman_technologist") → Emoji
# ──────────────────────────────────────────────────────────────
"""
alias_table.

Does: Build the process-wide, read-only alias → Emoji mapping from
      (a) one lower-cased identifier alias per catalogue emoji and
      (b) the generated gemoji-style alias list (data/aliases.json), whose
      entries may carry an attribute preset (gender, tone, hair ...).
      Built lazily on first use under a lock, exactly once; reads are
      lock-free afterwards.
Returns: parse_alias(), get_alias_table(), reset_alias_table(), AliasTable, AliasEntry.
Used by: The text scanner, the CLI and library users.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from emojikit.emojis.attributes import parse_attribute_value
from emojikit.emojis.catalog import Catalog, get_catalog
from emojikit.emojis.model import Emoji
from emojikit.emojis.resolver import Selection, UnsupportedAttributeError
from emojikit.utils.load_config import ConfigParseError, load_config

__all__ = [
    "ALIAS_FILE",
    "ALIAS_RE",
    "AliasEntry",
    "AliasTable",
    "build_alias_table",
    "get_alias_table",
    "load_alias_entries",
    "parse_alias",
    "reset_alias_table",
]

log = logging.getLogger(__name__)

ALIAS_FILE = "aliases"
ALIAS_RE = re.compile(r"[a-zA-Z0-9_+-]+")

_PRESET_KEYS = ("gender", "pair", "family", "hair", "tone")


@dataclass(frozen=True)
class AliasEntry:
    """One alias of the generated alias list, with optional preset attributes."""

    alias: str
    identifier: str
    preset: Selection = Selection()


class AliasTable(Mapping[str, Emoji]):
    """Immutable alias → Emoji mapping (case-sensitive, colon-free keys)."""

    def __init__(self, entries: Mapping[str, Emoji]):
        self._map: Mapping[str, Emoji] = MappingProxyType(dict(entries))

    def __getitem__(self, alias: str) -> Emoji:
        return self._map[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def aliases_for(self, emoji: Emoji) -> list[str]:
        """All aliases resolving to exactly `emoji` (same attributes), sorted."""
        return sorted(alias for alias, e in self._map.items() if e == emoji)


# ── Data → entries ───────────────────────────────────────────────────────────
def _parse_preset(alias: str, raw: dict[str, Any]) -> Selection:
    unknown = set(raw) - {"id", *_PRESET_KEYS}
    if unknown:
        raise ConfigParseError(f"{ALIAS_FILE}.json: alias {alias!r}: unknown keys {sorted(unknown)}")
    values: dict[str, Any] = {}
    try:
        for key in _PRESET_KEYS:
            if key in raw:
                slot = {"tone": "tones", "hair": "hair"}.get(key, "gender")
                if slot in values:
                    raise ValueError(f"conflicting {key!r} preset")
                values[slot] = parse_attribute_value(key, str(raw[key]))
    except ValueError as e:
        raise ConfigParseError(f"{ALIAS_FILE}.json: alias {alias!r}: {e}") from e
    return Selection(**values)


def load_alias_entries() -> list[AliasEntry]:
    """Does: Read data/aliases.json into AliasEntry values (file order)."""
    data = load_config(ALIAS_FILE, required=("aliases",))
    raw_aliases = data.get("aliases")
    if not isinstance(raw_aliases, dict):
        raise ConfigParseError(f"{ALIAS_FILE}.json: expected an 'aliases' object")

    entries: list[AliasEntry] = []
    for alias, target in raw_aliases.items():
        if isinstance(target, str):
            entries.append(AliasEntry(alias, target))
        elif isinstance(target, dict) and isinstance(target.get("id"), str):
            entries.append(AliasEntry(alias, target["id"], _parse_preset(alias, target)))
        else:
            raise ConfigParseError(f"{ALIAS_FILE}.json: alias {alias!r}: invalid target {target!r}")
    return entries


def build_alias_table(
    catalog: Catalog | None = None, entries: Iterable[AliasEntry] | None = None
) -> AliasTable:
    """
    Does: Insert identifier aliases, then listed aliases; an alias already
          taken by an identifier keeps pointing at that identifier.
    Returns: A fully built AliasTable; raises ConfigParseError on bad data.
    """
    catalog = catalog if catalog is not None else get_catalog()
    entries = entries if entries is not None else load_alias_entries()

    table: dict[str, Emoji] = {}
    for emoji in catalog:
        table[emoji.identifier.lower()] = emoji
    n_identifiers = len(table)

    skipped = 0
    for entry in entries:
        if not ALIAS_RE.fullmatch(entry.alias):
            raise ConfigParseError(f"Invalid alias spelling {entry.alias!r}")
        if entry.alias in table:
            skipped += 1
            log.debug("Alias %r already bound to %s; skipping", entry.alias, table[entry.alias].identifier)
            continue
        emoji = catalog.get(entry.identifier)
        if emoji is None:
            raise ConfigParseError(f"Alias {entry.alias!r} refers to unknown emoji {entry.identifier!r}")
        if not entry.preset.is_empty:
            try:
                emoji = emoji.with_selection(entry.preset)
            except UnsupportedAttributeError as e:
                raise ConfigParseError(f"Alias {entry.alias!r}: {e}") from e
        table[entry.alias] = emoji

    log.debug(
        "Alias table built: %d aliases (%d identifiers, %d listed, %d skipped)",
        len(table),
        n_identifiers,
        len(table) - n_identifiers,
        skipped,
    )
    return AliasTable(table)


# ── Process-wide singleton ───────────────────────────────────────────────────
_TABLE: AliasTable | None = None
_TABLE_LOCK = threading.Lock()


def get_alias_table() -> AliasTable:
    """Return the shared alias table, building it on first use (exactly once)."""
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = build_alias_table()
            table = _TABLE
    return table


def reset_alias_table() -> None:
    """Drop the shared alias table (tests / data hot reload)."""
    global _TABLE
    with _TABLE_LOCK:
        _TABLE = None


def parse_alias(name: str) -> Emoji | None:
    """
    Does: Exact, case-sensitive alias lookup. Surrounding colons are
          accepted (":+1:" and "+1" are the same alias).
    Returns: The Emoji, or None for an unknown alias.
    """
    if not isinstance(name, str):
        raise TypeError(f"Alias must be a str, got {type(name).__name__}")
    if len(name) > 2 and name[0] == ":" and name[-1] == ":":
        name = name[1:-1]
    return get_alias_table().get(name)
