# src/emojikit/emojis/catalog.py
# ──────────────────────────────────────────────────────────────
# Emoji catalogue
# Read-only view over the generated emoji table (data/emoji_catalog.json)
# ──────────────────────────────────────────────────────────────
"""
catalog.

Does: Load the generated emoji table once (lazily, thread-safe), turn each
      row into an EmojiRecord, and expose it flat (by identifier), grouped
      (group → subgroup → emoji) and by grapheme (reverse lookup over every
      variant).
Returns: get_catalog(), reset_catalog(), Catalog, Group, Subgroup.
Used by: emojikit.flat, the alias table, the CLI.

Notes:
- The table is produced offline from the Unicode emoji-test.txt listing;
  this module never touches the network.
- Malformed rows fail the whole load (ConfigParseError); no partial
  catalogue is ever published.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from emojikit.emojis.attributes import Version, parse_form_key
from emojikit.emojis.model import Emoji
from emojikit.emojis.resolver import (
    EmojiRecord,
    Form,
    FormKey,
    Template,
    parse_glyph,
    parse_template,
)
from emojikit.utils.load_config import ConfigParseError, ConfigTypeError, load_config
from emojikit.utils.log import debug

__all__ = [
    "CATALOG_FILE",
    "Catalog",
    "Group",
    "Subgroup",
    "get_catalog",
    "reset_catalog",
    "snake_identifier",
]

log = logging.getLogger(__name__)

CATALOG_FILE = "emoji_catalog"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def snake_identifier(name: str) -> str:
    """Does: "Smileys & Emotion" → "smileys_and_emotion", "hand-fingers-open" → "hand_fingers_open"."""
    return _NON_ALNUM_RE.sub("_", name.lower().replace("&", "and")).strip("_")


# ── Grouped view ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Subgroup:
    identifier: str
    name: str
    records: tuple[EmojiRecord, ...]

    def base_emojis(self) -> Iterator[Emoji]:
        """Iterate the default variant of every emoji in this subgroup."""
        return (Emoji(r) for r in self.records)

    def all_variants(self) -> Iterator[tuple[Emoji, ...]]:
        """Iterate, per emoji, a tuple with its default and all its variants."""
        return (tuple(Emoji(r).variants()) for r in self.records)


@dataclass(frozen=True)
class Group:
    identifier: str
    name: str
    subgroups: tuple[Subgroup, ...]

    def subgroup(self, identifier: str) -> Subgroup:
        key = snake_identifier(identifier)
        for sub in self.subgroups:
            if sub.identifier == key:
                return sub
        raise KeyError(f"No subgroup {identifier!r} in group {self.name!r}")

    def base_emojis(self) -> Iterator[Emoji]:
        for sub in self.subgroups:
            yield from sub.base_emojis()


class Catalog:
    """Immutable catalogue of every emoji of the generated table."""

    def __init__(self, unicode_version: str, groups: tuple[Group, ...]):
        self.unicode_version = unicode_version
        self.groups = groups

        by_id: dict[str, Emoji] = {}
        by_grapheme: dict[str, Emoji] = {}
        for group in groups:
            for sub in group.subgroups:
                for record in sub.records:
                    if record.identifier in by_id:
                        raise ConfigParseError(f"Duplicate emoji identifier {record.identifier!r}")
                    emoji = Emoji(record)
                    by_id[record.identifier] = emoji
                    for variant in emoji.variants():
                        # first writer wins: a default glyph beats a later variant spelling it
                        by_grapheme.setdefault(variant.grapheme, variant)
        self._by_id: Mapping[str, Emoji] = MappingProxyType(by_id)
        self._by_grapheme: Mapping[str, Emoji] = MappingProxyType(by_grapheme)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._by_id.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __getitem__(self, identifier: str) -> Emoji:
        try:
            return self._by_id[identifier]
        except KeyError:
            raise KeyError(f"Unknown emoji identifier {identifier!r}") from None

    def get(self, identifier: str) -> Emoji | None:
        return self._by_id.get(identifier)

    def group(self, identifier: str) -> Group:
        key = snake_identifier(identifier)
        for group in self.groups:
            if group.identifier == key:
                return group
        raise KeyError(f"No emoji group {identifier!r}")

    def find_by_grapheme(self, grapheme: str) -> Emoji | None:
        """Reverse lookup: the emoji (with attributes) that renders as `grapheme`."""
        return self._by_grapheme.get(grapheme)

    @property
    def variant_count(self) -> int:
        return len(self._by_grapheme)


# ── Loading ──────────────────────────────────────────────────────────────────
def _template(raw: str | None, slots: int) -> Template | None:
    return None if raw is None else parse_template(raw, slots)


def _parse_form(entry: Any, slots: int) -> Form:
    if isinstance(entry, str):
        return Form(parse_glyph(entry))
    if not isinstance(entry, dict):
        raise ConfigTypeError(f"form must be a string or an object, got {type(entry).__name__}")
    if entry.get("toned_same") is not None and slots != 2:
        raise ValueError("'toned_same' only applies to two-person emoji")
    return Form(
        parse_glyph(entry["glyph"]),
        _template(entry.get("toned"), slots),
        _template(entry.get("toned_same"), slots),
    )


def _parse_record(raw: dict[str, Any], group: str, subgroup: str) -> EmojiRecord:
    slots = int(raw.get("tones", 0))
    forms: dict[FormKey, Form] = {(None, None): _parse_form(raw, slots)}
    for key, entry in (raw.get("forms") or {}).items():
        attrs = parse_form_key(key)
        extra = set(attrs) - {"gender", "hair"}
        if extra or not attrs:
            raise ValueError(f"Invalid form key {key!r}")
        forms[(attrs.get("gender"), attrs.get("hair"))] = _parse_form(entry, slots)  # type: ignore[index]
    return EmojiRecord(
        identifier=raw["id"],
        name=raw["name"],
        since=Version.parse(raw.get("since", "0.0")),
        group=group,
        subgroup=subgroup,
        glyph=forms[(None, None)].glyph,
        tone_slots=slots,
        forms=forms,
    )


def _build_catalog(data: Mapping[str, Any]) -> Catalog:
    groups: list[Group] = []
    for raw_group in data.get("groups", []):
        subgroups: list[Subgroup] = []
        for raw_sub in raw_group.get("subgroups", []):
            records: list[EmojiRecord] = []
            for raw in raw_sub.get("emojis", []):
                ident = raw.get("id", "?") if isinstance(raw, dict) else "?"
                try:
                    records.append(_parse_record(raw, raw_group["name"], raw_sub["name"]))
                except (KeyError, ValueError, TypeError) as e:
                    raise ConfigParseError(f"{CATALOG_FILE}.json: emoji {ident}: {e}") from e
            subgroups.append(
                Subgroup(snake_identifier(raw_sub["name"]), raw_sub["name"], tuple(records))
            )
        groups.append(Group(snake_identifier(raw_group["name"]), raw_group["name"], tuple(subgroups)))
    return Catalog(str(data.get("unicode_version", "")), tuple(groups))


def load_catalog() -> Catalog:
    """Does: Read and parse the generated table (no caching at this level)."""
    data = load_config(CATALOG_FILE, required=("groups",))
    try:
        catalog = _build_catalog(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigParseError(f"{CATALOG_FILE}.json: malformed table: {e!r}") from e
    log.debug(
        "Emoji catalogue loaded: %d emoji, %d graphemes (Unicode %s)",
        len(catalog),
        catalog.variant_count,
        catalog.unicode_version,
    )
    debug(f"catalogue: {len(catalog)} emoji in {len(catalog.groups)} groups", topic="catalog")
    return catalog


# ── Process-wide singleton ───────────────────────────────────────────────────
_CATALOG: Catalog | None = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> Catalog:
    """Return the shared catalogue, loading it on first use (exactly once)."""
    global _CATALOG
    catalog = _CATALOG
    if catalog is None:
        with _CATALOG_LOCK:
            if _CATALOG is None:
                _CATALOG = load_catalog()
            catalog = _CATALOG
    return catalog


def reset_catalog() -> None:
    """Drop the shared catalogue (tests / data hot reload)."""
    global _CATALOG
    with _CATALOG_LOCK:
        _CATALOG = None
