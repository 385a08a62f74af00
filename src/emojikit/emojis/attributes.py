# src/emojikit/emojis/attributes.py
# ──────────────────────────────────────────────────────────────
# Emoji attributes: skin tone, gender, gender pairs, hair, family
# ──────────────────────────────────────────────────────────────
"""
attributes.

Does: Define the attribute vocabulary used to customize emoji (Tone, Gender,
      Pair, Hair, Family) plus the Unicode emoji Version, and parse the
      compact attribute keys used by the packaged catalogue ("gender=male",
      "pair=mixed;tone=light", "family=mixed/males").
Returns: Enums/dataclasses and parse_attribute_value()/parse_form_key().
Used by: The resolver, the Emoji value model, catalogue and alias loading.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

__all__ = [
    "Tone",
    "Gender",
    "Pair",
    "Hair",
    "Family",
    "Version",
    "GenderLike",
    "parse_attribute_value",
    "parse_form_key",
    "parse_tones",
]


class Version(NamedTuple):
    """Unicode Emoji version in which a glyph was introduced (e.g. E13.1)."""

    major: int
    minor: int

    @classmethod
    def parse(cls, raw: str | float) -> Version:
        text = str(raw).strip().lstrip("Ee")
        major, _, minor = text.partition(".")
        try:
            return cls(int(major), int(minor or 0))
        except ValueError as e:
            raise ValueError(f"Invalid emoji version: {raw!r}") from e

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class Tone(Enum):
    """Skin tone modifier (Fitzpatrick scale) 🖐🏻🖐🏼🖐🏽🖐🏾🖐🏿.

    "No tone" is not a member: it is expressed by not requesting one.
    """

    LIGHT = "light"
    MEDIUM_LIGHT = "medium_light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium_dark"
    DARK = "dark"

    @property
    def modifier(self) -> str:
        """The skin tone modifier code point (U+1F3FB..U+1F3FF)."""
        return chr(0x1F3FB + _TONE_ORDER.index(self))

    @property
    def label(self) -> str:
        return f"{self.value.replace('_', '-')} skin tone"


_TONE_ORDER: tuple[Tone, ...] = tuple(Tone)


class Gender(Enum):
    """Gender of a single person 👨👩 (the default is a genderless 🧑)."""

    MALE = "male"
    FEMALE = "female"

    def with_children(self, children: Gender | Pair) -> Family:
        return Family(self, children)

    @property
    def adults_label(self) -> str:
        return "man" if self is Gender.MALE else "woman"

    @property
    def children_label(self) -> str:
        return "boy" if self is Gender.MALE else "girl"


class Pair(Enum):
    """Genders of two people 👬👫👭 (the default is two genderless people)."""

    MALES = "males"
    MIXED = "mixed"
    FEMALES = "females"

    @classmethod
    def from_genders(cls, first: Gender, second: Gender) -> Pair:
        """Fold two genders into a pair; the order does not matter."""
        if not isinstance(first, Gender) or not isinstance(second, Gender):
            raise TypeError(f"Expected two Gender values, got {first!r} and {second!r}")
        if first is second:
            return cls.MALES if first is Gender.MALE else cls.FEMALES
        return cls.MIXED

    def with_children(self, children: Gender | Pair) -> Family:
        return Family(self, children)

    @property
    def adults_label(self) -> str:
        return {Pair.MALES: "men", Pair.MIXED: "man & woman", Pair.FEMALES: "women"}[self]

    @property
    def children_label(self) -> str:
        return {Pair.MALES: "boys", Pair.MIXED: "girl & boy", Pair.FEMALES: "girls"}[self]


class Hair(Enum):
    """Hair style 🧔👱🧑‍🦰🧑‍🦱🧑‍🦳🧑‍🦲."""

    BEARD = "beard"
    BLOND = "blond"
    RED = "red"
    CURLY = "curly"
    WHITE = "white"
    BALD = "bald"

    @property
    def label(self) -> str:
        if self is Hair.BEARD:
            return "beard"
        if self is Hair.BALD:
            return "bald"
        return f"{self.value} hair"


@dataclass(frozen=True)
class Family:
    """Genders of the parents and the children of a family 👨‍👩‍👧‍👦."""

    parents: Gender | Pair
    children: Gender | Pair

    def __post_init__(self) -> None:
        for part in (self.parents, self.children):
            if not isinstance(part, (Gender, Pair)):
                raise TypeError(f"Family members must be Gender or Pair, got {part!r}")

    @property
    def label(self) -> str:
        return f"{self.parents.adults_label}, {self.children.children_label}"


# What an Emoji.gender() call may select
GenderLike = Union[Gender, Pair, Family]

_ONE_OR_TWO: dict[str, Gender | Pair] = {
    **{g.value: g for g in Gender},
    **{p.value: p for p in Pair},
}


# ──────────────────────────────────────────────────────────────
# Parsing of the compact keys used by the data files
# ──────────────────────────────────────────────────────────────


def parse_tones(raw: str) -> tuple[Tone, ...]:
    """Does: Parse "light" or "light,dark" into a tuple of tones."""
    try:
        return tuple(Tone(part.strip()) for part in raw.split(",") if part.strip())
    except ValueError as e:
        raise ValueError(f"Unknown skin tone in {raw!r}") from e


def parse_attribute_value(category: str, raw: str) -> object:
    """
    Does: Turn one "category=value" pair of a data key into its attribute.
    Returns: Gender, Pair, Hair, Family or a tuple of Tone.
    """
    value = raw.strip().lower()
    try:
        if category == "gender":
            return Gender(value)
        if category == "pair":
            return Pair(value)
        if category == "hair":
            return Hair(value)
        if category == "tone":
            return parse_tones(value)
        if category == "family":
            parents, sep, children = value.partition("/")
            if not sep:
                raise ValueError("expected '<parents>/<children>'")
            return Family(_ONE_OR_TWO[parents], _ONE_OR_TWO[children])
    except (KeyError, ValueError) as e:
        raise ValueError(f"Invalid {category} value {raw!r}: {e}") from e
    raise ValueError(f"Unknown attribute category {category!r}")


def parse_form_key(key: str) -> dict[str, object]:
    """
    Does: Split "gender=male;hair=red" into {"gender": Gender.MALE, "hair": Hair.RED}.
          "pair" and "family" are stored under "gender" (they share the slot).
    Returns: Mapping of slot name → attribute; empty for "".
    """
    out: dict[str, object] = {}
    for chunk in key.split(";"):
        if not chunk.strip():
            continue
        category, sep, raw = chunk.partition("=")
        if not sep:
            raise ValueError(f"Malformed attribute key {key!r}")
        category = category.strip().lower()
        slot = "gender" if category in ("pair", "family") else category
        if slot in out:
            raise ValueError(f"Duplicate {slot!r} attribute in key {key!r}")
        out[slot] = parse_attribute_value(category, raw)
    return out
