# src/emojikit/emojis/resolver.py
# ──────────────────────────────────────────────────────────────
# Attribute Resolver
# (emoji record, attribute selection) → concrete grapheme cluster
# ──────────────────────────────────────────────────────────────
"""
resolver.

Does: Hold the catalogue record types (EmojiRecord, Form) and the normalized
      attribute request (Selection), and compose the final glyph for a
      record + selection:
        form lookup (gender/pair/family × hair) → tone normalization
        (broadcast / collapse / order) → template fill.
Returns: compose(), resolve(), parse_glyph(), parse_template() and the
         UnsupportedAttributeError / UnsupportedCombinationError errors.
Used by: The Emoji value model, catalogue loading and the alias table.

Notes:
- Unsupported requests always raise; there is no silent fallback to the
  base glyph.
- Pure functions: the same (record, selection) always yields the same glyph.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from emojikit.emojis.attributes import Family, Gender, GenderLike, Hair, Pair, Tone, Version

if TYPE_CHECKING:
    from emojikit.emojis.model import Emoji

__all__ = [
    "Selection",
    "Form",
    "FormKey",
    "Template",
    "EmojiRecord",
    "UnsupportedAttributeError",
    "UnsupportedCombinationError",
    "compose",
    "resolve",
    "parse_glyph",
    "parse_template",
    "default_tone_template",
]

VARIATION_SELECTOR_16 = "\ufe0f"

# A template is a sequence of literal text and tone slot indexes (0 = left, 1 = right)
Template = tuple[Union[str, int], ...]
FormKey = tuple[Union[GenderLike, None], Union[Hair, None]]

_SLOT_TOKENS = {"{T}": 0, "{T1}": 0, "{T2}": 1}


# ── Errors ───────────────────────────────────────────────────────────────────
class UnsupportedAttributeError(ValueError):
    """Raise when an emoji does not support the requested attribute category."""


class UnsupportedCombinationError(UnsupportedAttributeError):
    """Raise when the category is supported but not this exact combination."""


# ── Parsing helpers (hex code point notation of the data files) ──────────────
def parse_glyph(raw: str) -> str:
    """Does: Turn "1F44D 1F3FD" into the corresponding string."""
    try:
        glyph = "".join(chr(int(cp, 16)) for cp in raw.split())
    except ValueError as e:
        raise ValueError(f"Invalid code point sequence {raw!r}") from e
    if not glyph:
        raise ValueError("Empty code point sequence")
    return glyph


def parse_template(raw: str, slots: int) -> Template:
    """
    Does: Parse "1F9D1 {T1} 200D 1F91D 200D 1F9D1 {T2}" into a Template.
    Returns: Tuple mixing literal code points and tone slot indexes.
    """
    parts: list[str | int] = []
    for token in raw.split():
        slot = _SLOT_TOKENS.get(token.upper())
        if slot is None:
            parts.append(parse_glyph(token))
        elif slot >= slots:
            raise ValueError(f"Template {raw!r} uses tone slot {slot + 1} of {slots}")
        else:
            parts.append(slot)
    if not any(isinstance(p, int) for p in parts):
        raise ValueError(f"Template {raw!r} has no tone placeholder")
    return tuple(parts)


def default_tone_template(glyph: str) -> Template:
    """
    Does: Single-person rule: the modifier follows the first code point and
          replaces a variation selector standing there (☝️ → ☝🏽).
    """
    rest = glyph[1:]
    if rest.startswith(VARIATION_SELECTOR_16):
        rest = rest[1:]
    return (glyph[0], 0, rest) if rest else (glyph[0], 0)


# ── Records ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Form:
    """One non-tone variant of an emoji and how to tone it."""

    glyph: str
    toned: Template | None = None
    # Two-slot emoji only: preferred template when both tones are equal
    toned_same: Template | None = None


@dataclass(frozen=True)
class Selection:
    """Normalized attribute request; also the lookup key of a variant."""

    tones: tuple[Tone, ...] = ()
    gender: GenderLike | None = None
    hair: Hair | None = None

    def __post_init__(self) -> None:
        tones = tuple(self.tones)
        for t in tones:
            if not isinstance(t, Tone):
                raise TypeError(f"Expected Tone values, got {t!r}")
        object.__setattr__(self, "tones", tones)
        if self.gender is not None and not isinstance(self.gender, (Gender, Pair, Family)):
            raise TypeError(f"Expected Gender, Pair or Family, got {self.gender!r}")
        if self.hair is not None and not isinstance(self.hair, Hair):
            raise TypeError(f"Expected Hair, got {self.hair!r}")

    @property
    def is_empty(self) -> bool:
        return not self.tones and self.gender is None and self.hair is None

    def merged(self, request: Selection) -> Selection:
        """Overlay `request`: every category it sets replaces ours."""
        return Selection(
            tones=request.tones or self.tones,
            gender=self.gender if request.gender is None else request.gender,
            hair=self.hair if request.hair is None else request.hair,
        )

    def labels(self) -> list[str]:
        out: list[str] = []
        if self.gender is not None:
            g = self.gender
            out.append(g.label if isinstance(g, Family) else g.adults_label)
        if self.hair is not None:
            out.append(self.hair.label)
        out.extend(t.label for t in self.tones)
        return out


@dataclass(frozen=True)
class EmojiRecord:
    """One row of the generated catalogue; equal by identifier."""

    identifier: str
    name: str = field(compare=False)
    since: Version = field(compare=False)
    group: str = field(compare=False)
    subgroup: str = field(compare=False)
    glyph: str = field(compare=False)
    tone_slots: int = field(default=0, compare=False)
    forms: Mapping[FormKey, Form] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.tone_slots not in (0, 1, 2):
            raise ValueError(f"{self.identifier}: tone slots must be 0, 1 or 2")
        forms = dict(self.forms)
        base = forms.setdefault((None, None), Form(self.glyph))
        if base.glyph != self.glyph:
            raise ValueError(f"{self.identifier}: default form differs from base glyph")
        if self.tone_slots == 1:
            forms = {
                key: form if form.toned else Form(form.glyph, default_tone_template(form.glyph))
                for key, form in forms.items()
            }
        object.__setattr__(self, "forms", MappingProxyType(forms))

    # ── supported attribute space ──
    @cached_property
    def supported_tones(self) -> frozenset[Tone]:
        return frozenset(Tone) if self.tone_slots else frozenset()

    @cached_property
    def supported_genders(self) -> frozenset[Gender]:
        return frozenset(g for g, _ in self.forms if isinstance(g, Gender))

    @cached_property
    def supported_pairs(self) -> frozenset[Pair]:
        return frozenset(g for g, _ in self.forms if isinstance(g, Pair))

    @cached_property
    def supported_families(self) -> frozenset[Family]:
        return frozenset(g for g, _ in self.forms if isinstance(g, Family))

    @cached_property
    def supported_hair(self) -> frozenset[Hair]:
        return frozenset(h for _, h in self.forms if h is not None)

    def selections(self) -> Iterable[Selection]:
        """Does: Enumerate every selection this record can resolve."""
        tone_sets: list[tuple[Tone, ...]] = [()]
        if self.tone_slots == 1:
            tone_sets += [(t,) for t in Tone]
        elif self.tone_slots == 2:
            tone_sets += [(a, b) for a in Tone for b in Tone]
        for (gender, hair), form in self.forms.items():
            for tones in tone_sets:
                if tones and form.toned is None and form.toned_same is None:
                    continue
                if tones and form.toned is None and tones[0] is not tones[-1]:
                    continue
                yield Selection(tones, gender, hair)


# ── Resolution ───────────────────────────────────────────────────────────────
def _category(value: object) -> str:
    if isinstance(value, Gender):
        return "gender"
    if isinstance(value, Pair):
        return "pair"
    if isinstance(value, Family):
        return "family"
    return "hair"


def _lookup_form(record: EmojiRecord, gender: GenderLike | None, hair: Hair | None) -> Form:
    form = record.forms.get((gender, hair))
    if form is not None:
        return form

    # Category never supported → attribute error; otherwise the combination is missing
    for requested, position in ((gender, 0), (hair, 1)):
        if requested is None:
            continue
        kind = _category(requested)
        if not any(
            key[position] is not None and _category(key[position]) == kind
            for key in record.forms
        ):
            raise UnsupportedAttributeError(
                f"{record.identifier} does not support {kind} variants (requested {requested!r})"
            )
    raise UnsupportedCombinationError(
        f"{record.identifier} has no variant for gender={gender!r}, hair={hair!r}"
    )


def _normalize_tones(record: EmojiRecord, tones: tuple[Tone, ...]) -> tuple[Tone, ...]:
    if record.tone_slots == 0:
        raise UnsupportedAttributeError(f"{record.identifier} does not support skin tones")
    if len(tones) > 2:
        raise UnsupportedCombinationError(
            f"{record.identifier}: expected one or two tones, got {len(tones)}"
        )
    if record.tone_slots == 1:
        if len(tones) == 2 and tones[0] is not tones[1]:
            raise UnsupportedCombinationError(
                f"{record.identifier} takes a single skin tone, got {tones[0].name}/{tones[1].name}"
            )
        return tones[:1]
    # Two slots: [left, right]; one tone applies to both
    return tones if len(tones) == 2 else (tones[0], tones[0])


def compose(record: EmojiRecord, selection: Selection) -> str:
    """
    Does: Compose the glyph of `record` for `selection`.
    Returns: The grapheme cluster; raises UnsupportedAttributeError /
             UnsupportedCombinationError when the request cannot be met.
    """
    if selection.is_empty:
        return record.glyph

    form = _lookup_form(record, selection.gender, selection.hair)
    if not selection.tones:
        return form.glyph

    tones = _normalize_tones(record, selection.tones)
    template = form.toned
    if len(tones) == 2 and tones[0] is tones[1] and form.toned_same is not None:
        template = form.toned_same
    if template is None:
        raise UnsupportedCombinationError(
            f"{record.identifier}: variant {selection.gender!r} cannot be toned "
            f"{'/'.join(t.name for t in tones)}"
        )
    return "".join(part if isinstance(part, str) else tones[part].modifier for part in template)


def resolve(emoji: Emoji, request: Selection | None = None) -> str:
    """
    Does: Resolve `emoji` with an additional attribute request layered on top
          of the attributes it already carries.
    Returns: The glyph; `resolve(e)` is `e.grapheme`.
    """
    selection = emoji.selection if request is None else emoji.selection.merged(request)
    return compose(emoji.record, selection)
