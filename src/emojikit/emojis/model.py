# src/emojikit/emojis/model.py
"""
model.

Does: Define the immutable, chainable Emoji value. Every attribute call
      (tone / gender / pair / hair / family) returns a fresh snapshot whose
      grapheme is composed by the resolver; the receiver is never modified,
      so catalogue emoji double as templates.
Returns: Emoji.
Used by: The catalogue, flat constants, the alias table and library users.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from emojikit.emojis.attributes import Family, Gender, GenderLike, Hair, Pair, Tone, Version
from emojikit.emojis.resolver import EmojiRecord, Selection, compose

__all__ = ["Emoji"]


def _flatten_tones(tones: tuple[Tone | Iterable[Tone], ...]) -> tuple[Tone, ...]:
    # tone(T), tone(T1, T2), tone((T1, T2)) and tone([T]) are all accepted
    if len(tones) == 1 and not isinstance(tones[0], Tone):
        candidate = tones[0]
        if isinstance(candidate, (str, bytes)) or not isinstance(candidate, Iterable):
            raise TypeError(f"Expected Tone values, got {candidate!r}")
        return tuple(candidate)
    return tuple(tones)  # type: ignore[arg-type]


def _coerce_gender(record: EmojiRecord, value: object) -> GenderLike | None:
    if value is None or isinstance(value, (Gender, Pair, Family)):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        first, second = value
        if isinstance(first, Gender) and isinstance(second, Gender):
            # on family emoji two genders read as (parent, child)
            if record.supported_families and not record.supported_pairs:
                return Family(first, second)
            return Pair.from_genders(first, second)
        return Family(first, second)
    raise TypeError(f"Expected Gender, Pair, Family or a pair of them, got {value!r}")


@dataclass(frozen=True)
class Emoji:
    """A catalogue emoji with a set of applied attributes.

    Attributes:
        record: The generated catalogue row this emoji belongs to.
        selection: Attributes applied on top of the default glyph.
        grapheme: The composed Unicode sequence (what gets printed).
    """

    record: EmojiRecord
    selection: Selection = Selection()
    grapheme: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "grapheme", compose(self.record, self.selection))

    def __str__(self) -> str:
        return self.grapheme

    # ── metadata ──
    @property
    def identifier(self) -> str:
        return self.record.identifier

    @property
    def name(self) -> str:
        return self.describe()

    def describe(self) -> str:
        """Record name plus attribute qualifiers, e.g. "thumbs up: medium skin tone"."""
        labels = self.selection.labels()
        return f"{self.record.name}: {', '.join(labels)}" if labels else self.record.name

    @property
    def since(self) -> Version:
        return self.record.since

    @property
    def group(self) -> str:
        return self.record.group

    @property
    def subgroup(self) -> str:
        return self.record.subgroup

    @property
    def base(self) -> Emoji:
        """The same emoji with every attribute cleared."""
        if self.selection.is_empty:
            return self
        return Emoji(self.record)

    @property
    def supported_tones(self) -> frozenset[Tone]:
        return self.record.supported_tones

    @property
    def supported_genders(self) -> frozenset[Gender]:
        return self.record.supported_genders

    @property
    def supported_pairs(self) -> frozenset[Pair]:
        return self.record.supported_pairs

    @property
    def supported_hair(self) -> frozenset[Hair]:
        return self.record.supported_hair

    @property
    def supported_families(self) -> frozenset[Family]:
        return self.record.supported_families

    @property
    def tone_slots(self) -> int:
        return self.record.tone_slots

    # ── attribute chaining ──
    def tone(self, *tones: Tone | Iterable[Tone]) -> Emoji:
        """Return a snapshot with the given skin tone(s); no argument clears the tone.

        Two tones are applied [left, right] on two-person emoji; a single tone
        applies to everybody.
        """
        return replace(self, selection=replace(self.selection, tones=_flatten_tones(tones)))

    def gender(self, gender: GenderLike | tuple[object, object] | None) -> Emoji:
        """Return a snapshot with a gender, a gender pair or a family composition.

        A (Gender, Gender) tuple selects the matching Pair, or the (parent, child)
        Family on family emoji; any other (parents, children) tuple selects a
        Family. None clears the attribute.
        """
        return replace(self, selection=replace(self.selection, gender=_coerce_gender(self.record, gender)))

    def pair(self, pair: Pair | None) -> Emoji:
        if pair is not None and not isinstance(pair, Pair):
            raise TypeError(f"Expected Pair, got {pair!r}")
        return self.gender(pair)

    def family(
        self,
        parents: Family | Gender | Pair | tuple[Gender | Pair, Gender | Pair] | None,
        children: Gender | Pair | None = None,
    ) -> Emoji:
        """Select a family composition, given as two parts, one tuple or a Family."""
        if children is not None:
            return self.gender(Family(parents, children))  # type: ignore[arg-type]
        if isinstance(parents, tuple) and len(parents) == 2:
            return self.gender(Family(*parents))
        if parents is not None and not isinstance(parents, Family):
            raise TypeError(f"Expected Family or (parents, children), got {parents!r}")
        return self.gender(parents)

    def hair(self, hair: Hair | None) -> Emoji:
        return replace(self, selection=replace(self.selection, hair=hair))

    def with_selection(self, selection: Selection) -> Emoji:
        return replace(self, selection=self.selection.merged(selection))

    # ── enumeration ──
    def variants(self) -> Iterator[Emoji]:
        """Iterate this emoji's default and every supported variant."""
        for selection in self.record.selections():
            yield Emoji(self.record, selection)
