# tests/test_text_scanner.py
from __future__ import annotations

import random

import pytest

# Module under test
from emojikit.text import scanner as S
from emojikit import flat
from emojikit.emojis.attributes import Version
from emojikit.emojis.model import Emoji
from emojikit.emojis.resolver import EmojiRecord

THUMBS_UP = "\U0001F44D"
HUNDRED = "\U0001F4AF"
TECHNOLOGIST = "\U0001F9D1\u200d\U0001F4BB"


# ─────────────────────────────────────────────────────────────────────────────
# Substitution & recovery rules
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expected",
    [
        ("a :+1: day", f"a {THUMBS_UP} day"),
        ("::+1:", f":{THUMBS_UP}"),
        ("100: :100:100:100: :100", f"100: {HUNDRED}100{HUNDRED} :100"),
        ("abc:::technologist:::def", f"abc::{TECHNOLOGIST}::def"),
        (":+1::-1:", f"{THUMBS_UP}\U0001F44E"),
        (":unknown:+1:", f":unknown{THUMBS_UP}"),
        (":wave::skin-tone-2:", "\U0001F44B:skin-tone-2:"),
        (":woman_technologist:", "\U0001F469\u200d\U0001F4BB"),
    ],
)
def test_parse_text_substitutes(text, expected):
    assert S.parse_text(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "no aliases here",
        "",
        ":",
        "::::",
        ":nonexistent_xyz:",
        ":+1",
        "+1:",
        ":hello world:",
        ":THUMBS_UP:",  # aliases are case-sensitive
        "time: 10:30",
    ],
)
def test_parse_text_leaves_unmatched_text_verbatim(text):
    assert S.parse_text(text) == text


def test_substituted_glyphs_are_not_rescanned():
    # a glyph that itself looks like an alias token
    tricky = Emoji(EmojiRecord("TRICKY", "tricky", Version(1, 0), "g", "s", ":b:"))
    lookup = {"a": tricky, "b": flat.ROCKET}.get
    assert str(S.EmojiTextParser(":a:", lookup)) == ":b:"
    assert str(S.EmojiTextParser(":a::b:", lookup)) == ":b:\U0001F680"


def test_parse_text_never_raises_on_noise():
    rng = random.Random(1234)
    alphabet = ":+-_1ab \n\U0001F600"
    for _ in range(300):
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
        out = S.parse_text(text)
        assert isinstance(out, str)
        if ":" not in text:
            assert out == text


def test_parse_text_rejects_non_str():
    with pytest.raises(TypeError):
        S.parse_text(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        S.EmojiTextParser(b":+1:")  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# EmojiTextParser
# ─────────────────────────────────────────────────────────────────────────────
def test_parser_fragments_and_emojis():
    parser = S.EmojiTextParser("Hi :wave: there :+1:")
    assert list(parser) == ["Hi ", "\U0001F44B", " there ", THUMBS_UP]
    assert [e.identifier for e in parser.emojis()] == ["WAVING_HAND", "THUMBS_UP"]
    # iterable more than once
    assert str(parser) == str(parser) == f"Hi \U0001F44B there {THUMBS_UP}"


def test_parser_adjacent_and_plain():
    assert list(S.EmojiTextParser(":+1::+1:")) == [THUMBS_UP, THUMBS_UP]
    assert list(S.EmojiTextParser("plain")) == ["plain"]
    assert list(S.EmojiTextParser("")) == []
    assert repr(S.EmojiTextParser("x")) == "EmojiTextParser('x')"


def test_custom_lookup():
    parser = S.EmojiTextParser(":go: :+1:", {"go": flat.ROCKET}.get)
    assert str(parser) == "\U0001F680 :+1:"
