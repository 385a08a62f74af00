# tests/test_text_alias_table.py
from __future__ import annotations

import json
import threading
import time
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

import pytest

# Module under test
from emojikit.text import alias_table as AT
from emojikit import flat
from emojikit.emojis.attributes import Gender, Tone
from emojikit.emojis.catalog import get_catalog
from emojikit.emojis.resolver import Selection
from emojikit.utils.load_config import DATA_DIR_ENV, ConfigParseError, clear_config_cache


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def cold_table():
    """
    Does: Start from an unbuilt shared table and drop it again afterwards.
    """
    AT.reset_alias_table()
    yield
    AT.reset_alias_table()


@pytest.fixture
def alias_file(tmp_path, monkeypatch):
    """
    Does: Return a writer for an isolated data/aliases.json.
    """
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(DATA_DIR_ENV, str(data))
    clear_config_cache()

    def _write(aliases):
        (data / f"{AT.ALIAS_FILE}.json").write_text(json.dumps({"aliases": aliases}), encoding="utf-8")

    yield _write
    clear_config_cache()


# ─────────────────────────────────────────────────────────────────────────────
# parse_alias
# ─────────────────────────────────────────────────────────────────────────────
def test_parse_alias_known_and_unknown():
    assert AT.parse_alias("+1") == flat.THUMBS_UP
    assert AT.parse_alias(":+1:") == flat.THUMBS_UP
    assert AT.parse_alias("thumbsup") == flat.THUMBS_UP
    assert AT.parse_alias("nonexistent_xyz") is None
    assert AT.parse_alias("") is None
    assert AT.parse_alias(":") is None


def test_parse_alias_is_case_sensitive():
    assert AT.parse_alias("thumbs_up") == flat.THUMBS_UP
    assert AT.parse_alias("THUMBS_UP") is None
    assert AT.parse_alias("Joy") is None


def test_parse_alias_rejects_non_str():
    with pytest.raises(TypeError):
        AT.parse_alias(42)  # type: ignore[arg-type]


def test_identifier_alias_takes_precedence():
    # the listed "pencil" (memo) loses against the PENCIL identifier alias
    assert AT.parse_alias("pencil") == flat.PENCIL
    assert AT.parse_alias("pencil2") == flat.PENCIL
    assert AT.parse_alias("memo") == flat.MEMO


@pytest.mark.parametrize(
    "alias,expected",
    [
        ("woman_technologist", "\U0001F469\u200d\U0001F4BB"),
        ("man", "\U0001F468"),
        ("red_haired_man", "\U0001F468\u200d\U0001F9B0"),
        ("couple", "\U0001F46B"),
        ("family_man_woman_girl_boy", "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"),
        ("raising_hand_woman", "\U0001F64B\u200d\u2640\ufe0f"),
    ],
)
def test_alias_presets(alias, expected):
    assert AT.parse_alias(alias).grapheme == expected


def test_preset_emoji_keeps_chaining():
    tech = AT.parse_alias("woman_technologist")
    assert tech.tone(Tone.DARK).grapheme == "\U0001F469\U0001F3FF\u200d\U0001F4BB"
    assert tech.base == flat.TECHNOLOGIST


def test_table_is_a_read_only_mapping():
    table = AT.get_alias_table()
    assert isinstance(table, Mapping)
    assert "+1" in table and "nope" not in table
    with pytest.raises(KeyError):
        table["nope"]
    with pytest.raises(TypeError):
        table["nope"] = flat.ROCKET  # type: ignore[index]
    assert table.aliases_for(flat.THUMBS_UP) == ["+1", "thumbs_up", "thumbsup"]
    assert len(table) > len(get_catalog())


# ─────────────────────────────────────────────────────────────────────────────
# build_alias_table with explicit entries
# ─────────────────────────────────────────────────────────────────────────────
def test_build_with_entries():
    cat = get_catalog()
    table = AT.build_alias_table(
        cat,
        [
            AT.AliasEntry("lift_off", "ROCKET"),
            AT.AliasEntry("dark_up", "THUMBS_UP", Selection((Tone.DARK,))),
            AT.AliasEntry("rocket", "FIRE"),  # taken by the identifier alias
        ],
    )
    assert len(table) == len(cat) + 2
    assert table["lift_off"] == flat.ROCKET
    assert table["rocket"] == flat.ROCKET
    assert table["dark_up"].grapheme == "\U0001F44D\U0001F3FF"


@pytest.mark.parametrize(
    "entry",
    [
        AT.AliasEntry("bad alias", "ROCKET"),
        AT.AliasEntry("x:y", "ROCKET"),
        AT.AliasEntry("ghost_ship", "NOT_AN_EMOJI"),
        AT.AliasEntry("rocket_man", "ROCKET", Selection(gender=Gender.MALE)),
    ],
)
def test_build_rejects_bad_entries(entry):
    with pytest.raises(ConfigParseError):
        AT.build_alias_table(get_catalog(), [entry])


# ─────────────────────────────────────────────────────────────────────────────
# Alias data file
# ─────────────────────────────────────────────────────────────────────────────
def test_load_alias_entries(alias_file):
    alias_file({"lift_off": "ROCKET", "gal": {"id": "PERSON", "gender": "female", "tone": "light"}})
    entries = AT.load_alias_entries()
    assert entries[0] == AT.AliasEntry("lift_off", "ROCKET")
    assert entries[1] == AT.AliasEntry("gal", "PERSON", Selection((Tone.LIGHT,), Gender.FEMALE))


@pytest.mark.parametrize(
    "aliases",
    [
        {"x": ["ROCKET"]},
        {"x": {"gender": "male"}},  # no id
        {"x": {"id": "PERSON", "eyes": "blue"}},
        {"x": {"id": "PERSON", "gender": "male", "pair": "mixed"}},
        {"x": {"id": "PERSON", "gender": "robot"}},
    ],
)
def test_load_alias_entries_errors(alias_file, aliases):
    alias_file(aliases)
    with pytest.raises(ConfigParseError):
        AT.load_alias_entries()


# ─────────────────────────────────────────────────────────────────────────────
# One-time lazy construction
# ─────────────────────────────────────────────────────────────────────────────
def test_table_is_built_once_and_shared(cold_table):
    first = AT.get_alias_table()
    assert AT.get_alias_table() is first
    AT.reset_alias_table()
    assert AT.get_alias_table() is not first


def test_concurrent_first_use_builds_exactly_once(cold_table, monkeypatch):
    calls = {"n": 0}
    real_build = AT.build_alias_table

    def _slow_build(*args, **kwargs):
        calls["n"] += 1
        time.sleep(0.05)  # widen the race window
        return real_build(*args, **kwargs)

    monkeypatch.setattr(AT, "build_alias_table", _slow_build, raising=True)

    n = 8
    barrier = threading.Barrier(n)

    def _worker(_):
        barrier.wait()
        return AT.parse_alias("+1")

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(_worker, range(n)))

    assert calls["n"] == 1
    assert all(r == flat.THUMBS_UP for r in results)
