# tests/test_emojis_catalog.py
from __future__ import annotations

import json

import pytest

# Module under test
from emojikit.emojis import catalog as C
from emojikit import flat
from emojikit.emojis.attributes import Gender, Pair, Tone
from emojikit.text.alias_table import reset_alias_table
from emojikit.utils.load_config import DATA_DIR_ENV, ConfigParseError, clear_config_cache


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """
    Does: Point the loader at an isolated data/ dir and drop the shared catalogue
          before and after the test, so the packaged one comes back afterwards.
    """
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(DATA_DIR_ENV, str(data))
    clear_config_cache()
    C.reset_catalog()
    reset_alias_table()
    yield data
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    clear_config_cache()
    C.reset_catalog()
    reset_alias_table()


def _write_catalog(data_dir, emojis, *, group="Test Group", subgroup="test-sub"):
    payload = {
        "unicode_version": "13.1",
        "groups": [{"name": group, "subgroups": [{"name": subgroup, "emojis": emojis}]}],
    }
    (data_dir / f"{C.CATALOG_FILE}.json").write_text(json.dumps(payload), encoding="utf-8")


# ─────────────────────────────────────────────────────────────────────────────
# Packaged catalogue
# ─────────────────────────────────────────────────────────────────────────────
def test_flat_lookup_by_identifier():
    cat = C.get_catalog()
    assert cat["THUMBS_UP"].grapheme == "\U0001F44D"
    assert "THUMBS_UP" in cat and "NOPE" not in cat
    assert cat.get("NOPE") is None
    with pytest.raises(KeyError):
        cat["NOPE"]
    assert len(cat) == sum(len(s.records) for g in cat.groups for s in g.subgroups)
    assert cat.unicode_version == "13.1"


def test_catalogue_is_shared_until_reset():
    first = C.get_catalog()
    assert C.get_catalog() is first
    C.reset_catalog()
    try:
        assert C.get_catalog() is not first
    finally:
        reset_alias_table()


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Smileys & Emotion", "smileys_and_emotion"),
        ("hand-fingers-open", "hand_fingers_open"),
        ("sky & weather", "sky_and_weather"),
    ],
)
def test_snake_identifier(name, expected):
    assert C.snake_identifier(name) == expected


def test_grouped_access_preserves_order():
    travel = C.get_catalog().group("Travel & Places")
    assert travel.identifier == "travel_and_places"
    geographic = travel.subgroup("place-geographic")
    assert [e.identifier for e in geographic.base_emojis()] == [
        "SNOW_CAPPED_MOUNTAIN",
        "MOUNTAIN",
        "VOLCANO",
        "MOUNT_FUJI",
        "CAMPING",
        "BEACH_WITH_UMBRELLA",
        "DESERT",
        "DESERT_ISLAND",
        "NATIONAL_PARK",
    ]
    # identifiers and display names are both accepted
    assert C.get_catalog().group("travel_and_places") is travel


def test_group_and_subgroup_errors():
    cat = C.get_catalog()
    with pytest.raises(KeyError):
        cat.group("Plants")
    with pytest.raises(KeyError):
        cat.group("Flags").subgroup("pirates")


def test_all_variants_per_emoji():
    sub = C.get_catalog().group("People & Body").subgroup("hand-fingers-closed")
    per_emoji = list(sub.all_variants())
    assert len(per_emoji) == len(sub.records)
    for variants in per_emoji:
        assert len(variants) == 1 + len(Tone)
        assert variants[0].selection.is_empty


def test_find_by_grapheme():
    cat = C.get_catalog()
    assert cat.find_by_grapheme("\U0001F44D\U0001F3FD") == flat.THUMBS_UP.tone(Tone.MEDIUM)
    assert cat.find_by_grapheme("\U0001F46B") == flat.PEOPLE_HOLDING_HANDS.pair(Pair.MIXED)
    assert cat.find_by_grapheme("\U0001F469\u200d\U0001F4BB") == flat.TECHNOLOGIST.gender(Gender.FEMALE)
    assert cat.find_by_grapheme("\U0001F680") == flat.ROCKET
    assert cat.find_by_grapheme("abc") is None
    assert cat.variant_count > len(cat)


def test_packaged_table_covers_the_standard_list():
    cat = C.get_catalog()
    assert len(cat) > 1500
    assert len(list(cat.group("Flags").subgroup("country-flag").base_emojis())) > 250
    assert flat.FLAG_ALAND_ISLANDS.grapheme == "\U0001F1E6\U0001F1FD"
    assert flat.KEYCAP_10.grapheme == "\U0001F51F"
    assert flat.LEFT_FACING_FIST.tone(Tone.DARK).grapheme == "\U0001F91B\U0001F3FF"
    assert flat.PERSON_IN_SUIT_LEVITATING.tone(Tone.LIGHT).grapheme == "\U0001F574\U0001F3FB"
    # hearts stay in the Emoji 13.1 subgroup
    assert flat.RED_HEART.subgroup == flat.ORANGE_HEART.subgroup == "emotion"


def test_flat_module_attributes():
    from emojikit.flat import ROCKET

    assert ROCKET == C.get_catalog()["ROCKET"]
    assert "THUMBS_UP" in dir(flat)
    with pytest.raises(AttributeError):
        flat.NOT_AN_EMOJI


# ─────────────────────────────────────────────────────────────────────────────
# Loading custom tables
# ─────────────────────────────────────────────────────────────────────────────
def test_custom_catalogue_loads(data_dir):
    _write_catalog(
        data_dir,
        [
            {"id": "WAVE", "name": "wave", "since": "E0.6", "glyph": "1F44B", "tones": 1},
            {
                "id": "SHRUG",
                "name": "shrug",
                "since": "3.0",
                "glyph": "1F937",
                "tones": 1,
                "forms": {"gender=female": "1F937 200D 2640 FE0F"},
            },
        ],
    )
    cat = C.get_catalog()
    assert [e.identifier for e in cat] == ["WAVE", "SHRUG"]
    assert cat["SHRUG"].gender(Gender.FEMALE).tone(Tone.DARK).grapheme == "\U0001F937\U0001F3FF\u200d\u2640\ufe0f"
    assert cat.group("Test Group").subgroup("test-sub").name == "test-sub"


@pytest.mark.parametrize(
    "emojis",
    [
        [{"id": "A", "name": "a", "glyph": "1F600"}, {"id": "A", "name": "a", "glyph": "1F601"}],
        [{"id": "A", "name": "a", "glyph": "not hex"}],
        [{"id": "A", "name": "a", "glyph": "1F44D", "tones": 1, "toned_same": "1F44D {T1}"}],
        [{"id": "A", "name": "a", "glyph": "1F44D", "tones": 1, "forms": {"tone=light": "1F44D"}}],
        [{"id": "A", "name": "a", "glyph": "1F44D", "forms": {"gender=robot": "1F916"}}],
        [{"id": "A", "name": "a", "glyph": "1F44D", "tones": 4}],
        [{"name": "missing id", "glyph": "1F44D"}],
    ],
)
def test_malformed_catalogue_raises(data_dir, emojis):
    _write_catalog(data_dir, emojis)
    with pytest.raises(ConfigParseError):
        C.get_catalog()
    # nothing is published after a failed load
    assert C._CATALOG is None
