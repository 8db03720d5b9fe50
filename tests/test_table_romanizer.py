"""Tests for TableRomanizer."""

import pytest

from station_id_resolver.adapters.romanization import TableRomanizer


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("東京", "Tokyo"),
        ("東京駅", "Tokyo"),
        ("新宿", "Shinjuku"),
        ("しんじゅく", "Shinjuku"),
        ("まっちゃ", "Matcha"),
        ("きょうと", "Kyouto"),
        ("abc1", "Abc1"),
    ],
)
def test_romanize(name: str, expected: str) -> None:
    """Given a station name, when romanizing, then the expected Latin rendering is returned."""
    assert TableRomanizer().romanize(name) == expected


def test_unknown_characters_are_dropped() -> None:
    """Given only characters without a reading, when romanizing, then an empty string is returned."""
    assert TableRomanizer().romanize("★") == ""


def test_long_vowel_mark_is_silent() -> None:
    """Given a katakana long vowel mark, when romanizing, then it adds nothing."""
    assert TableRomanizer(station_names={}).romanize("ルート") == "Ruto"


def test_injected_tables_take_precedence() -> None:
    """Given an injected station table, when romanizing, then its entry is used."""
    romanizer = TableRomanizer(station_names={"東京": "TokyoCustom"})

    assert romanizer.romanize("東京") == "TokyoCustom"


def test_result_is_deterministic() -> None:
    """Given the same input twice, when romanizing, then the results are equal."""
    romanizer = TableRomanizer()

    assert romanizer.romanize("西日暮里") == romanizer.romanize("西日暮里")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("国立", "Kunitachi"),
        ("武蔵境", "MusashiSakai"),
        ("西八王子", "NishiHachioji"),
        ("大森", "Omori"),
        ("亀有", "Kameari"),
        ("代々木上原", "YoyogiUehara"),
        ("代々木公園", "YoyogiKoen"),
        ("厚木", "Atsugi"),
        ("千駄木", "Sendagi"),
        ("高輪ゲートウェイ", "TakanawaGateway"),
        ("下総中山", "ShimosaNakayama"),
        ("祖師ヶ谷大蔵", "SoshigayaOkura"),
        ("鶴巻温泉", "TsurumakiOnsen"),
        ("富水", "Tomizu"),
        ("螢田", "Hotaruda"),
    ],
)
def test_station_table_reading(name: str, expected: str) -> None:
    """Given a station with an irregular reading, when romanizing, then the station table entry is used."""
    assert TableRomanizer().romanize(name) == expected


def test_station_table_covers_major_stations() -> None:
    """Given the built-in station table, when counting entries, then every curated station is present."""
    from station_id_resolver.adapters.romanization.tables import STATION_ROMANIZATIONS

    assert len(STATION_ROMANIZATIONS) == 162
