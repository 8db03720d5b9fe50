"""Table-driven station name romanizer."""

from collections.abc import Mapping

from station_id_resolver.adapters.romanization.tables import (
    KANA_ROMANIZATIONS,
    KANJI_READINGS,
    SILENT_MARKS,
    SOKUON,
    STATION_ROMANIZATIONS,
    YOON_VOWELS,
)
from station_id_resolver.domain.ports.romanizer import Romanizer

STATION_SUFFIX = "駅"


class TableRomanizer(Romanizer):
    """Romanizes station names from lookup tables.

    Whole station names are looked up first. Otherwise the name is converted
    character by character: kana syllabically, kanji by their most common
    reading in station names, ASCII passed through, anything else dropped.
    This is a heuristic; homophones and multi-reading kanji are not resolved.
    """

    def __init__(
        self,
        station_names: Mapping[str, str] | None = None,
        kana: Mapping[str, str] | None = None,
        kanji: Mapping[str, str] | None = None,
    ) -> None:
        self._station_names = station_names if station_names is not None else STATION_ROMANIZATIONS
        self._kana = kana if kana is not None else KANA_ROMANIZATIONS
        self._kanji = kanji if kanji is not None else KANJI_READINGS

    def romanize(self, text: str) -> str:
        """Return a capitalized Latin rendering of the station name text."""
        exact = self._station_names.get(text)
        if exact is not None:
            return exact

        name = text.strip()
        if name.endswith(STATION_SUFFIX) and len(name) > 1:
            name = name[: -len(STATION_SUFFIX)]
            exact = self._station_names.get(name)
            if exact is not None:
                return exact

        result = self._convert(name)
        return result[:1].upper() + result[1:]

    def _convert(self, text: str) -> str:
        result = ""
        double_next = False
        for char in text:
            if char in SOKUON:
                double_next = True
                continue
            if char in SILENT_MARKS:
                continue
            if char in YOON_VOWELS:
                result = self._merge_yoon(result, YOON_VOWELS[char])
                continue

            roman = self._kana.get(char) or self._kanji.get(char)
            if roman is None:
                roman = char if char.isascii() and char.isalnum() else ""
            if double_next and roman:
                # っち is written tch, other consonants are doubled
                roman = ("t" + roman) if roman.startswith("ch") else (roman[0] + roman)
                double_next = False
            result += roman
        return result

    @staticmethod
    def _merge_yoon(result: str, vowel: str) -> str:
        """Merge a small ya/yu/yo into the preceding i-row syllable."""
        if result.endswith(("shi", "chi")) or result.endswith("ji"):
            return result[:-1] + vowel
        if len(result) >= 2 and result.endswith("i"):
            return result[:-1] + "y" + vowel
        return result + "y" + vowel
