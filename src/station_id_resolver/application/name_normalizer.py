"""Orthographic variants of a station query."""

# Station names the search service stores with a trailing "前" ("in front of")
# are often typed without it; "駅" ("station") is sometimes typed with it.
MAE_SUFFIX = "前"
STATION_SUFFIX = "駅"

# Interchangeable spellings: small ke vs. full-size ke, katakana no vs. hiragana no.
SMALL_KE_PAIR = ("ヶ", "ケ")
POSSESSIVE_NO_PAIR = ("ノ", "の")


def _swap(text: str, pair: tuple[str, str]) -> str | None:
    """Swap one character of pair for the other, or None if text contains neither."""
    first, second = pair
    if first in text:
        return text.replace(first, second)
    if second in text:
        return text.replace(second, first)
    return None


class NameNormalizer:
    """Produces the ordered list of query variants tried by the fallback search."""

    def variants(self, text: str) -> list[str]:
        """Return the variants of text in the order they should be tried.

        The order is: the text itself, text + "前", text + "駅", the ヶ/ケ swap
        and the ノ/の swap. Suffixes already present and swaps that do not apply
        are skipped. Empty input yields no variants.
        """
        text = text.strip()
        if not text:
            return []

        candidates: list[str | None] = [
            text,
            None if text.endswith(MAE_SUFFIX) else text + MAE_SUFFIX,
            None if text.endswith(STATION_SUFFIX) else text + STATION_SUFFIX,
            _swap(text, SMALL_KE_PAIR),
            _swap(text, POSSESSIVE_NO_PAIR),
        ]

        variants: list[str] = []
        for candidate in candidates:
            if candidate and candidate not in variants:
                variants.append(candidate)
        return variants
