"""Tests for NameNormalizer."""

from station_id_resolver.application.name_normalizer import NameNormalizer


def test_variants_order_for_plain_name() -> None:
    """Given a plain name, when generating variants, then name, +前 and +駅 are returned in order."""
    variants = NameNormalizer().variants("読売ランド")

    assert variants == ["読売ランド", "読売ランド前", "読売ランド駅"]


def test_variants_first_is_input() -> None:
    """Given any non-empty name, when generating variants, then the first is the input itself."""
    assert NameNormalizer().variants("渋谷")[0] == "渋谷"


def test_variants_skip_existing_mae_suffix() -> None:
    """Given a name ending with 前, when generating variants, then 前 is not appended again."""
    variants = NameNormalizer().variants("都庁前")

    assert variants == ["都庁前", "都庁前駅"]


def test_variants_skip_existing_station_suffix() -> None:
    """Given a name ending with 駅, when generating variants, then 駅 is not appended again."""
    variants = NameNormalizer().variants("東京駅")

    assert variants == ["東京駅", "東京駅前"]


def test_variants_swap_small_ke() -> None:
    """Given a name with ヶ, when generating variants, then the ケ spelling comes after the suffixes."""
    variants = NameNormalizer().variants("市ヶ谷")

    assert variants == ["市ヶ谷", "市ヶ谷前", "市ヶ谷駅", "市ケ谷"]


def test_variants_swap_full_size_ke_back() -> None:
    """Given a name with ケ, when generating variants, then the ヶ spelling is produced."""
    assert "市ヶ谷" in NameNormalizer().variants("市ケ谷")


def test_variants_swap_possessive_no() -> None:
    """Given a name with ノ, when generating variants, then the の spelling is last."""
    variants = NameNormalizer().variants("御茶ノ水")

    assert variants[-1] == "御茶の水"
    assert len(variants) == 4


def test_variants_with_both_swaps_keep_order() -> None:
    """Given a name with ヶ and ノ, when generating variants, then the ヶ swap precedes the ノ swap."""
    variants = NameNormalizer().variants("ヶ丘ノ上")

    assert variants[3:] == ["ケ丘ノ上", "ヶ丘の上"]


def test_variants_are_unique() -> None:
    """Given any name, when generating variants, then no variant repeats."""
    variants = NameNormalizer().variants("前駅")

    assert len(variants) == len(set(variants))


def test_variants_empty_input() -> None:
    """Given empty or blank input, when generating variants, then no variants are returned."""
    assert NameNormalizer().variants("") == []
    assert NameNormalizer().variants("   ") == []


def test_variants_strip_whitespace() -> None:
    """Given padded input, when generating variants, then the stripped name is used."""
    assert NameNormalizer().variants("  渋谷 ")[0] == "渋谷"
