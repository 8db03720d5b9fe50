"""Tests for the alias table and railway catalog."""

import pytest

from station_id_resolver.domain.models import AliasTable, RailwayCatalog, RailwayMappingEntry


class TestAliasTable:
    """Tests for AliasTable."""

    def test_when_alias_known_then_returns_canonical_name(self) -> None:
        """Given the default table, when resolving 読売ランド, then returns 読売ランド前."""
        table = AliasTable.default()

        assert table.resolve_alias("読売ランド") == "読売ランド前"

    def test_when_skytree_alias_then_returns_hiragana_name(self) -> None:
        """Given the default table, when resolving 東京スカイツリー, then returns the hiragana name."""
        table = AliasTable.default()

        assert table.resolve_alias("東京スカイツリー") == "とうきょうスカイツリー"

    @pytest.mark.parametrize(
        ("reading", "expected"),
        [("しぶや", "渋谷"), ("よこはま", "横浜"), ("きちじょうじ", "吉祥寺"), ("むさしこすぎ", "武蔵小杉")],
    )
    def test_when_hiragana_reading_then_returns_kanji_name(
        self, reading: str, expected: str
    ) -> None:
        """Given a hiragana reading of a major station, when resolving, then returns its kanji name."""
        table = AliasTable.default()

        assert table.resolve_alias(reading) == expected

    def test_when_name_not_aliased_then_returns_input_unchanged(self) -> None:
        """Given an unknown name, when resolving, then the name is returned as is."""
        table = AliasTable.default()

        assert table.resolve_alias("渋谷") == "渋谷"

    def test_injected_table_is_used_and_enumerable(self) -> None:
        """Given an injected mapping, when enumerating, then its entries are exposed."""
        table = AliasTable({"スカイツリー": "とうきょうスカイツリー"})

        assert len(table) == 1
        assert "スカイツリー" in table
        assert list(table.entries()) == [("スカイツリー", "とうきょうスカイツリー")]

    def test_table_is_isolated_from_source_mapping(self) -> None:
        """Given a table built from a dict, when the dict changes, then the table does not."""
        source = {"a": "b"}
        table = AliasTable(source)

        source["c"] = "d"

        assert "c" not in table


class TestRailwayCatalog:
    """Tests for RailwayCatalog."""

    def test_when_line_known_then_returns_railway_id(self) -> None:
        """Given the default catalog, when looking up JR山手線, then returns the Yamanote ID."""
        catalog = RailwayCatalog.default()

        assert catalog.lookup("JR山手線") == "odpt.Railway:JR-East.Yamanote"

    def test_when_line_unknown_then_returns_none(self) -> None:
        """Given the default catalog, when looking up an unknown line, then returns None."""
        catalog = RailwayCatalog.default()

        assert catalog.lookup("UnknownLine123") is None

    def test_default_catalog_entries_are_well_formed(self) -> None:
        """Given the default catalog, when enumerating, then every ID is an odpt.Railway ID."""
        catalog = RailwayCatalog.default()

        entries = list(catalog.entries())

        assert len(entries) == len(catalog)
        for entry in entries:
            namespace, _, operator_and_line = entry.canonical_railway_id.partition(":")
            assert namespace == "odpt.Railway"
            assert len(operator_and_line.split(".")) == 2

    def test_from_entries_builds_catalog(self) -> None:
        """Given mapping entries, when building a catalog, then lookups use them."""
        catalog = RailwayCatalog.from_entries(
            [RailwayMappingEntry("テスト線", "odpt.Railway:Test.Line")]
        )

        assert "テスト線" in catalog
        assert catalog.lookup("テスト線") == "odpt.Railway:Test.Line"

    def test_from_entries_rejects_duplicates(self) -> None:
        """Given two entries for the same line, when building a catalog, then ValueError is raised."""
        entries = [
            RailwayMappingEntry("テスト線", "odpt.Railway:Test.A"),
            RailwayMappingEntry("テスト線", "odpt.Railway:Test.B"),
        ]

        with pytest.raises(ValueError, match="Duplicate railway mapping"):
            RailwayCatalog.from_entries(entries)
