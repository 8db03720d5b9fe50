"""Tests for StationSearchClient."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from station_id_resolver.application.station_search_client import (
    StationSearchClient,
    _parse_distance_meters,
)
from station_id_resolver.domain.models import (
    AliasTable,
    Found,
    NotFound,
    Outcome,
    StationRecord,
    TransientFailure,
)


def _record(name: str, line_name: str = "小田急線", distance: str | None = None) -> StationRecord:
    return StationRecord(
        name=name,
        region="神奈川県",
        line_name=line_name,
        longitude=139.52,
        latitude=35.62,
        distance_meters=distance,
    )


def _search_api(results: dict[str, Outcome[list[StationRecord]]]) -> MagicMock:
    """Fake search API answering by exact term; unknown terms are NotFound."""
    api = MagicMock()

    async def search_by_name(name: str) -> Outcome[list[StationRecord]]:
        return results.get(name, NotFound())

    api.search_by_name = AsyncMock(side_effect=search_by_name)
    api.search_nearby = AsyncMock(return_value=NotFound())
    return api


def _called_terms(api: MagicMock) -> list[str]:
    return [call.args[0] for call in api.search_by_name.await_args_list]


class TestSearch:
    """Tests for the fallback search."""

    @pytest.mark.asyncio
    async def test_alias_is_applied_before_remote_search(self) -> None:
        """Given 読売ランド, when searching, then the remote is asked for 読売ランド前 first."""
        api = _search_api({"読売ランド前": Found([_record("読売ランド前")])})
        client = StationSearchClient(api)

        records = await client.search("読売ランド")

        assert [r.name for r in records] == ["読売ランド前"]
        assert _called_terms(api) == ["読売ランド前"]

    @pytest.mark.asyncio
    async def test_hiragana_reading_is_searched_as_kanji(self) -> None:
        """Given しぶや, when searching, then the remote is asked for 渋谷."""
        api = _search_api({"渋谷": Found([_record("渋谷", "JR山手線")])})
        client = StationSearchClient(api)

        records = await client.search("しぶや")

        assert [r.name for r in records] == ["渋谷"]
        assert _called_terms(api) == ["渋谷"]

    @pytest.mark.asyncio
    async def test_skytree_makes_single_call_with_hiragana_name(self) -> None:
        """Given 東京スカイツリー, when searching, then exactly one call is made for とうきょうスカイツリー."""
        api = _search_api(
            {"とうきょうスカイツリー": Found([_record("とうきょうスカイツリー", "東武スカイツリーライン")])}
        )
        client = StationSearchClient(api)

        records = await client.search("東京スカイツリー")

        assert [r.name for r in records] == ["とうきょうスカイツリー"]
        assert _called_terms(api) == ["とうきょうスカイツリー"]

    @pytest.mark.asyncio
    async def test_exact_match_stops_search(self) -> None:
        """Given an exact match, when searching, then no variant is tried."""
        api = _search_api({"渋谷": Found([_record("渋谷", "JR山手線")])})
        client = StationSearchClient(api, alias_table=AliasTable({}))

        records = await client.search("渋谷")

        assert len(records) == 1
        assert api.search_by_name.await_count == 1

    @pytest.mark.asyncio
    async def test_mae_variant_tried_after_exact(self) -> None:
        """Given only the 前 spelling exists, when searching without alias, then it is found second."""
        api = _search_api({"成城学園前": Found([_record("成城学園前")])})
        client = StationSearchClient(api, alias_table=AliasTable({}))

        report = await client.search_report("成城学園")

        assert report.matched_term == "成城学園前"
        assert report.attempted_terms == ("成城学園", "成城学園前")

    @pytest.mark.asyncio
    async def test_all_variants_tried_in_order_when_nothing_matches(self) -> None:
        """Given no matches, when searching, then every variant is tried in order and [] is returned."""
        api = _search_api({})
        client = StationSearchClient(api, alias_table=AliasTable({}))

        records = await client.search("市ヶ谷ノ森")

        assert records == []
        assert _called_terms(api) == [
            "市ヶ谷ノ森",
            "市ヶ谷ノ森前",
            "市ヶ谷ノ森駅",
            "市ケ谷ノ森",
            "市ヶ谷の森",
        ]

    @pytest.mark.asyncio
    async def test_remote_failure_counts_as_zero_results(self) -> None:
        """Given the first call fails, when searching, then the next variant is tried and the failure is reported."""
        api = _search_api(
            {
                "読売ランド前": TransientFailure.from_reason("Request timed out"),
                "読売ランド前駅": Found([_record("読売ランド前")]),
            }
        )
        client = StationSearchClient(api)

        report = await client.search_report("読売ランド")

        assert report.found is True
        assert report.degraded is True
        assert report.matched_term == "読売ランド前駅"
        assert report.failures[0].reason == "Request timed out"

    @pytest.mark.asyncio
    async def test_all_remote_failures_yield_empty_result(self) -> None:
        """Given every call fails, when searching, then [] is returned rather than an error."""
        api = MagicMock()
        api.search_by_name = AsyncMock(return_value=TransientFailure.from_reason("down", 503))
        client = StationSearchClient(api, alias_table=AliasTable({}))

        report = await client.search_report("渋谷")

        assert report.records == ()
        assert len(report.failures) == 3
        assert all(f.status_code == 503 for f in report.failures)

    @pytest.mark.asyncio
    async def test_empty_found_is_treated_as_no_match(self) -> None:
        """Given Found with an empty list, when searching, then the next variant is tried."""
        api = _search_api({"渋谷": Found([]), "渋谷前": Found([_record("渋谷前")])})
        client = StationSearchClient(api, alias_table=AliasTable({}))

        report = await client.search_report("渋谷")

        assert report.matched_term == "渋谷前"

    @pytest.mark.asyncio
    async def test_blank_query_makes_no_remote_calls(self) -> None:
        """Given a blank query, when searching, then [] is returned without remote calls."""
        api = _search_api({})
        client = StationSearchClient(api)

        records = await client.search("   ")

        assert records == []
        api.search_by_name.assert_not_awaited()


class TestNearbyStations:
    """Tests for nearby_stations."""

    @pytest.mark.asyncio
    async def test_returns_records_within_radius(self) -> None:
        """Given records with distances, when searching nearby, then those beyond the radius are dropped."""
        api = _search_api({})
        api.search_nearby = AsyncMock(
            return_value=Found(
                [
                    _record("東京", "JR山手線", "320m"),
                    _record("有楽町", "JR山手線", "1.2km"),
                    _record("新橋", "JR山手線", "2500m"),
                    _record("大手町", "東京メトロ丸ノ内線"),
                ]
            )
        )
        client = StationSearchClient(api)

        records = await client.nearby_stations(139.7671, 35.6812)

        assert [r.name for r in records] == ["東京", "有楽町", "大手町"]
        api.search_nearby.assert_awaited_once_with(139.7671, 35.6812)

    @pytest.mark.asyncio
    async def test_custom_radius(self) -> None:
        """Given a 500m radius, when searching nearby, then only closer stations remain."""
        api = _search_api({})
        api.search_nearby = AsyncMock(
            return_value=Found([_record("東京", distance="320m"), _record("有楽町", distance="800m")])
        )
        client = StationSearchClient(api)

        records = await client.nearby_stations(139.7671, 35.6812, radius_meters=500)

        assert [r.name for r in records] == ["東京"]

    @pytest.mark.asyncio
    async def test_failure_returns_empty_list(self) -> None:
        """Given the remote fails, when searching nearby, then [] is returned."""
        api = _search_api({})
        api.search_nearby = AsyncMock(return_value=TransientFailure.from_reason("down"))
        client = StationSearchClient(api)

        assert await client.nearby_stations(139.7671, 35.6812) == []


@pytest.mark.parametrize(
    ("distance", "expected"),
    [("320m", 320.0), ("1.2km", 1200.0), ("45", 45.0), (None, None), ("far", None)],
)
def test_parse_distance_meters(distance: str | None, expected: float | None) -> None:
    """Given a reported distance, when parsing, then meters are returned or None if unparseable."""
    assert _parse_distance_meters(distance) == expected
