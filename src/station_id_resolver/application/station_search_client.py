"""Fallback station search against the station search service."""

import logging
from typing import TYPE_CHECKING

from station_id_resolver.application.name_normalizer import NameNormalizer
from station_id_resolver.domain.models import (
    AliasTable,
    ErrorDetails,
    Found,
    StationRecord,
    StationSearchReport,
    TransientFailure,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_id_resolver.domain.ports import StationSearchApi

DEFAULT_NEARBY_RADIUS_METERS = 2_000


def _parse_distance_meters(distance: str | None) -> float | None:
    """Parse a reported distance such as "320m" or "1.2km"."""
    if not distance:
        return None
    value = distance.strip().lower()
    try:
        if value.endswith("km"):
            return float(value[:-2]) * 1_000
        if value.endswith("m"):
            return float(value[:-1])
        return float(value)
    except ValueError:
        return None


class StationSearchClient:
    """Searches stations by free text, widening the query until something matches."""

    def __init__(
        self,
        search_api: "StationSearchApi",
        alias_table: AliasTable | None = None,
        normalizer: NameNormalizer | None = None,
    ) -> None:
        """Initialize with the remote search port and the static lookup tables.

        Args:
            search_api: Port performing single remote searches.
            alias_table: Colloquial name table. Defaults to the compiled-in table.
            normalizer: Variant generator. Defaults to NameNormalizer().
        """
        self._search_api = search_api
        self._alias_table = alias_table if alias_table is not None else AliasTable.default()
        self._normalizer = normalizer or NameNormalizer()

    async def search(self, raw_name: str) -> list[StationRecord]:
        """Search stations for raw_name.

        Returns an empty list when nothing matches or every remote call failed.
        """
        report = await self.search_report(raw_name)
        return list(report.records)

    async def search_report(self, raw_name: str) -> StationSearchReport:
        """Run the fallback search and return its full trail.

        Variants are tried one after the other; the first variant with a
        non-empty result wins. A failed remote call counts as zero results
        for that variant and the chain continues.
        """
        query = raw_name.strip()
        aliased = self._alias_table.resolve_alias(query)
        if aliased != query:
            logger.debug(f"Resolved alias '{query}' -> '{aliased}'")

        variants = self._normalizer.variants(aliased)
        attempted: list[str] = []
        failures: list[ErrorDetails] = []

        for term in variants:
            attempted.append(term)
            outcome = await self._search_api.search_by_name(term)
            if isinstance(outcome, Found) and outcome.value:
                if term != aliased:
                    logger.info(f"Station search for '{query}' matched variant '{term}'")
                return StationSearchReport(
                    query=query,
                    attempted_terms=tuple(attempted),
                    matched_term=term,
                    records=tuple(outcome.value),
                    failures=tuple(failures),
                )
            if isinstance(outcome, TransientFailure):
                failures.append(outcome.details)

        if variants:
            logger.info(f"No stations found for '{query}' after {len(attempted)} attempt(s)")
        return StationSearchReport(
            query=query,
            attempted_terms=tuple(attempted),
            failures=tuple(failures),
        )

    async def nearby_stations(
        self,
        longitude: float,
        latitude: float,
        radius_meters: float = DEFAULT_NEARBY_RADIUS_METERS,
    ) -> list[StationRecord]:
        """Find stations near the given coordinates.

        A single remote call without fallback; failures yield an empty list.
        Records reporting a distance larger than radius_meters are dropped.
        """
        outcome = await self._search_api.search_nearby(longitude, latitude)
        if not isinstance(outcome, Found):
            return []

        records = []
        for record in outcome.value:
            distance = _parse_distance_meters(record.distance_meters)
            if distance is not None and distance > radius_meters:
                continue
            records.append(record)
        return records
