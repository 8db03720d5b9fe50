"""End-to-end resolution of free text into canonical station identifiers."""

import asyncio
import logging
from typing import TYPE_CHECKING

from station_id_resolver.application.catalog_reconciler import CatalogReconciler
from station_id_resolver.application.station_search_client import StationSearchClient
from station_id_resolver.domain.errors import StationResolutionError
from station_id_resolver.domain.models import (
    RailwayCatalog,
    ResolutionSource,
    ResolvedStation,
    StationRecord,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_id_resolver.domain.contracts.resolution_cache import ResolutionCacheProtocol


def cache_key(station_name: str, line_name: str) -> str:
    """Composite cache key for a station on a line."""
    return f"{station_name}:{line_name}"


class StationResolver:
    """Runs search, reconciliation and memoization for station names.

    Concurrent resolutions of the same key may both miss the cache and both
    write; they write the same value, so no locking is needed.
    """

    def __init__(
        self,
        search_client: StationSearchClient,
        reconciler: CatalogReconciler,
        railway_catalog: RailwayCatalog,
        cache: "ResolutionCacheProtocol",
    ) -> None:
        self._search_client = search_client
        self._reconciler = reconciler
        self._railway_catalog = railway_catalog
        self._cache = cache

    async def resolve(self, station_name: str, line_name: str) -> str | None:
        """Resolve the identifier of station_name on line_name, using the cache.

        Raises:
            UnknownRailwayError: If line_name is not in the railway catalog.
        """
        station_id, _ = await self._resolve_with_source(station_name, line_name)
        return station_id

    async def resolve_query(self, raw_text: str) -> list[ResolvedStation]:
        """Search raw_text and resolve every matching (station, line) record.

        Records are resolved concurrently. Records on unmapped lines are
        returned unresolved, with the reason in ResolvedStation.error.
        """
        records = await self._search_client.search(raw_text)
        if not records:
            return []
        return list(await asyncio.gather(*(self._resolve_record(record) for record in records)))

    def clear_cache(self) -> None:
        """Drop all memoized identifiers."""
        self._cache.clear()

    async def _resolve_record(self, record: StationRecord) -> ResolvedStation:
        railway_id = self._railway_catalog.lookup(record.line_name)
        try:
            station_id, source = await self._resolve_with_source(record.name, record.line_name)
        except StationResolutionError as e:
            logger.info(f"Could not resolve '{record.name}' on '{record.line_name}': {e}")
            return ResolvedStation(
                record=record,
                station_id=None,
                source=ResolutionSource.UNRESOLVED,
                railway_id=railway_id,
                error=str(e),
            )
        return ResolvedStation(
            record=record, station_id=station_id, source=source, railway_id=railway_id
        )

    async def _resolve_with_source(
        self, station_name: str, line_name: str
    ) -> tuple[str | None, ResolutionSource]:
        key = cache_key(station_name, line_name)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, ResolutionSource.CACHE

        station_id, source = await self._reconciler.reconcile(station_name, line_name)
        if station_id is not None:
            self._cache.put(key, station_id)
        return station_id, source
