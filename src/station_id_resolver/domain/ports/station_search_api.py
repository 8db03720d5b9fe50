"""Station search API port."""

from typing import Protocol

from station_id_resolver.domain.models.outcome import Outcome
from station_id_resolver.domain.models.station_record import StationRecord


class StationSearchApi(Protocol):
    """Port for the fuzzy station search service (one remote call per method)."""

    async def search_by_name(self, name: str) -> Outcome[list[StationRecord]]:
        """Search stations whose name matches name."""
        ...

    async def search_nearby(
        self, longitude: float, latitude: float
    ) -> Outcome[list[StationRecord]]:
        """Search stations close to the given coordinates."""
        ...
