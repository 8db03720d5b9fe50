"""Station catalog port."""

from typing import Protocol


class StationCatalog(Protocol):
    """Port for the authoritative transit catalog."""

    async def find_station_on_railway(self, station_name: str, railway_id: str) -> str | None:
        """Return the catalog identifier of station_name on railway_id.

        Returns None when the station is not found, is ambiguous, or the catalog
        could not be consulted. Never raises for transport or parsing errors.
        """
        ...
