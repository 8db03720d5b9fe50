"""HeartRails Express adapters for station search."""

from station_id_resolver.adapters.heartrails_api.heartrails_station_api import (
    HeartRailsStationApi,
)

__all__ = ["HeartRailsStationApi"]
