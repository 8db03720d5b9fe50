"""Adapters layer - external system integrations."""

from station_id_resolver.adapters.cache import InMemoryResolutionCache
from station_id_resolver.adapters.config import AppConfig
from station_id_resolver.adapters.heartrails_api import HeartRailsStationApi
from station_id_resolver.adapters.odpt_api import OdptStationCatalog
from station_id_resolver.adapters.romanization import TableRomanizer

__all__ = [
    "AppConfig",
    "HeartRailsStationApi",
    "InMemoryResolutionCache",
    "OdptStationCatalog",
    "TableRomanizer",
]
