"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_id_resolver.domain.ports.romanizer import Romanizer
from station_id_resolver.domain.ports.station_catalog import StationCatalog
from station_id_resolver.domain.ports.station_search_api import StationSearchApi

__all__ = [
    "Romanizer",
    "StationCatalog",
    "StationSearchApi",
]
