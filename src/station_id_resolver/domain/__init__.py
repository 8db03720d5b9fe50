"""Domain layer - core business logic and models."""

from station_id_resolver.domain.errors import (
    MalformedRailwayIdError,
    RemoteUnavailableError,
    StationResolutionError,
    UnknownRailwayError,
)
from station_id_resolver.domain.models import (
    AliasTable,
    RailwayCatalog,
    ResolvedStation,
    StationRecord,
)
from station_id_resolver.domain.ports import (
    Romanizer,
    StationCatalog,
    StationSearchApi,
)

__all__ = [
    "AliasTable",
    "MalformedRailwayIdError",
    "RailwayCatalog",
    "RemoteUnavailableError",
    "ResolvedStation",
    "Romanizer",
    "StationCatalog",
    "StationRecord",
    "StationResolutionError",
    "StationSearchApi",
    "UnknownRailwayError",
]
