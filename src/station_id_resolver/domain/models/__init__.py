"""Domain models for station identifier resolution."""

from station_id_resolver.domain.models.alias_table import AliasTable
from station_id_resolver.domain.models.error_details import ErrorDetails
from station_id_resolver.domain.models.outcome import Found, NotFound, Outcome, TransientFailure
from station_id_resolver.domain.models.railway_catalog import RailwayCatalog, RailwayMappingEntry
from station_id_resolver.domain.models.resolved_station import ResolutionSource, ResolvedStation
from station_id_resolver.domain.models.search_report import StationSearchReport
from station_id_resolver.domain.models.station_record import StationRecord

__all__ = [
    "AliasTable",
    "ErrorDetails",
    "Found",
    "NotFound",
    "Outcome",
    "RailwayCatalog",
    "RailwayMappingEntry",
    "ResolutionSource",
    "ResolvedStation",
    "StationRecord",
    "StationSearchReport",
    "TransientFailure",
]
