"""Resolved station domain model."""

from dataclasses import dataclass
from enum import Enum

from station_id_resolver.domain.models.station_record import StationRecord


class ResolutionSource(str, Enum):
    """Where a canonical station identifier came from."""

    CATALOG = "catalog"
    SYNTHESIZED = "synthesized"
    CACHE = "cache"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolvedStation:
    """A search record paired with its canonical identifier, if any."""

    record: StationRecord
    station_id: str | None
    source: ResolutionSource
    railway_id: str | None = None
    error: str | None = None
