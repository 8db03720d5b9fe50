"""Search report domain model."""

from dataclasses import dataclass, field

from station_id_resolver.domain.models.error_details import ErrorDetails
from station_id_resolver.domain.models.station_record import StationRecord


@dataclass(frozen=True)
class StationSearchReport:
    """Trail of a fallback search: which terms were tried and what happened."""

    query: str
    attempted_terms: tuple[str, ...] = ()
    matched_term: str | None = None
    records: tuple[StationRecord, ...] = ()
    failures: tuple[ErrorDetails, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """True when one of the attempted terms produced records."""
        return bool(self.records)

    @property
    def degraded(self) -> bool:
        """True when at least one remote call failed during the search."""
        return bool(self.failures)
