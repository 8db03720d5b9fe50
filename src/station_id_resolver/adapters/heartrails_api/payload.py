"""Wire format of HeartRails Express station responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from station_id_resolver.domain.models.station_record import StationRecord


class HeartRailsStation(BaseModel):
    """One station/line entry. Coordinates may arrive as numbers or numeric strings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    prefecture: str
    line: str
    x: float  # longitude
    y: float  # latitude
    postal: str | None = None
    address: str | None = None
    prev: str | None = None
    next: str | None = None
    distance: str | None = None

    def to_station_record(self) -> StationRecord:
        """Convert to the domain record."""
        return StationRecord(
            name=self.name,
            region=self.prefecture,
            line_name=self.line,
            longitude=self.x,
            latitude=self.y,
            postal_code=self.postal,
            address=self.address,
            prev_station_name=self.prev,
            next_station_name=self.next,
            distance_meters=self.distance,
        )


class HeartRailsResult(BaseModel):
    """The "response" object. A missing station list means no match.

    Entries are kept raw so that one malformed station does not discard the others.
    """

    model_config = ConfigDict(extra="ignore")

    station: list[dict[str, Any]] | None = None
    error: str | None = None


class HeartRailsResponse(BaseModel):
    """Top-level response envelope."""

    model_config = ConfigDict(extra="ignore")

    response: HeartRailsResult
