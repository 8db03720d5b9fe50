"""Station record domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationRecord:
    """A station on one line, as reported by the station search service.

    One record exists per (station, line) combination, so a station served by
    three lines appears three times.
    """

    name: str
    region: str
    line_name: str
    longitude: float
    latitude: float
    postal_code: str | None = None
    address: str | None = None
    prev_station_name: str | None = None
    next_station_name: str | None = None
    distance_meters: str | None = None  # As reported, e.g. "320m"

