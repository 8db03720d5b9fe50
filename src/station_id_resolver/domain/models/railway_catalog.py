"""Railway catalog domain model."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from station_id_resolver.domain.reference_data import RAILWAY_MAPPING


@dataclass(frozen=True)
class RailwayMappingEntry:
    """One curated line name -> railway identifier pair."""

    source_line_name: str
    canonical_railway_id: str


class RailwayCatalog:
    """Immutable lookup from station search line names to ODPT railway identifiers."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping: Mapping[str, str] = MappingProxyType(dict(mapping))

    @classmethod
    def default(cls) -> "RailwayCatalog":
        """Build the catalog from the compiled-in railway data."""
        return cls(RAILWAY_MAPPING)

    @classmethod
    def from_entries(cls, entries: list[RailwayMappingEntry]) -> "RailwayCatalog":
        """Build a catalog from entries, rejecting duplicate line names."""
        mapping: dict[str, str] = {}
        for entry in entries:
            if entry.source_line_name in mapping:
                raise ValueError(f"Duplicate railway mapping for {entry.source_line_name!r}")
            mapping[entry.source_line_name] = entry.canonical_railway_id
        return cls(mapping)

    def lookup(self, line_name: str) -> str | None:
        """Return the railway identifier for line_name, or None when the line is unmapped."""
        return self._mapping.get(line_name)

    def entries(self) -> Iterator[RailwayMappingEntry]:
        """Iterate over all curated entries."""
        for line_name, railway_id in self._mapping.items():
            yield RailwayMappingEntry(source_line_name=line_name, canonical_railway_id=railway_id)

    def __contains__(self, line_name: object) -> bool:
        return line_name in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
