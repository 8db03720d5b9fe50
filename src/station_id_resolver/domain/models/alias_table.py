"""Alias table domain model."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from station_id_resolver.domain.reference_data import STATION_ALIASES


class AliasTable:
    """Immutable mapping from colloquial station names to canonical search terms."""

    def __init__(self, aliases: Mapping[str, str]) -> None:
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases))

    @classmethod
    def default(cls) -> "AliasTable":
        """Build the table from the compiled-in alias data."""
        return cls(STATION_ALIASES)

    def resolve_alias(self, raw: str) -> str:
        """Return the canonical search term for raw, or raw itself when not aliased."""
        return self._aliases.get(raw, raw)

    def entries(self) -> Iterator[tuple[str, str]]:
        """Iterate over (alias, canonical name) pairs."""
        return iter(self._aliases.items())

    def __contains__(self, raw: object) -> bool:
        return raw in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)
