"""In-memory resolution cache implementation."""

from __future__ import annotations

import logging

from station_id_resolver.domain.contracts.resolution_cache import ResolutionCacheProtocol

logger = logging.getLogger(__name__)


class InMemoryResolutionCache(ResolutionCacheProtocol):
    """Unbounded in-memory cache of resolved station identifiers.

    Entries live for the process lifetime unless clear() is called.
    """

    def __init__(self) -> None:
        """Initialize the cache."""
        self._cache: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        """Get a cached identifier.

        Args:
            key: Composite "<station name>:<line name>" key.

        Returns:
            The cached identifier, or None if not cached.
        """
        return self._cache.get(key)

    def put(self, key: str, value: str) -> None:
        """Cache an identifier. Last write wins.

        Args:
            key: Composite "<station name>:<line name>" key.
            value: The canonical station identifier.
        """
        self._cache[key] = value

    def clear(self) -> None:
        """Drop every cached identifier."""
        if self._cache:
            logger.debug(f"Clearing {len(self._cache)} cached station identifier(s)")
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
