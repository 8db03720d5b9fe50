"""Protocol for resolution caching."""

from typing import Protocol


class ResolutionCacheProtocol(Protocol):
    """Protocol for caching resolved station identifiers by station and line."""

    def get(self, key: str) -> str | None:
        """Get a cached identifier.

        Args:
            key: Composite key of the form "<station name>:<line name>".

        Returns:
            The cached identifier, or None if not cached.
        """
        ...

    def put(self, key: str, value: str) -> None:
        """Cache an identifier.

        Args:
            key: Composite key of the form "<station name>:<line name>".
            value: The canonical station identifier.
        """
        ...

    def clear(self) -> None:
        """Drop every cached identifier."""
        ...
