"""Cache adapters."""

from station_id_resolver.adapters.cache.in_memory_resolution_cache import InMemoryResolutionCache

__all__ = ["InMemoryResolutionCache"]
