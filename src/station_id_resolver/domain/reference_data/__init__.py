"""Compiled-in reference data. Upgrading these tables requires a new release."""

from station_id_resolver.domain.reference_data.aliases import STATION_ALIASES
from station_id_resolver.domain.reference_data.railways import RAILWAY_MAPPING

__all__ = ["RAILWAY_MAPPING", "STATION_ALIASES"]
