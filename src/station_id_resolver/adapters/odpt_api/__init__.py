"""ODPT adapters for the authoritative transit catalog."""

from station_id_resolver.adapters.odpt_api.odpt_station_catalog import OdptStationCatalog

__all__ = ["OdptStationCatalog"]
