"""Configuration adapters."""

from station_id_resolver.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
