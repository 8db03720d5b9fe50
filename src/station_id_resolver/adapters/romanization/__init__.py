"""Romanization adapters."""

from station_id_resolver.adapters.romanization.table_romanizer import TableRomanizer

__all__ = ["TableRomanizer"]
