"""Resolve free-text station names into canonical transit catalog identifiers."""

__version__ = "0.1.0"
