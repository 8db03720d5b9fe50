"""Application services (use cases) for station identifier resolution."""

from station_id_resolver.application.catalog_reconciler import CatalogReconciler
from station_id_resolver.application.identifier_synthesizer import IdentifierSynthesizer
from station_id_resolver.application.name_normalizer import NameNormalizer
from station_id_resolver.application.station_resolver import StationResolver
from station_id_resolver.application.station_search_client import StationSearchClient

__all__ = [
    "CatalogReconciler",
    "IdentifierSynthesizer",
    "NameNormalizer",
    "StationResolver",
    "StationSearchClient",
]
