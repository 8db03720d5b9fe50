"""Composition root: wires adapters into the resolution services."""

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from station_id_resolver.adapters.cache import InMemoryResolutionCache
from station_id_resolver.adapters.config import AppConfig
from station_id_resolver.adapters.heartrails_api import HeartRailsStationApi
from station_id_resolver.adapters.odpt_api import OdptStationCatalog
from station_id_resolver.adapters.romanization import TableRomanizer
from station_id_resolver.application import (
    CatalogReconciler,
    IdentifierSynthesizer,
    StationResolver,
    StationSearchClient,
)
from station_id_resolver.domain.models import AliasTable, RailwayCatalog

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass(frozen=True)
class ResolverComponents:
    """The wired services, exposed individually for the CLI."""

    railway_catalog: RailwayCatalog
    search_client: StationSearchClient
    synthesizer: IdentifierSynthesizer
    reconciler: CatalogReconciler
    resolver: StationResolver


def build_components(config: AppConfig, session: "ClientSession | None") -> ResolverComponents:
    """Build every service from configuration and a shared aiohttp session."""
    railway_catalog = RailwayCatalog.default()

    search_api = HeartRailsStationApi(
        session=session,
        base_url=config.heartrails_base_url,
        request_timeout=config.heartrails_request_timeout,
        resource_timeout=config.heartrails_resource_timeout,
    )
    search_client = StationSearchClient(search_api, alias_table=AliasTable.default())

    if not config.odpt_consumer_key:
        logger.info("ODPT_CONSUMER_KEY not set, station identifiers will be synthesized locally")
    station_catalog = OdptStationCatalog(
        session=session,
        consumer_key=config.odpt_consumer_key,
        base_url=config.odpt_base_url,
        request_timeout=config.odpt_request_timeout,
        resource_timeout=config.odpt_resource_timeout,
    )

    synthesizer = IdentifierSynthesizer(railway_catalog, TableRomanizer())
    reconciler = CatalogReconciler(
        railway_catalog,
        station_catalog,
        synthesizer,
        timeout_seconds=config.odpt_resource_timeout,
    )
    resolver = StationResolver(
        search_client, reconciler, railway_catalog, InMemoryResolutionCache()
    )
    return ResolverComponents(
        railway_catalog=railway_catalog,
        search_client=search_client,
        synthesizer=synthesizer,
        reconciler=reconciler,
        resolver=resolver,
    )
