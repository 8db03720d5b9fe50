"""Reconciliation of station identifiers against the authoritative catalog."""

import asyncio
import logging
from typing import TYPE_CHECKING

from station_id_resolver.application.identifier_synthesizer import IdentifierSynthesizer
from station_id_resolver.domain.errors import UnknownRailwayError
from station_id_resolver.domain.models import RailwayCatalog, ResolutionSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from station_id_resolver.domain.ports import StationCatalog

DEFAULT_CATALOG_TIMEOUT_SECONDS = 10.0


class CatalogReconciler:
    """Prefers the catalog's own identifier and falls back to local synthesis.

    The catalog is asked once, without retries, and the call is bounded by a
    timeout so a resolution never waits indefinitely on an unavailable catalog.
    """

    def __init__(
        self,
        railway_catalog: RailwayCatalog,
        station_catalog: "StationCatalog",
        synthesizer: IdentifierSynthesizer,
        timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
    ) -> None:
        self._railway_catalog = railway_catalog
        self._station_catalog = station_catalog
        self._synthesizer = synthesizer
        self._timeout_seconds = timeout_seconds

    async def resolve(self, station_name: str, line_name: str) -> str | None:
        """Resolve the identifier of station_name on line_name.

        Raises:
            UnknownRailwayError: If line_name is not in the railway catalog.
        """
        station_id, _ = await self.reconcile(station_name, line_name)
        return station_id

    async def reconcile(
        self, station_name: str, line_name: str
    ) -> tuple[str | None, ResolutionSource]:
        """Resolve an identifier and report whether the catalog or synthesis produced it.

        Raises:
            UnknownRailwayError: If line_name is not in the railway catalog.
        """
        railway_id = self._railway_catalog.lookup(line_name)
        if railway_id is None:
            raise UnknownRailwayError(line_name)

        station_id = await self._find_in_catalog(station_name, railway_id)
        if station_id:
            logger.debug(f"Catalog identifier for '{station_name}' on {railway_id}: {station_id}")
            return station_id, ResolutionSource.CATALOG

        synthesized = self._synthesizer.synthesize(station_name, line_name)
        if synthesized is None:
            return None, ResolutionSource.UNRESOLVED
        return synthesized, ResolutionSource.SYNTHESIZED

    async def _find_in_catalog(self, station_name: str, railway_id: str) -> str | None:
        """Ask the catalog once; any failure counts as no match."""
        try:
            return await asyncio.wait_for(
                self._station_catalog.find_station_on_railway(station_name, railway_id),
                timeout=self._timeout_seconds,
            )
        except TimeoutError:
            logger.warning(
                f"Catalog lookup for '{station_name}' on {railway_id} timed out "
                f"after {self._timeout_seconds}s, falling back to synthesis"
            )
        except Exception as e:
            logger.warning(
                f"Catalog lookup for '{station_name}' on {railway_id} failed: {e}, "
                "falling back to synthesis"
            )
        return None
