"""ODPT station catalog adapter."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from station_id_resolver.adapters.api_request_logger import log_api_request
from station_id_resolver.adapters.http_response import ensure_success
from station_id_resolver.adapters.odpt_api.constants import (
    CONSUMER_KEY_PARAM,
    DEFAULT_HEADERS,
    RAILWAY_PARAM,
    SAME_AS_FIELD,
    STATION_RESOURCE,
    TITLE_FIELD,
    TITLE_PARAM,
)
from station_id_resolver.domain.errors import RemoteUnavailableError
from station_id_resolver.domain.models import Found, NotFound, Outcome, TransientFailure
from station_id_resolver.domain.ports.station_catalog import StationCatalog

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_BASE_URL = "https://api.odpt.org/api/v4"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 5.0
DEFAULT_RESOURCE_TIMEOUT_SECONDS = 10.0


class OdptStationCatalog(StationCatalog):
    """Adapter looking up authoritative station identifiers in the ODPT catalog."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        consumer_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        resource_timeout: float = DEFAULT_RESOURCE_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with optional aiohttp session, consumer key and timeouts.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            consumer_key: ODPT consumer key. Lookups are skipped without it.
            base_url: Base URL of the ODPT API.
            request_timeout: Connect and read timeout in seconds.
            resource_timeout: Total time allowed for one request in seconds.
        """
        self._session = session
        self._consumer_key = consumer_key
        self._url = f"{base_url.rstrip('/')}{STATION_RESOURCE}"
        self._timeout = aiohttp.ClientTimeout(
            total=resource_timeout,
            sock_connect=request_timeout,
            sock_read=request_timeout,
        )

    async def find_station_on_railway(self, station_name: str, railway_id: str) -> str | None:
        """Return the identifier of station_name on railway_id, or None.

        Any failure, no match, or more than one match yields None.
        """
        outcome = await self.lookup_station_on_railway(station_name, railway_id)
        if isinstance(outcome, Found):
            return outcome.value
        return None

    async def lookup_station_on_railway(self, station_name: str, railway_id: str) -> Outcome[str]:
        """Look up station_name on railway_id and report the structured outcome.

        Returns:
            Found with the identifier when exactly one station matches,
            NotFound for zero or several matches, TransientFailure otherwise.
        """
        if not self._session:
            return TransientFailure.from_reason("No HTTP session configured")
        if not self._consumer_key:
            return TransientFailure.from_reason("No ODPT consumer key configured")

        params = {
            RAILWAY_PARAM: railway_id,
            TITLE_PARAM: station_name,
            CONSUMER_KEY_PARAM: self._consumer_key,
        }
        log_api_request("GET", self._url, params=params, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(
                self._url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                stations = await self._handle_response(response)
        except RemoteUnavailableError as e:
            logger.warning(f"ODPT lookup of '{station_name}' on {railway_id} failed: {e}")
            return TransientFailure.from_reason(e.reason, e.status_code)
        except TimeoutError:
            logger.warning(f"ODPT lookup of '{station_name}' on {railway_id} timed out")
            return TransientFailure.from_reason("Request timed out")
        except aiohttp.ClientError as e:
            logger.warning(f"Error looking up ODPT station '{station_name}': {e}")
            return TransientFailure.from_reason(f"Transport error: {e}")

        return self._select_match(stations, station_name, railway_id)

    async def _handle_response(self, response: "ClientResponse") -> list[dict[str, Any]]:
        """Parse a response body into station objects.

        Raises:
            RemoteUnavailableError: On non-2xx status or malformed payload.
        """
        await ensure_success(response)

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise RemoteUnavailableError(f"Response is not JSON: {e}") from e

        if not isinstance(data, list):
            raise RemoteUnavailableError("Station payload is not a list")
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _select_match(
        stations: list[dict[str, Any]], station_name: str, railway_id: str
    ) -> Outcome[str]:
        """Pick the single station identifier matching station_name."""
        identifiers = {
            str(station[SAME_AS_FIELD])
            for station in stations
            if station.get(SAME_AS_FIELD) and station.get(TITLE_FIELD, station_name) == station_name
        }
        if len(identifiers) == 1:
            return Found(identifiers.pop())
        if identifiers:
            logger.info(
                f"ODPT returned {len(identifiers)} stations named '{station_name}' "
                f"on {railway_id}, treating as no match"
            )
        return NotFound()
