"""HeartRails Express station search adapter."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from station_id_resolver.adapters.api_request_logger import log_api_request
from station_id_resolver.adapters.heartrails_api.constants import (
    DEFAULT_HEADERS,
    GET_STATIONS_METHOD,
    STATION_PATH,
)
from station_id_resolver.adapters.heartrails_api.payload import (
    HeartRailsResponse,
    HeartRailsStation,
)
from station_id_resolver.adapters.http_response import ensure_success
from station_id_resolver.domain.errors import RemoteUnavailableError
from station_id_resolver.domain.models import (
    Found,
    NotFound,
    Outcome,
    StationRecord,
    TransientFailure,
)
from station_id_resolver.domain.ports.station_search_api import StationSearchApi

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_BASE_URL = "http://express.heartrails.com/api/json"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 5.0
DEFAULT_RESOURCE_TIMEOUT_SECONDS = 10.0


def _parse_stations(entries: list[dict[str, Any]]) -> list[StationRecord]:
    """Convert station entries, skipping malformed ones.

    Raises:
        RemoteUnavailableError: If there were entries but none of them was valid.
    """
    records = []
    for entry in entries:
        try:
            records.append(HeartRailsStation.model_validate(entry).to_station_record())
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed HeartRails station {entry.get('name')!r}: "
                f"{e.error_count()} error(s)"
            )
    if entries and not records:
        raise RemoteUnavailableError(
            f"Malformed station payload: all {len(entries)} station(s) invalid"
        )
    return records


class HeartRailsStationApi(StationSearchApi):
    """Adapter performing single station searches against HeartRails Express."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        resource_timeout: float = DEFAULT_RESOURCE_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with optional aiohttp session and timeouts.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the JSON API.
            request_timeout: Connect and read timeout in seconds.
            resource_timeout: Total time allowed for one request in seconds.
        """
        self._session = session
        self._url = f"{base_url.rstrip('/')}{STATION_PATH}"
        self._timeout = aiohttp.ClientTimeout(
            total=resource_timeout,
            sock_connect=request_timeout,
            sock_read=request_timeout,
        )

    async def search_by_name(self, name: str) -> Outcome[list[StationRecord]]:
        """Search stations by name.

        Args:
            name: Station name as typed (already aliased/normalized by the caller).

        Returns:
            Found with the records, NotFound, or TransientFailure.
        """
        if not name:
            return NotFound()
        return await self._get_stations({"method": GET_STATIONS_METHOD, "name": name})

    async def search_nearby(
        self, longitude: float, latitude: float
    ) -> Outcome[list[StationRecord]]:
        """Search stations near a coordinate.

        Args:
            longitude: Longitude (x).
            latitude: Latitude (y).

        Returns:
            Found with the records, NotFound, or TransientFailure.
        """
        params = {"method": GET_STATIONS_METHOD, "x": str(longitude), "y": str(latitude)}
        return await self._get_stations(params)

    async def _get_stations(self, params: dict[str, str]) -> Outcome[list[StationRecord]]:
        """Run one request, converting every failure into a TransientFailure."""
        if not self._session:
            return TransientFailure.from_reason("No HTTP session configured")

        log_api_request("GET", self._url, params=params, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(
                self._url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                records = await self._handle_response(response)
        except RemoteUnavailableError as e:
            logger.warning(f"HeartRails search {params} failed: {e}")
            return TransientFailure.from_reason(e.reason, e.status_code)
        except TimeoutError:
            logger.warning(f"HeartRails search {params} timed out")
            return TransientFailure.from_reason("Request timed out")
        except aiohttp.ClientError as e:
            logger.warning(f"Error searching HeartRails stations {params}: {e}")
            return TransientFailure.from_reason(f"Transport error: {e}")

        logger.debug(f"HeartRails search {params} returned {len(records)} station(s)")
        return Found(records) if records else NotFound()

    async def _handle_response(self, response: "ClientResponse") -> list[StationRecord]:
        """Parse a response body into station records.

        Raises:
            RemoteUnavailableError: On non-2xx status or malformed payload.
        """
        await ensure_success(response)

        try:
            data: Any = await response.json(content_type=None)
        except ValueError as e:
            raise RemoteUnavailableError(f"Response is not JSON: {e}") from e

        try:
            payload = HeartRailsResponse.model_validate(data)
        except ValidationError as e:
            raise RemoteUnavailableError(f"Malformed station payload: {e.error_count()} error(s)") from e

        if payload.response.error:
            logger.debug(f"HeartRails reported: {payload.response.error}")
        return _parse_stations(payload.response.station or [])
