"""Status handling shared by the HTTP adapters."""

from typing import TYPE_CHECKING

from station_id_resolver.domain.errors import RemoteUnavailableError

if TYPE_CHECKING:
    from aiohttp import ClientResponse

ERROR_BODY_PREVIEW_CHARS = 200


async def read_error_body(response: "ClientResponse") -> str:
    """Best-effort text of an error response.

    Error pages from proxies are often not UTF-8 (e.g. Shift_JIS maintenance
    pages), so undecodable bytes are replaced rather than raised.
    """
    try:
        text = await response.text(errors="replace")
    except (LookupError, ValueError) as e:
        return f"<undecodable body: {e}>"
    return text[:ERROR_BODY_PREVIEW_CHARS]


async def ensure_success(response: "ClientResponse") -> None:
    """Raise RemoteUnavailableError unless the response status is 2xx."""
    if 200 <= response.status < 300:
        return
    body = await read_error_body(response)
    raise RemoteUnavailableError(f"Unexpected response: {body}", status_code=response.status)
