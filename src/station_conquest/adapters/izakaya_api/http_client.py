"""HTTP client for the izakaya check-in service."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from station_conquest.adapters.api_request_logger import log_api_request
from station_conquest.adapters.izakaya_api.constants import STATUS_REASONS
from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import ErrorDetails

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


def error_details_for_status(status_code: int | None) -> ErrorDetails:
    """Build error details for an HTTP status code (None for network errors)."""
    if status_code is None:
        return ErrorDetails(status_code=None, reason="Network error")
    reason = STATUS_REASONS.get(status_code, f"HTTP {status_code}")
    return ErrorDetails(status_code=status_code, reason=reason)


class IzakayaHttpClient:
    """Thin JSON client; every failure surfaces as TransportError."""

    def __init__(
        self, session: "ClientSession | None", base_url: str, timeout_seconds: float = 10
    ) -> None:
        """Initialize with an aiohttp session and the service base URL."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _require_session(self) -> "ClientSession":
        if self._session is None:
            raise TransportError(
                "Izakaya API requires an aiohttp session",
                ErrorDetails(reason="No HTTP session"),
            )
        return self._session

    async def _read_json(self, response: "ClientResponse", url: str) -> Any:
        if response.status not in (200, 201):
            response_text = await response.text()
            details = error_details_for_status(response.status)
            raise TransportError(
                f"Izakaya API returned status {response.status} for {url}: {response_text[:200]}",
                details,
            )
        if response.content_length == 0:
            return None
        return await response.json(content_type=None)

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a JSON document from the service."""
        session = self._require_session()
        url = self.url_for(path)
        log_api_request("GET", url, params=params)
        try:
            async with session.get(url, params=params, timeout=self._timeout) as response:
                return await self._read_json(response, url)
        except TransportError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(f"GET {url} failed: {e}", error_details_for_status(None)) from e

    async def post_json(self, path: str, payload: dict[str, Any]) -> Any:
        """POST a JSON body to the service and return the decoded answer, if any."""
        session = self._require_session()
        url = self.url_for(path)
        log_api_request("POST", url, payload=payload)
        try:
            async with session.post(url, json=payload, timeout=self._timeout) as response:
                return await self._read_json(response, url)
        except TransportError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(f"POST {url} failed: {e}", error_details_for_status(None)) from e
