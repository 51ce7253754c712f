"""Izakaya venue repository adapter."""

import logging

from station_conquest.adapters.izakaya_api.constants import VENUES_PATH
from station_conquest.adapters.izakaya_api.http_client import IzakayaHttpClient
from station_conquest.adapters.izakaya_api.venue_parser import parse_venues
from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import Coordinate, ErrorDetails, Venue
from station_conquest.domain.ports.venue_repository import VenueRepository

logger = logging.getLogger(__name__)


class IzakayaVenueRepository(VenueRepository):
    """Fetches izakayas near a coordinate."""

    def __init__(self, client: IzakayaHttpClient) -> None:
        """Initialize with the shared HTTP client."""
        self._client = client

    async def fetch_near(self, coordinate: Coordinate) -> list[Venue]:
        """Fetch venues near a coordinate."""
        params = {"latitude": coordinate.lat, "longitude": coordinate.lng}
        data = await self._client.get_json(VENUES_PATH, params=params)
        try:
            venues = parse_venues(data)
        except ValueError as e:
            raise TransportError(
                f"Unexpected venue payload: {e}", ErrorDetails(reason="Malformed response")
            ) from e
        logger.debug(f"Fetched {len(venues)} venues near ({coordinate.lat}, {coordinate.lng})")
        return venues
