"""Visit recorder adapter."""

import logging
from datetime import UTC, datetime

from station_conquest.adapters.izakaya_api.constants import MARK_VISITED_PATH
from station_conquest.adapters.izakaya_api.http_client import IzakayaHttpClient
from station_conquest.domain.errors import TransportError
from station_conquest.domain.ports.visit_recorder import VisitRecorder

logger = logging.getLogger(__name__)


def format_visited_at(visited_at: datetime) -> str:
    """Format a timestamp as ISO-8601 in UTC with millisecond precision and a Z suffix."""
    if visited_at.tzinfo is None:
        visited_at = visited_at.replace(tzinfo=UTC)
    return visited_at.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IzakayaVisitRecorder(VisitRecorder):
    """Posts visit events to the izakaya service."""

    def __init__(self, client: IzakayaHttpClient) -> None:
        """Initialize with the shared HTTP client."""
        self._client = client

    async def record_visit(
        self, user_id: str, venue_id: str, rating: int, visited_at: datetime
    ) -> bool:
        """Record a visit; transport failures are logged and reported as False."""
        payload = {
            "user_id": user_id,
            "restaurant_id": venue_id,
            "rating": rating,
            "visited_at": format_visited_at(visited_at),
        }
        try:
            await self._client.post_json(MARK_VISITED_PATH, payload)
        except TransportError as e:
            logger.error(f"Failed to record visit to {venue_id}: {e} ({e.details.reason})")
            return False
        return True
