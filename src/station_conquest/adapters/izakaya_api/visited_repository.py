"""Visited venues repository adapter."""

import logging
from typing import Any
from urllib.parse import quote

from station_conquest.adapters.izakaya_api.constants import VISITED_PATH_TEMPLATE
from station_conquest.adapters.izakaya_api.http_client import IzakayaHttpClient
from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import ErrorDetails
from station_conquest.domain.ports.visited_repository import VisitedRepository

logger = logging.getLogger(__name__)


def parse_visited_ids(data: Any) -> frozenset[str]:
    """Map [{"restaurant_id": ...}, ...] to a set of venue ids."""
    if data is None:
        return frozenset()
    if not isinstance(data, list):
        raise ValueError(f"expected a list of visits, got {type(data).__name__}")
    ids = set()
    for item in data:
        if isinstance(item, dict) and item.get("restaurant_id") not in (None, ""):
            ids.add(str(item["restaurant_id"]))
    return frozenset(ids)


class IzakayaVisitedRepository(VisitedRepository):
    """Fetches the venue ids a user has already visited."""

    def __init__(self, client: IzakayaHttpClient) -> None:
        """Initialize with the shared HTTP client."""
        self._client = client

    async def fetch_visited(self, user_id: str | None) -> frozenset[str]:
        """Fetch visited venue ids; anonymous sessions short-circuit to an empty set."""
        if not user_id:
            return frozenset()
        path = VISITED_PATH_TEMPLATE.format(user_id=quote(user_id, safe=""))
        data = await self._client.get_json(path)
        try:
            visited = parse_visited_ids(data)
        except ValueError as e:
            raise TransportError(
                f"Unexpected visited payload: {e}", ErrorDetails(reason="Malformed response")
            ) from e
        logger.debug(f"User {user_id} has visited {len(visited)} venue(s)")
        return visited
