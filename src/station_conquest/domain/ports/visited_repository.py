"""Visited venues repository port."""

from typing import Protocol


class VisitedRepository(Protocol):
    """Port for retrieving the ids of venues a user has already visited."""

    async def fetch_visited(self, user_id: str | None) -> frozenset[str]:
        """Fetch visited venue ids for a user.

        Anonymous users (user_id is None) get an empty set without a request.
        Raises TransportError when the service cannot be reached.
        """
        ...
