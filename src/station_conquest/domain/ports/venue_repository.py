"""Venue repository port."""

from typing import Protocol

from station_conquest.domain.models.coordinate import Coordinate
from station_conquest.domain.models.venue import Venue


class VenueRepository(Protocol):
    """Port for retrieving venues near a coordinate."""

    async def fetch_near(self, coordinate: Coordinate) -> list[Venue]:
        """Fetch venues near a coordinate, in the order the service returns them.

        Raises TransportError when the service cannot be reached.
        """
        ...
