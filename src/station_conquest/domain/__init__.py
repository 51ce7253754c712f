"""Domain layer - core models, ports and errors."""

from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import (
    Coordinate,
    PendingVisit,
    Station,
    Venue,
)
from station_conquest.domain.ports import (
    StationCatalog,
    VenueRepository,
    VisitedRepository,
    VisitRecorder,
)

__all__ = [
    "Coordinate",
    "PendingVisit",
    "Station",
    "StationCatalog",
    "TransportError",
    "Venue",
    "VenueRepository",
    "VisitRecorder",
    "VisitedRepository",
]
