"""Domain models for station conquest."""

from station_conquest.domain.models.coordinate import Coordinate
from station_conquest.domain.models.error_details import ErrorDetails
from station_conquest.domain.models.fetch_epoch import FetchEpoch
from station_conquest.domain.models.pending_visit import (
    DEFAULT_RATING,
    RATING_CHOICES,
    PendingVisit,
    is_valid_rating,
)
from station_conquest.domain.models.session_identity import SessionIdentity
from station_conquest.domain.models.station import Station
from station_conquest.domain.models.venue import Venue
from station_conquest.domain.models.view_snapshot import ViewSnapshot

__all__ = [
    "DEFAULT_RATING",
    "RATING_CHOICES",
    "Coordinate",
    "ErrorDetails",
    "FetchEpoch",
    "PendingVisit",
    "SessionIdentity",
    "Station",
    "Venue",
    "ViewSnapshot",
    "is_valid_rating",
]
