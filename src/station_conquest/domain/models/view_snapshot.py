"""View snapshot domain model."""

from dataclasses import dataclass, field

from station_conquest.domain.models.coordinate import Coordinate
from station_conquest.domain.models.pending_visit import PendingVisit
from station_conquest.domain.models.venue import Venue


@dataclass(frozen=True)
class ViewSnapshot:
    """Read-only picture of the reconciliation state for presenters."""

    station_name: str | None
    coordinate: Coordinate
    venues: tuple[Venue, ...] = ()
    visited_ids: frozenset[str] = field(default_factory=frozenset)
    completed: bool = False
    pending_visit: PendingVisit | None = None
    submitting: bool = False
    loading: bool = False

    def is_visited(self, venue: Venue) -> bool:
        """Check whether a venue has a recorded visit."""
        return venue.id in self.visited_ids
