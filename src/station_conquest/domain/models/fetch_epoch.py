"""Fetch epoch domain model."""

from dataclasses import dataclass

from station_conquest.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class FetchEpoch:
    """Snapshot of coordinate and user taken when a selection is committed.

    Every fetch result is tagged with the epoch it was issued for, so results
    arriving after a newer commit can be recognised and dropped.
    """

    sequence: int
    coordinate: Coordinate
    user_id: str | None
