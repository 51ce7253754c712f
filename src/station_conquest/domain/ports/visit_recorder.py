"""Visit recorder port."""

from datetime import datetime
from typing import Protocol


class VisitRecorder(Protocol):
    """Port for persisting a visit event."""

    async def record_visit(
        self, user_id: str, venue_id: str, rating: int, visited_at: datetime
    ) -> bool:
        """Record a visit. Returns True when the service acknowledged it."""
        ...
