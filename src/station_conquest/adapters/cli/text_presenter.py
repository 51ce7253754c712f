"""Plain-text presenter for the check-in view."""

import logging
import sys
from typing import TextIO

from station_conquest.domain.contracts.view_listener import ViewStateListenerProtocol
from station_conquest.domain.models import ViewSnapshot

logger = logging.getLogger(__name__)

CONQUERED_BANNER = "Congratulations! You are Izakaya Master in this Area!"


def render_snapshot(snapshot: ViewSnapshot) -> str:
    """Render venues with visited markers and the completion banner."""
    lines = [
        f"Station: {snapshot.station_name} "
        f"({snapshot.coordinate.lat:.6f}, {snapshot.coordinate.lng:.6f})"
    ]
    if snapshot.loading:
        lines.append("Loading venues...")
    visited_count = sum(1 for venue in snapshot.venues if snapshot.is_visited(venue))
    lines.append(f"Venues: {len(snapshot.venues)} ({visited_count} visited)")
    lines.append("=" * 70)
    for venue in snapshot.venues:
        marker = "[x]" if snapshot.is_visited(venue) else "[ ]"
        lines.append(f"{marker} {venue.id}  {venue.name}")
        if venue.page_url:
            lines.append(f"      {venue.page_url}")
    if snapshot.completed:
        lines.append("=" * 70)
        lines.append(CONQUERED_BANNER)
    return "\n".join(lines)


class TextPresenter(ViewStateListenerProtocol):
    """Writes the conquered banner to a stream as soon as it appears."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize with the output stream (stdout by default)."""
        self._stream = stream or sys.stdout
        self.conquered_count = 0

    def on_state_changed(self, snapshot: ViewSnapshot) -> None:
        logger.debug(
            f"View state: {len(snapshot.venues)} venues, {len(snapshot.visited_ids)} visited, "
            f"completed={snapshot.completed}, loading={snapshot.loading}"
        )

    def on_area_conquered(self, snapshot: ViewSnapshot) -> None:
        self.conquered_count += 1
        print(f"\n*** {CONQUERED_BANNER} ({snapshot.station_name}) ***\n", file=self._stream)
