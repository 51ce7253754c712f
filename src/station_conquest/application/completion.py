"""Derivation of the "area conquered" condition."""

from collections.abc import Iterable, Set

from station_conquest.domain.models import Venue


def compute_completion(venues: Iterable[Venue], visited: Set[str]) -> bool:
    """Return True iff there is at least one venue and every venue was visited.

    An empty venue list is never conquered: a station with no venues, or one
    that has not been fetched yet, must not show the banner.
    """
    venue_ids = [venue.id for venue in venues]
    if not venue_ids:
        return False
    return all(venue_id in visited for venue_id in venue_ids)


def visited_progress(venues: Iterable[Venue], visited: Set[str]) -> tuple[int, int]:
    """Return (visited, total) counts for the listed venues."""
    venue_ids = {venue.id for venue in venues}
    return len(venue_ids & visited), len(venue_ids)
