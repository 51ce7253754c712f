"""Pending visit domain model."""

from dataclasses import dataclass

RATING_CHOICES: tuple[int, ...] = (1, 2, 3, 4, 5)
DEFAULT_RATING = 3


def is_valid_rating(value: object) -> bool:
    """Check that value is one of the allowed star ratings."""
    return isinstance(value, int) and not isinstance(value, bool) and value in RATING_CHOICES


@dataclass(frozen=True)
class PendingVisit:
    """A venue the user picked and is about to rate.

    Exists only between selecting a venue and submitting or cancelling.
    """

    venue_id: str
    rating: int = DEFAULT_RATING
