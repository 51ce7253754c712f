"""Venue domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Venue:
    """Represents a venue (izakaya) found near a coordinate."""

    id: str
    name: str
    lat: float
    lng: float
    photo_url: str = ""
    page_url: str = ""
