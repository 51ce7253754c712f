"""Ports (interfaces) for the ports-and-adapters architecture."""

from station_conquest.domain.ports.station_catalog import StationCatalog
from station_conquest.domain.ports.venue_repository import VenueRepository
from station_conquest.domain.ports.visit_recorder import VisitRecorder
from station_conquest.domain.ports.visited_repository import VisitedRepository

__all__ = [
    "StationCatalog",
    "VenueRepository",
    "VisitRecorder",
    "VisitedRepository",
]
