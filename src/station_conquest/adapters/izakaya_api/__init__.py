"""Izakaya check-in service adapters."""

from station_conquest.adapters.izakaya_api.http_client import IzakayaHttpClient
from station_conquest.adapters.izakaya_api.venue_repository import IzakayaVenueRepository
from station_conquest.adapters.izakaya_api.visit_recorder import IzakayaVisitRecorder
from station_conquest.adapters.izakaya_api.visited_repository import IzakayaVisitedRepository

__all__ = [
    "IzakayaHttpClient",
    "IzakayaVenueRepository",
    "IzakayaVisitRecorder",
    "IzakayaVisitedRepository",
]
