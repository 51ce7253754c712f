"""Adapters layer - external system integrations."""

from station_conquest.adapters.catalog import StaticStationCatalog
from station_conquest.adapters.config import AppConfig, StationCatalogLoader
from station_conquest.adapters.izakaya_api import (
    IzakayaHttpClient,
    IzakayaVenueRepository,
    IzakayaVisitedRepository,
    IzakayaVisitRecorder,
)

__all__ = [
    "AppConfig",
    "IzakayaHttpClient",
    "IzakayaVenueRepository",
    "IzakayaVisitRecorder",
    "IzakayaVisitedRepository",
    "StaticStationCatalog",
    "StationCatalogLoader",
]
