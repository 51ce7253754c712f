"""Configuration adapters."""

from station_conquest.adapters.config.app_config import AppConfig
from station_conquest.adapters.config.station_catalog_loader import StationCatalogLoader

__all__ = ["AppConfig", "StationCatalogLoader"]
