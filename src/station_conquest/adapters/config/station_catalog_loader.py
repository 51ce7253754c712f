"""Station catalog loader."""

import logging
from typing import Any

from station_conquest.adapters.catalog import TOKYO_STATIONS, StaticStationCatalog
from station_conquest.adapters.config.app_config import AppConfig
from station_conquest.domain.models import Station

logger = logging.getLogger(__name__)


def _parse_station(row: Any) -> Station | None:
    if not isinstance(row, dict):
        return None
    name = row.get("name")
    if not isinstance(name, str) or not name.strip():
        return None
    try:
        latitude = float(row["latitude"])
        longitude = float(row["longitude"])
    except (KeyError, TypeError, ValueError):
        return None
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        return None
    return Station(name=name.strip(), latitude=latitude, longitude=longitude)


class StationCatalogLoader:
    """Loads the station catalog from app config."""

    @staticmethod
    def load(config: AppConfig) -> StaticStationCatalog:
        """Load stations from the configured TOML file, or the built-in catalog."""
        rows = config.get_stations_config()
        if not rows:
            return StaticStationCatalog(TOKYO_STATIONS)

        stations: list[Station] = []
        for index, row in enumerate(rows):
            station = _parse_station(row)
            if station is None:
                logger.warning(f"Skipping malformed station entry #{index}: {row!r}")
                continue
            stations.append(station)

        logger.info(f"Loaded {len(stations)} station(s) from {config.stations_file}")
        return StaticStationCatalog(stations)
