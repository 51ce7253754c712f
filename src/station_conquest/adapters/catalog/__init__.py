"""Station catalog adapters."""

from station_conquest.adapters.catalog.static_station_catalog import (
    TOKYO_STATIONS,
    StaticStationCatalog,
)

__all__ = ["TOKYO_STATIONS", "StaticStationCatalog"]
