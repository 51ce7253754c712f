"""Coordinate domain model."""

from dataclasses import dataclass

from station_conquest.domain.models.station import Station


@dataclass(frozen=True)
class Coordinate:
    """The current map focus."""

    lat: float
    lng: float

    @classmethod
    def of_station(cls, station: Station) -> "Coordinate":
        """Build the coordinate a station is centred on."""
        return cls(lat=station.latitude, lng=station.longitude)
