"""In-memory station catalog adapter."""

from collections.abc import Iterable

from station_conquest.domain.models import Station
from station_conquest.domain.ports.station_catalog import StationCatalog

TOKYO_STATIONS: tuple[Station, ...] = (
    Station(name="Tokyo Station", latitude=35.681236, longitude=139.767125),
    Station(name="Shinjuku Station", latitude=35.689592, longitude=139.700413),
    Station(name="Shibuya Station", latitude=35.658034, longitude=139.701636),
    Station(name="Ikebukuro Station", latitude=35.729503, longitude=139.7109),
    Station(name="Ueno Station", latitude=35.713768, longitude=139.777254),
    Station(name="Akihabara Station", latitude=35.698353, longitude=139.773114),
    Station(name="Ginza Station", latitude=35.674261, longitude=139.770667),
    Station(name="Ebisu Station", latitude=35.64669, longitude=139.710106),
    Station(name="Shinagawa Station", latitude=35.628471, longitude=139.73876),
    Station(name="Meguro Station", latitude=35.633998, longitude=139.715828),
    Station(name="Hamamatsucho Station", latitude=35.655646, longitude=139.756749),
    Station(name="Shimokitazawa Station", latitude=35.662837, longitude=139.667571),
    Station(name="Kichijoji Station", latitude=35.702259, longitude=139.580333),
    Station(name="Harajuku Station", latitude=35.670168, longitude=139.702687),
    Station(name="Asakusa Station", latitude=35.714555, longitude=139.798023),
)


class StaticStationCatalog(StationCatalog):
    """Station catalog backed by a fixed, ordered list."""

    def __init__(self, stations: Iterable[Station]) -> None:
        """Initialize with stations; names must be unique and the list non-empty."""
        self._stations = tuple(stations)
        if not self._stations:
            raise ValueError("Station catalog must contain at least one station")
        self._by_name: dict[str, Station] = {}
        for station in self._stations:
            if station.name in self._by_name:
                raise ValueError(f"Duplicate station name in catalog: '{station.name}'")
            self._by_name[station.name] = station

    def find(self, name: str) -> Station | None:
        """Find a station by its unique name."""
        return self._by_name.get(name)

    def default(self) -> Station:
        """Return the first station of the catalog."""
        return self._stations[0]

    def names(self) -> list[str]:
        """Return all station names in catalog order."""
        return [station.name for station in self._stations]

    def __len__(self) -> int:
        return len(self._stations)
