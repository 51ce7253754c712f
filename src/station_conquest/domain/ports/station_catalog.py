"""Station catalog port."""

from typing import Protocol

from station_conquest.domain.models.station import Station


class StationCatalog(Protocol):
    """Port for looking up stations from a fixed catalog."""

    def find(self, name: str) -> Station | None:
        """Find a station by its unique name."""
        ...

    def default(self) -> Station:
        """Return the station the view starts on."""
        ...

    def names(self) -> list[str]:
        """Return all station names in catalog order."""
        ...
