"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a named transit station from the static catalog."""

    name: str
    latitude: float
    longitude: float
