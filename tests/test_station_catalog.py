"""Tests for the station catalog and its loader."""

from pathlib import Path

import pytest

from station_conquest.adapters.catalog import TOKYO_STATIONS, StaticStationCatalog
from station_conquest.adapters.config import AppConfig, StationCatalogLoader
from station_conquest.domain.models import Coordinate, Station
from tests.fakes import EBISU, TOKYO


class TestStaticStationCatalog:
    """Tests for the in-memory catalog."""

    def test_when_name_known_then_station_is_found(self) -> None:
        """Given a catalog, when looking up a known name, then its station is returned."""
        catalog = StaticStationCatalog([TOKYO, EBISU])

        assert catalog.find("Ebisu Station") == EBISU

    def test_when_name_unknown_then_none_is_returned(self) -> None:
        """Given a catalog, when looking up an unknown name, then None is returned."""
        catalog = StaticStationCatalog([TOKYO])

        assert catalog.find("ebisu station") is None

    def test_default_is_first_station(self) -> None:
        """Given a catalog, when asking for the default, then the first entry is returned."""
        catalog = StaticStationCatalog([EBISU, TOKYO])

        assert catalog.default() == EBISU
        assert catalog.names() == ["Ebisu Station", "Tokyo Station"]

    def test_when_empty_then_value_error_is_raised(self) -> None:
        """Given no stations, when building the catalog, then ValueError is raised."""
        with pytest.raises(ValueError, match="at least one station"):
            StaticStationCatalog([])

    def test_when_names_duplicate_then_value_error_is_raised(self) -> None:
        """Given two stations with one name, when building the catalog, then ValueError is raised."""
        with pytest.raises(ValueError, match="Duplicate station name"):
            StaticStationCatalog([TOKYO, Station("Tokyo Station", 0.0, 0.0)])

    def test_builtin_catalog_starts_at_tokyo_station(self) -> None:
        """Given the built-in catalog, when reading the default, then it is Tokyo Station."""
        catalog = StaticStationCatalog(TOKYO_STATIONS)

        assert len(catalog) == 15
        assert catalog.default().name == "Tokyo Station"
        assert Coordinate.of_station(catalog.default()) == Coordinate(lat=35.681236, lng=139.767125)


class TestStationCatalogLoader:
    """Tests for loading stations from configuration."""

    def test_when_no_file_configured_then_builtin_catalog_is_used(self) -> None:
        """Given no stations_file, when loading, then the Tokyo catalog is returned."""
        config = AppConfig.for_testing(stations_file=None)

        catalog = StationCatalogLoader.load(config)

        assert catalog.names() == [station.name for station in TOKYO_STATIONS]

    def test_when_file_configured_then_stations_are_loaded_in_order(self, tmp_path: Path) -> None:
        """Given a TOML station file, when loading, then its stations are used in file order."""
        stations_file = tmp_path / "stations.toml"
        stations_file.write_text(
            """
[[stations]]
name = "Umeda Station"
latitude = 34.702485
longitude = 135.495951

[[stations]]
name = "Namba Station"
latitude = 34.666526
longitude = 135.500135
""",
            encoding="utf-8",
        )
        config = AppConfig.for_testing(stations_file=str(stations_file))

        catalog = StationCatalogLoader.load(config)

        assert catalog.names() == ["Umeda Station", "Namba Station"]
        assert catalog.find("Namba Station") == Station("Namba Station", 34.666526, 135.500135)

    def test_when_entries_malformed_then_they_are_skipped(self, tmp_path: Path) -> None:
        """Given entries without coordinates or names, when loading, then only valid ones remain."""
        stations_file = tmp_path / "stations.toml"
        stations_file.write_text(
            """
[[stations]]
name = "Good Station"
latitude = 35.0
longitude = 139.0

[[stations]]
name = "No Coordinates Station"

[[stations]]
latitude = 35.0
longitude = 139.0

[[stations]]
name = "Off The Map Station"
latitude = 135.0
longitude = 139.0
""",
            encoding="utf-8",
        )
        config = AppConfig.for_testing(stations_file=str(stations_file))

        catalog = StationCatalogLoader.load(config)

        assert catalog.names() == ["Good Station"]

    def test_when_file_missing_then_file_not_found_is_raised(self) -> None:
        """Given a missing station file, when loading, then FileNotFoundError is raised."""
        config = AppConfig.for_testing(stations_file="nonexistent.toml")

        with pytest.raises(FileNotFoundError, match="Station file not found"):
            StationCatalogLoader.load(config)
