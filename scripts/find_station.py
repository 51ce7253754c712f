#!/usr/bin/env python3
"""Helper script to look up a catalog station and the izakayas around it."""

import asyncio
import sys

import aiohttp

from station_conquest.adapters.config import AppConfig, StationCatalogLoader
from station_conquest.adapters.izakaya_api import IzakayaHttpClient, IzakayaVenueRepository
from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import Coordinate, Station, Venue


def _print_station_info(station: Station) -> None:
    print("\nFound station:")
    print(f"  Name: {station.name}")
    print(f"  Coordinates: {station.latitude}, {station.longitude}")


def _print_sample_venues(venues: list[Venue], limit: int = 10) -> None:
    print(f"\nSample venues ({len(venues)} total):")
    for venue in venues[:limit]:
        print(f"  {venue.id}  {venue.name}")


async def find_station(query: str) -> None:
    """Find a station whose name contains the query and list venues near it."""
    config = AppConfig()
    catalog = StationCatalogLoader.load(config)
    matches = [name for name in catalog.names() if query.lower() in name.lower()]
    if not matches:
        print(f"Station not found: {query}")
        print("Known stations: " + ", ".join(catalog.names()))
        sys.exit(1)

    station = catalog.find(matches[0])
    if station is None:
        print(f"Station not found: {query}")
        sys.exit(1)
    _print_station_info(station)

    print(f"\nFetching venues from {config.api_url}...")
    async with aiohttp.ClientSession() as session:
        client = IzakayaHttpClient(session, config.api_url, timeout_seconds=config.api_timeout)
        try:
            venues = await IzakayaVenueRepository(client).fetch_near(
                Coordinate.of_station(station)
            )
        except TransportError as e:
            print(f"Could not fetch venues: {e.details.reason}")
            sys.exit(1)
    _print_sample_venues(venues)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_station.py <station_name>")
        print('Example: python find_station.py "Ebisu"')
        sys.exit(1)

    asyncio.run(find_station(sys.argv[1]))
