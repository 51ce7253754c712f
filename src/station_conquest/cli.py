"""Command line interface for station check-ins."""

import argparse
import asyncio
import logging
import sys

import aiohttp

from station_conquest.adapters.cli import TextPresenter, render_snapshot
from station_conquest.adapters.config import AppConfig, StationCatalogLoader
from station_conquest.application import ReconciliationEngine, visited_progress
from station_conquest.domain.models import RATING_CHOICES, SessionIdentity
from station_conquest.main import configure_logging, create_engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check in to izakayas around Tokyo stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the stations
  station-conquest stations

  # Show venues around a station and which ones you visited
  station-conquest show --station "Ebisu Station" --user-id 42

  # Record a visit with four stars
  station-conquest visit --station "Ebisu Station" --venue J001234567 --rating 4 --user-id 42
        """,
    )
    parser.add_argument("--user-id", help="User id (defaults to CHECKIN_USER_ID)")
    parser.add_argument("--username", help="Display name of the user")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("stations", help="List the station catalog")

    show_parser = subparsers.add_parser("show", help="Show venues around a station")
    show_parser.add_argument("--station", help="Station name (defaults to the first station)")

    visit_parser = subparsers.add_parser("visit", help="Record a visit to a venue")
    visit_parser.add_argument("--station", help="Station name (defaults to the first station)")
    visit_parser.add_argument("--venue", required=True, help="Venue id")
    visit_parser.add_argument(
        "--rating", type=int, choices=RATING_CHOICES, help="Star rating (1-5)"
    )

    return parser


def _identity_from(args: argparse.Namespace, config: AppConfig) -> SessionIdentity:
    return SessionIdentity(
        user_id=args.user_id or config.checkin_user_id,
        username=args.username or config.checkin_username,
    )


async def _open_station(engine: ReconciliationEngine, station: str | None) -> bool:
    if station is None:
        await engine.start()
    elif engine.select_station(station):
        engine.confirm_selection()
    else:
        print(f"Unknown station '{station}'", file=sys.stderr)
        return False
    await engine.wait_until_settled()
    return True


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute one CLI command and return the process exit code."""
    if args.command == "stations":
        catalog = StationCatalogLoader.load(config)
        for name in catalog.names():
            station = catalog.find(name)
            if station is not None:
                print(f"  {station.name}  ({station.latitude:.6f}, {station.longitude:.6f})")
        return 0

    identity = _identity_from(args, config)
    presenter = TextPresenter()
    async with aiohttp.ClientSession() as session:
        engine = create_engine(config, session, identity=identity, listener=presenter)
        try:
            if not await _open_station(engine, args.station):
                return 1

            if args.command == "show":
                print(render_snapshot(engine.snapshot()))
                return 0

            if not engine.select_venue(args.venue):
                print(
                    f"Venue '{args.venue}' is not listed around {engine.station.name}",
                    file=sys.stderr,
                )
                return 1
            if args.rating is not None:
                engine.set_rating(args.rating)
            if not await engine.submit_visit():
                print(f"Visit to '{args.venue}' was not recorded", file=sys.stderr)
                return 1
            await engine.wait_until_settled()

            visited, total = visited_progress(engine.venues, engine.visited_ids)
            print(f"Visit recorded. {visited}/{total} venues visited around {engine.station.name}.")
            return 0
        finally:
            await engine.stop()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the command and exit."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(logging.DEBUG if args.verbose else config.log_level_number)

    try:
        exit_code = asyncio.run(run(args, config))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
