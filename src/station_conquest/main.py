"""Composition root for the station check-in view."""

import logging
import sys

from aiohttp import ClientSession

from station_conquest.adapters.config import AppConfig, StationCatalogLoader
from station_conquest.adapters.izakaya_api import (
    IzakayaHttpClient,
    IzakayaVenueRepository,
    IzakayaVisitedRepository,
    IzakayaVisitRecorder,
)
from station_conquest.application import ReconciliationEngine
from station_conquest.domain.contracts import ViewStateListenerProtocol
from station_conquest.domain.models import SessionIdentity
from station_conquest.domain.ports import StationCatalog

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_engine(
    config: AppConfig,
    session: ClientSession,
    identity: SessionIdentity | None = None,
    listener: ViewStateListenerProtocol | None = None,
    catalog: StationCatalog | None = None,
) -> ReconciliationEngine:
    """Wire the engine to the izakaya service adapters.

    Identity falls back to checkin_user_id/checkin_username from the config.
    """
    if identity is None:
        identity = SessionIdentity(
            user_id=config.checkin_user_id, username=config.checkin_username
        )
    if catalog is None:
        catalog = StationCatalogLoader.load(config)

    client = IzakayaHttpClient(session, config.api_url, timeout_seconds=config.api_timeout)
    logger.debug(f"Using izakaya API at {config.api_url}")
    return ReconciliationEngine(
        catalog=catalog,
        venue_repository=IzakayaVenueRepository(client),
        visited_repository=IzakayaVisitedRepository(client),
        visit_recorder=IzakayaVisitRecorder(client),
        identity=identity,
        listener=listener,
        default_rating=config.default_rating,
        refresh_after_visit=config.refresh_after_visit,
    )
