"""Shared fixtures for station conquest tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from station_conquest.adapters.catalog import StaticStationCatalog
from station_conquest.application import ReconciliationEngine
from station_conquest.domain.models import SessionIdentity
from tests.fakes import (
    EBISU,
    FIXED_NOW,
    TOKYO,
    UENO,
    ControlledVenueRepository,
    ControlledVisitedRepository,
    FakeVisitRecorder,
    RecordingListener,
)


@pytest.fixture
def catalog() -> StaticStationCatalog:
    return StaticStationCatalog([TOKYO, EBISU, UENO])


@pytest.fixture
def venue_repo() -> ControlledVenueRepository:
    return ControlledVenueRepository()


@pytest.fixture
def visited_repo() -> ControlledVisitedRepository:
    return ControlledVisitedRepository()


@pytest.fixture
def recorder() -> FakeVisitRecorder:
    return FakeVisitRecorder()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest_asyncio.fixture
async def engine(
    catalog: StaticStationCatalog,
    venue_repo: ControlledVenueRepository,
    visited_repo: ControlledVisitedRepository,
    recorder: FakeVisitRecorder,
    listener: RecordingListener,
) -> AsyncIterator[ReconciliationEngine]:
    """Engine for user-1 whose fetches only finish when the test says so."""
    engine = ReconciliationEngine(
        catalog=catalog,
        venue_repository=venue_repo,
        visited_repository=visited_repo,
        visit_recorder=recorder,
        identity=SessionIdentity(user_id="user-1", username="alice"),
        listener=listener,
        clock=lambda: FIXED_NOW,
    )
    yield engine
    await engine.stop()
