"""Test doubles for the ports of the reconciliation engine."""

import asyncio
from collections.abc import Iterable
from datetime import UTC, datetime

from station_conquest.domain.models import (
    Coordinate,
    Station,
    Venue,
    ViewSnapshot,
)

TOKYO = Station(name="Tokyo Station", latitude=35.681236, longitude=139.767125)
EBISU = Station(name="Ebisu Station", latitude=35.64669, longitude=139.710106)
UENO = Station(name="Ueno Station", latitude=35.713768, longitude=139.777254)

FIXED_NOW = datetime(2024, 5, 1, 18, 30, tzinfo=UTC)


def make_venue(venue_id: str, name: str | None = None) -> Venue:
    """Create a venue with throwaway coordinates."""
    return Venue(id=venue_id, name=name or f"Izakaya {venue_id}", lat=35.0, lng=139.0)


async def drain() -> None:
    """Let scheduled tasks run until they block again."""
    for _ in range(10):
        await asyncio.sleep(0)


class ControlledVenueRepository:
    """Venue repository whose answers are released by the test."""

    def __init__(self) -> None:
        self.calls: list[Coordinate] = []
        self._futures: list[asyncio.Future[list[Venue]]] = []

    async def fetch_near(self, coordinate: Coordinate) -> list[Venue]:
        future: asyncio.Future[list[Venue]] = asyncio.get_running_loop().create_future()
        self.calls.append(coordinate)
        self._futures.append(future)
        return await future

    def resolve(self, index: int, venues: Iterable[Venue]) -> None:
        self._futures[index].set_result(list(venues))

    def fail(self, index: int, error: Exception) -> None:
        self._futures[index].set_exception(error)


class ControlledVisitedRepository:
    """Visited repository whose answers are released by the test."""

    def __init__(self) -> None:
        self.calls: list[str | None] = []
        self._futures: list[asyncio.Future[frozenset[str]]] = []

    async def fetch_visited(self, user_id: str | None) -> frozenset[str]:
        future: asyncio.Future[frozenset[str]] = asyncio.get_running_loop().create_future()
        self.calls.append(user_id)
        self._futures.append(future)
        return await future

    def resolve(self, index: int, visited: Iterable[str]) -> None:
        self._futures[index].set_result(frozenset(visited))

    def fail(self, index: int, error: Exception) -> None:
        self._futures[index].set_exception(error)


class FakeVisitRecorder:
    """Visit recorder returning a fixed outcome, optionally held open by a gate."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[str, str, int, datetime]] = []

    async def record_visit(
        self, user_id: str, venue_id: str, rating: int, visited_at: datetime
    ) -> bool:
        self.calls.append((user_id, venue_id, rating, visited_at))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


class RecordingListener:
    """View listener that keeps every notification."""

    def __init__(self) -> None:
        self.snapshots: list[ViewSnapshot] = []
        self.conquered: list[ViewSnapshot] = []

    def on_state_changed(self, snapshot: ViewSnapshot) -> None:
        self.snapshots.append(snapshot)

    def on_area_conquered(self, snapshot: ViewSnapshot) -> None:
        self.conquered.append(snapshot)


class FailingListener(RecordingListener):
    """View listener that raises from every callback while failing is set."""

    def __init__(self, failing: bool = True) -> None:
        super().__init__()
        self.failing = failing

    def on_state_changed(self, snapshot: ViewSnapshot) -> None:
        super().on_state_changed(snapshot)
        if self.failing:
            raise RuntimeError("presenter crashed")

    def on_area_conquered(self, snapshot: ViewSnapshot) -> None:
        super().on_area_conquered(snapshot)
        if self.failing:
            raise RuntimeError("presenter crashed")
