"""Reconciliation engine for the station check-in view.

Owns the current coordinate, the venues fetched for it, the visited venue ids
of the session user and the derived "area conquered" flag, and applies the
transitions that keep them consistent.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine, Iterable
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from station_conquest.application.completion import compute_completion
from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import (
    DEFAULT_RATING,
    Coordinate,
    FetchEpoch,
    PendingVisit,
    SessionIdentity,
    Station,
    Venue,
    ViewSnapshot,
    is_valid_rating,
)

if TYPE_CHECKING:
    from station_conquest.domain.contracts import ViewStateListenerProtocol
    from station_conquest.domain.ports import (
        StationCatalog,
        VenueRepository,
        VisitedRepository,
        VisitRecorder,
    )

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ReconciliationEngine:
    """Keeps station, venues, visited ids and the completion flag consistent.

    All transitions run on one asyncio event loop. Synchronous transitions
    never yield, so they cannot interleave. Fetches run as tasks created by
    confirm_selection() and report back through the *_completed / *_failed
    transitions, tagged with the epoch they were issued for.
    """

    def __init__(
        self,
        catalog: StationCatalog,
        venue_repository: VenueRepository,
        visited_repository: VisitedRepository,
        visit_recorder: VisitRecorder,
        identity: SessionIdentity | None = None,
        listener: ViewStateListenerProtocol | None = None,
        clock: Callable[[], datetime] | None = None,
        default_rating: int = DEFAULT_RATING,
        refresh_after_visit: bool = False,
    ) -> None:
        """Initialize the engine on the catalog's default station.

        Args:
            catalog: Static station lookup.
            venue_repository: Fetches venues near a coordinate.
            visited_repository: Fetches visited venue ids for a user.
            visit_recorder: Persists visit events.
            identity: Session identity; anonymous when omitted.
            listener: Optional presenter notified after each state change.
            clock: Source of visit timestamps, UTC now by default.
            default_rating: Rating a freshly opened pending visit starts with.
            refresh_after_visit: Re-fetch venues and visited ids after each
                recorded visit instead of only merging the id locally.
        """
        if not is_valid_rating(default_rating):
            raise ValueError(f"default_rating must be one of 1..5, got {default_rating!r}")

        self._catalog = catalog
        self._venue_repository = venue_repository
        self._visited_repository = visited_repository
        self._visit_recorder = visit_recorder
        self._identity = identity or SessionIdentity()
        self._listener = listener
        self._clock = clock or _utc_now
        self._default_rating = default_rating
        self._refresh_after_visit = refresh_after_visit

        self._station: Station = catalog.default()
        self._coordinate = Coordinate.of_station(self._station)
        self._pending_station: Station | None = None

        self._sequence = 0
        self._epoch: FetchEpoch | None = None
        self._venues_outstanding = False
        self._visited_outstanding = False

        self._venues: tuple[Venue, ...] = ()
        self._visited: frozenset[str] = frozenset()
        # Ids recorded by this session since the current epoch was committed.
        # A visited fetch issued before the submission would not contain them.
        self._recorded_in_epoch: set[str] = set()
        self._completed = False

        self._pending_visit: PendingVisit | None = None
        self._submitting = False

        self._tasks: set[asyncio.Task[None]] = set()

    # Read model

    @property
    def station(self) -> Station:
        return self._station

    @property
    def pending_station(self) -> Station | None:
        return self._pending_station

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def current_epoch(self) -> FetchEpoch | None:
        return self._epoch

    @property
    def venues(self) -> tuple[Venue, ...]:
        return self._venues

    @property
    def visited_ids(self) -> frozenset[str]:
        return self._visited

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def pending_visit(self) -> PendingVisit | None:
        return self._pending_visit

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def is_fetching(self) -> bool:
        """True while a fetch of the current epoch has not reported back."""
        return self._venues_outstanding or self._visited_outstanding

    def snapshot(self) -> ViewSnapshot:
        """Return an immutable view of the current state."""
        return ViewSnapshot(
            station_name=self._station.name,
            coordinate=self._coordinate,
            venues=self._venues,
            visited_ids=self._visited,
            completed=self._completed,
            pending_visit=self._pending_visit,
            submitting=self._submitting,
            loading=self.is_fetching,
        )

    # Lifecycle

    async def start(self) -> FetchEpoch:
        """Commit the default station and issue its initial fetches."""
        epoch = self.confirm_selection()
        logger.info(f"Check-in view started at {self._station.name}")
        return epoch

    async def stop(self) -> None:
        """Cancel fetches that are still running."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                logger.debug("Fetch task cancelled on stop")
        self._tasks.clear()

    async def wait_until_settled(self) -> None:
        """Wait until no fetch task is running."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # Station selection

    def select_station(self, name: str) -> bool:
        """Remember a station as the pending selection without fetching.

        Unknown names leave everything unchanged.
        """
        station = self._catalog.find(name)
        if station is None:
            logger.debug(f"Ignoring selection of unknown station '{name}'")
            return False
        self._pending_station = station
        return True

    def confirm_selection(self) -> FetchEpoch:
        """Commit the pending station and fetch venues and visited ids for it.

        Without a pending station the current one is committed again, which
        refreshes it. Confirming the current coordinate while its fetches are
        still in flight issues nothing new and returns the running epoch.
        Must be called from within a running event loop.
        """
        station = self._pending_station or self._station
        self._pending_station = None
        return self._commit(station)

    def refresh(self) -> FetchEpoch:
        """Fetch venues and visited ids again for the current station.

        A pending station selection is left untouched.
        """
        return self._commit(self._station)

    def _commit(self, station: Station) -> FetchEpoch:
        coordinate = Coordinate.of_station(station)

        if self._epoch is not None and coordinate == self._coordinate and self.is_fetching:
            logger.debug(f"Fetches for {station.name} already in flight, not issuing again")
            return self._epoch

        self._sequence += 1
        epoch = FetchEpoch(
            sequence=self._sequence,
            coordinate=coordinate,
            user_id=self._identity.user_id,
        )
        self._station = station
        self._coordinate = coordinate
        self._epoch = epoch
        self._venues_outstanding = True
        self._visited_outstanding = True
        self._recorded_in_epoch = set()
        if not self._submitting:
            self._pending_visit = None
        self._recompute_completion()

        logger.info(
            f"Committed {station.name} ({coordinate.lat}, {coordinate.lng}) "
            f"as epoch {epoch.sequence}"
        )
        self._spawn(self._run_venue_fetch(epoch))
        self._spawn(self._run_visited_fetch(epoch))
        self._notify()
        return epoch

    # Fetch results

    def venue_fetch_completed(self, epoch: FetchEpoch, venues: Iterable[Venue]) -> bool:
        """Replace the venue list with a result for the current epoch.

        Returns False when the result belongs to a superseded epoch.
        """
        if not self._is_current(epoch):
            logger.debug(f"Discarding stale venue result of epoch {epoch.sequence}")
            return False
        self._venues = tuple(venues)
        self._venues_outstanding = False
        self._drop_unlisted_pending_visit()
        logger.debug(f"Received {len(self._venues)} venues for epoch {epoch.sequence}")
        self._recompute_completion()
        self._notify()
        return True

    def venue_fetch_failed(self, epoch: FetchEpoch, error: Exception) -> bool:
        """Settle the venue side of an epoch, keeping the last known venues."""
        if not self._is_current(epoch):
            logger.debug(f"Discarding stale venue failure of epoch {epoch.sequence}")
            return False
        logger.warning(
            f"Could not fetch venues near ({epoch.coordinate.lat}, {epoch.coordinate.lng}), "
            f"keeping {len(self._venues)} previous venue(s): {error}"
        )
        self._venues_outstanding = False
        self._recompute_completion()
        self._notify()
        return True

    def visited_fetch_completed(self, epoch: FetchEpoch, visited: Iterable[str]) -> bool:
        """Replace the visited ids with a result for the current epoch.

        Ids this session recorded after the fetch was issued are kept.
        Returns False when the result belongs to a superseded epoch.
        """
        if not self._is_current(epoch):
            logger.debug(f"Discarding stale visited result of epoch {epoch.sequence}")
            return False
        self._visited = frozenset(visited) | self._recorded_in_epoch
        self._visited_outstanding = False
        logger.debug(f"Received {len(self._visited)} visited id(s) for epoch {epoch.sequence}")
        self._recompute_completion()
        self._notify()
        return True

    def visited_fetch_failed(self, epoch: FetchEpoch, error: Exception) -> bool:
        """Settle the visited side of an epoch, keeping the last known ids."""
        if not self._is_current(epoch):
            logger.debug(f"Discarding stale visited failure of epoch {epoch.sequence}")
            return False
        logger.warning(
            f"Could not fetch visited venues for user {epoch.user_id}, "
            f"keeping {len(self._visited)} previous id(s): {error}"
        )
        self._visited_outstanding = False
        self._recompute_completion()
        self._notify()
        return True

    # Visit flow

    def select_venue(self, venue_id: str) -> bool:
        """Open a pending visit for a listed venue with the default rating."""
        if self._submitting:
            logger.debug("Submission in flight, ignoring venue selection")
            return False
        if not self._is_listed(venue_id):
            logger.debug(f"Ignoring selection of unlisted venue '{venue_id}'")
            return False
        self._pending_visit = PendingVisit(venue_id=venue_id, rating=self._default_rating)
        self._notify()
        return True

    def set_rating(self, value: int) -> bool:
        """Change the rating of the pending visit; only 1..5 is accepted."""
        if self._pending_visit is None or self._submitting:
            return False
        if not is_valid_rating(value):
            logger.debug(f"Ignoring invalid rating {value!r}")
            return False
        self._pending_visit = replace(self._pending_visit, rating=value)
        self._notify()
        return True

    def cancel_visit(self) -> bool:
        """Drop the pending visit without side effects."""
        if self._pending_visit is None or self._submitting:
            return False
        self._pending_visit = None
        self._notify()
        return True

    async def submit_visit(self) -> bool:
        """Record the pending visit.

        The pending visit stays set while the recorder call runs, and further
        submits are ignored until it resolves. Afterwards it is cleared whatever
        the outcome. On success the venue id joins the visited ids at once, and
        with refresh_after_visit both sets are fetched again for the station.
        """
        pending = self._pending_visit
        if pending is None:
            logger.debug("No pending visit to submit")
            return False
        if self._submitting:
            logger.debug("Visit submission already in flight")
            return False
        if not self._is_listed(pending.venue_id):
            logger.info(f"Venue '{pending.venue_id}' is no longer listed, dropping pending visit")
            self._pending_visit = None
            self._notify()
            return False
        if self._identity.is_anonymous:
            logger.warning("Cannot record a visit for an anonymous session")
            self._pending_visit = None
            self._notify()
            return False

        self._submitting = True
        try:
            self._notify()
            recorded = await self._visit_recorder.record_visit(
                str(self._identity.user_id), pending.venue_id, pending.rating, self._clock()
            )
        except Exception as e:
            logger.error(
                f"Unexpected error recording visit to '{pending.venue_id}': {e}", exc_info=True
            )
            recorded = False
        finally:
            self._submitting = False
            self._pending_visit = None

        if recorded:
            self._visited = self._visited | {pending.venue_id}
            self._recorded_in_epoch.add(pending.venue_id)
            logger.info(f"Recorded visit to '{pending.venue_id}' with rating {pending.rating}")
            if self._refresh_after_visit:
                self.refresh()
                self._recorded_in_epoch.add(pending.venue_id)
            else:
                self._recompute_completion()
        else:
            logger.warning(f"Visit to '{pending.venue_id}' was not recorded")
        self._notify()
        return recorded

    def dismiss_completion(self) -> None:
        """Acknowledge the conquered banner; venues and visited ids stay as they are."""
        self._completed = False
        self._notify()

    # Internals

    def _is_current(self, epoch: FetchEpoch) -> bool:
        return self._epoch is not None and epoch == self._epoch

    def _is_listed(self, venue_id: str) -> bool:
        return any(venue.id == venue_id for venue in self._venues)

    def _drop_unlisted_pending_visit(self) -> None:
        if (
            self._pending_visit is not None
            and not self._submitting
            and not self._is_listed(self._pending_visit.venue_id)
        ):
            logger.debug(f"Pending venue '{self._pending_visit.venue_id}' left the list")
            self._pending_visit = None

    def _recompute_completion(self) -> None:
        """Derive the completion flag; it stays false while the epoch is unsettled."""
        was_completed = self._completed
        if self.is_fetching:
            self._completed = False
        else:
            self._completed = compute_completion(self._venues, self._visited)
        if self._completed and not was_completed:
            logger.info(f"All {len(self._venues)} venue(s) around {self._station.name} visited")
            if self._listener is not None:
                try:
                    self._listener.on_area_conquered(self.snapshot())
                except Exception as e:
                    logger.error(f"View listener failed on area conquered: {e}", exc_info=True)

    def _notify(self) -> None:
        if self._listener is None:
            return
        try:
            self._listener.on_state_changed(self.snapshot())
        except Exception as e:
            logger.error(f"View listener failed on state change: {e}", exc_info=True)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_venue_fetch(self, epoch: FetchEpoch) -> None:
        try:
            venues = await self._venue_repository.fetch_near(epoch.coordinate)
        except TransportError as e:
            self.venue_fetch_failed(epoch, e)
            return
        except Exception as e:
            logger.error(f"Unexpected error fetching venues: {e}", exc_info=True)
            self.venue_fetch_failed(epoch, e)
            return
        self.venue_fetch_completed(epoch, venues)

    async def _run_visited_fetch(self, epoch: FetchEpoch) -> None:
        try:
            visited = await self._visited_repository.fetch_visited(epoch.user_id)
        except TransportError as e:
            self.visited_fetch_failed(epoch, e)
            return
        except Exception as e:
            logger.error(f"Unexpected error fetching visited venues: {e}", exc_info=True)
            self.visited_fetch_failed(epoch, e)
            return
        self.visited_fetch_completed(epoch, visited)
