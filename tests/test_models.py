"""Tests for domain models."""

import dataclasses

import pytest
from pydantic import ValidationError

from station_conquest.domain.errors import TransportError
from station_conquest.domain.models import (
    DEFAULT_RATING,
    Coordinate,
    ErrorDetails,
    FetchEpoch,
    PendingVisit,
    SessionIdentity,
    ViewSnapshot,
    is_valid_rating,
)
from tests.fakes import EBISU, TOKYO, make_venue


class TestRating:
    """Tests for the star rating rules."""

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_when_rating_in_range_then_valid(self, value: int) -> None:
        assert is_valid_rating(value) is True

    @pytest.mark.parametrize("value", [0, 6, -1, 3.0, "3", None, True])
    def test_when_rating_outside_choices_then_invalid(self, value: object) -> None:
        """Given a non-integer or out-of-range value, when validating, then it is rejected."""
        assert is_valid_rating(value) is False

    def test_pending_visit_starts_with_default_rating(self) -> None:
        assert PendingVisit(venue_id="J1").rating == DEFAULT_RATING == 3


class TestCoordinateAndEpoch:
    """Tests for coordinates and fetch epochs."""

    def test_coordinate_of_station_uses_station_position(self) -> None:
        coordinate = Coordinate.of_station(EBISU)

        assert coordinate == Coordinate(lat=EBISU.latitude, lng=EBISU.longitude)

    def test_when_sequence_differs_then_epochs_differ(self) -> None:
        """Given two commits of the same station, when comparing epochs, then they differ."""
        coordinate = Coordinate.of_station(TOKYO)

        assert FetchEpoch(1, coordinate, "u") != FetchEpoch(2, coordinate, "u")
        assert FetchEpoch(1, coordinate, "u") == FetchEpoch(1, coordinate, "u")

    def test_epoch_is_immutable(self) -> None:
        epoch = FetchEpoch(1, Coordinate.of_station(TOKYO), None)

        with pytest.raises(dataclasses.FrozenInstanceError):
            epoch.sequence = 2  # type: ignore[misc]


class TestSessionIdentity:
    """Tests for session identity."""

    @pytest.mark.parametrize("user_id", [None, ""])
    def test_when_no_user_id_then_anonymous(self, user_id: str | None) -> None:
        assert SessionIdentity(user_id=user_id).is_anonymous is True

    def test_when_user_id_present_then_not_anonymous(self) -> None:
        assert SessionIdentity(user_id="42", username="alice").is_anonymous is False


class TestViewSnapshot:
    """Tests for the view snapshot read model."""

    def test_is_visited_checks_visited_ids(self) -> None:
        snapshot = ViewSnapshot(
            station_name=TOKYO.name,
            coordinate=Coordinate.of_station(TOKYO),
            venues=(make_venue("J1"), make_venue("J2")),
            visited_ids=frozenset({"J2"}),
        )

        assert snapshot.is_visited(make_venue("J1")) is False
        assert snapshot.is_visited(make_venue("J2")) is True


class TestErrors:
    """Tests for transport errors and their details."""

    def test_when_no_details_given_then_reason_is_message(self) -> None:
        error = TransportError("Network error")

        assert str(error) == "Network error"
        assert error.details == ErrorDetails(status_code=None, reason="Network error")

    def test_when_details_given_then_they_are_kept(self) -> None:
        details = ErrorDetails(status_code=503, reason="Service unavailable")

        error = TransportError("HTTP 503", details)

        assert error.details.status_code == 503
        assert isinstance(error, RuntimeError)

    def test_error_details_are_frozen(self) -> None:
        details = ErrorDetails(status_code=404, reason="Not found")

        with pytest.raises(ValidationError):
            details.reason = "changed"  # type: ignore[misc]
