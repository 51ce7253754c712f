"""Contracts between the application core and its presenters."""

from station_conquest.domain.contracts.view_listener import ViewStateListenerProtocol

__all__ = ["ViewStateListenerProtocol"]
