"""Protocol for presenters observing the check-in view state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from station_conquest.domain.models.view_snapshot import ViewSnapshot


class ViewStateListenerProtocol(Protocol):
    """Protocol for rendering view state changes."""

    def on_state_changed(self, snapshot: "ViewSnapshot") -> None:
        """Called after every transition that changed the view state.

        Args:
            snapshot: The state after the transition.
        """
        ...

    def on_area_conquered(self, snapshot: "ViewSnapshot") -> None:
        """Called when the completion flag turns from false to true.

        Args:
            snapshot: The state in which every listed venue is visited.
        """
        ...
