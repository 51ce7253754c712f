"""Session identity domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionIdentity:
    """Identity handed over by the session layer.

    A missing user_id means the session is anonymous.
    """

    user_id: str | None = None
    username: str | None = None

    @property
    def is_anonymous(self) -> bool:
        """True when no user id is known."""
        return not self.user_id
