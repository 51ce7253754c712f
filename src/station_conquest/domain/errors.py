"""Domain errors."""

from station_conquest.domain.models.error_details import ErrorDetails


class TransportError(RuntimeError):
    """Raised by adapters when the upstream service cannot be reached or answers with an error."""

    def __init__(self, message: str, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details or ErrorDetails(reason=message)
