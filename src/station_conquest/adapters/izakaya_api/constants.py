"""Izakaya API constants."""

VENUES_PATH = "/izakayas"
VISITED_PATH_TEMPLATE = "/user/{user_id}/visited-izakayas"
MARK_VISITED_PATH = "/markAsEaten"

# Status codes the API uses, mapped to a human readable reason
STATUS_REASONS: dict[int, str] = {
    400: "Bad request",
    404: "Not found",
    429: "Rate limit exceeded",
    500: "Internal server error",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}
