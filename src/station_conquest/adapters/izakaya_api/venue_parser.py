"""Parser for venue entries returned by the izakaya service.

The service passes through the gourmet search shop format:

    {
        "id": "J001234567",
        "name": "...",
        "lat": "35.6812",          # string or number
        "lng": "139.7671",
        "photo": {"pc": {"l": "https://..."}},
        "urls": {"pc": "https://..."},
        ...
    }
"""

import logging
from typing import Any

from station_conquest.domain.models import Venue

logger = logging.getLogger(__name__)


def _nested_str(data: dict[str, Any], *keys: str) -> str:
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return ""
        current = current.get(key)
    return current if isinstance(current, str) else ""


def parse_venue(shop: dict[str, Any]) -> Venue:
    """Convert one shop entry into a Venue.

    Raises:
        ValueError: if the id or the coordinates are missing or not numeric.
    """
    venue_id = shop.get("id")
    if venue_id is None or str(venue_id) == "":
        raise ValueError("shop entry has no id")
    try:
        lat = float(shop["lat"])
        lng = float(shop["lng"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"shop {venue_id} has no usable coordinates") from e

    return Venue(
        id=str(venue_id),
        name=str(shop.get("name", "")),
        lat=lat,
        lng=lng,
        photo_url=_nested_str(shop, "photo", "pc", "l"),
        page_url=_nested_str(shop, "urls", "pc"),
    )


def parse_venues(data: Any) -> list[Venue]:
    """Parse a list of shop entries, skipping malformed and duplicate ones.

    Order is kept as returned by the service.
    """
    if isinstance(data, dict):
        data = data.get("shops", data.get("shop", []))
    if not isinstance(data, list):
        raise ValueError(f"expected a list of venues, got {type(data).__name__}")

    venues: list[Venue] = []
    seen: set[str] = set()
    for shop in data:
        if not isinstance(shop, dict):
            continue
        try:
            venue = parse_venue(shop)
        except ValueError as e:
            logger.warning(f"Error processing venue entry: {e}")
            continue
        if venue.id in seen:
            logger.debug(f"Skipping duplicate venue {venue.id}")
            continue
        seen.add(venue.id)
        venues.append(venue)
    return venues
