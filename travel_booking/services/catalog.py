"""Loading destinations for the home and destinations pages."""

from travel_booking.models import Destination
from travel_booking.models.common import parse_rows

FEATURED_LIMIT = 4


def load_destinations(store, limit: int | None = None) -> list[Destination]:
    """Fetch destinations, trending first."""
    return parse_rows(Destination, store.list_destinations(limit), "Failed to load destinations")


def load_featured_destinations(store) -> list[Destination]:
    return load_destinations(store, limit=FEATURED_LIMIT)
