"""Client-side filtering of fetched destinations and reviews."""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel

from travel_booking.models import COUNTRIES, Destination, Review

ALL = "all"

LOW_PRICE_CEILING = 1000
HIGH_PRICE_FLOOR = 1500


class PriceRange(str, Enum):
    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


PRICE_RANGE_LABELS = {
    PriceRange.ALL: "All Prices",
    PriceRange.LOW: "Under $1,000",
    PriceRange.MEDIUM: "$1,000 - $1,500",
    PriceRange.HIGH: "Above $1,500",
}


def matches_price_range(price: float, price_range: PriceRange) -> bool:
    if price_range == PriceRange.LOW:
        return price < LOW_PRICE_CEILING
    if price_range == PriceRange.MEDIUM:
        return LOW_PRICE_CEILING <= price < HIGH_PRICE_FLOOR
    if price_range == PriceRange.HIGH:
        return price >= HIGH_PRICE_FLOOR
    return True


class DestinationFilters(BaseModel):
    """Independently selected filter criteria. ``"all"`` disables a dimension."""

    search: str = ""
    country: str = ALL
    type: str = ALL
    price_range: PriceRange = PriceRange.ALL

    def matches(self, destination: Destination) -> bool:
        matches_search = self.search.lower() in destination.name.lower()
        matches_country = self.country == ALL or destination.country == self.country
        matches_type = self.type == ALL or destination.type == self.type
        matches_price = matches_price_range(destination.price, self.price_range)
        return matches_search and matches_country and matches_type and matches_price


def filter_destinations(
    destinations: Iterable[Destination], filters: DestinationFilters
) -> list[Destination]:
    """Return destinations matching every active criterion, in input order."""
    return [d for d in destinations if filters.matches(d)]


def filter_reviews(reviews: Iterable[Review], destination_type: str = ALL) -> list[Review]:
    """Keep reviews whose joined destination has the given type."""
    if destination_type == ALL:
        return list(reviews)
    return [
        r for r in reviews
        if r.destinations is not None and r.destinations.type == destination_type
    ]


def country_options(destinations: Iterable[Destination]) -> list[str]:
    """Return the standard country options plus any others present in the data."""
    options = list(COUNTRIES)
    for destination in destinations:
        if destination.country not in options:
            options.append(destination.country)
    return options
