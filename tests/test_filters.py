"""Tests for client-side destination and review filtering."""

from datetime import datetime
from itertools import permutations

import pytest

from travel_booking.models import Destination, Review
from travel_booking.services.filters import (
    DestinationFilters,
    PriceRange,
    country_options,
    filter_destinations,
    filter_reviews,
    matches_price_range,
)


def names(destinations):
    return [d.name for d in destinations]


class TestMatchesPriceRange:
    """Tests for price bucket thresholds."""

    @pytest.mark.parametrize(
        "price,bucket,expected",
        [
            (999.99, PriceRange.LOW, True),
            (1000, PriceRange.LOW, False),
            (1000, PriceRange.MEDIUM, True),
            (1499.99, PriceRange.MEDIUM, True),
            (1500, PriceRange.MEDIUM, False),
            (1500, PriceRange.HIGH, True),
            (0, PriceRange.HIGH, False),
            (123456, PriceRange.ALL, True),
        ],
    )
    def test_thresholds(self, price, bucket, expected):
        """Test the 1000 and 1500 boundaries."""
        assert matches_price_range(price, bucket) is expected


class TestFilterDestinations:
    """Tests for filter_destinations."""

    def test_no_filters_returns_everything_in_order(self, destinations):
        """Test that default filters are all wildcards."""
        assert filter_destinations(destinations, DestinationFilters()) == destinations

    def test_search_is_case_insensitive_substring(self, destinations):
        """Test name search ignores case."""
        result = filter_destinations(destinations, DestinationFilters(search="YO"))
        assert names(result) == ["Kyoto", "Lyon"]

    def test_country_is_exact_match(self, destinations):
        """Test that country must match exactly."""
        result = filter_destinations(destinations, DestinationFilters(country="france"))
        assert result == []
        result = filter_destinations(destinations, DestinationFilters(country="France"))
        assert names(result) == ["Paris", "Nice", "Lyon"]

    def test_type_filter(self, destinations):
        """Test the trip type dimension."""
        result = filter_destinations(destinations, DestinationFilters(type="Beach"))
        assert names(result) == ["Nice", "Santorini"]

    def test_france_under_1000(self, destinations):
        """Test country=France with the low price range."""
        filters = DestinationFilters(country="France", price_range=PriceRange.LOW)
        result = filter_destinations(destinations, filters)
        assert names(result) == ["Paris"]
        assert all(d.country == "France" and d.price < 1000 for d in result)

    def test_application_order_does_not_matter(self, destinations):
        """Test that applying criteria one at a time in any order gives the same result."""
        criteria = [
            {"country": "France"},
            {"price_range": PriceRange.LOW},
            {"search": "a"},
        ]
        expected = filter_destinations(
            destinations,
            DestinationFilters(country="France", price_range=PriceRange.LOW, search="a"),
        )
        for order in permutations(criteria):
            result = destinations
            for criterion in order:
                result = filter_destinations(result, DestinationFilters(**criterion))
            assert result == expected

    def test_stricter_criteria_never_grow_result(self, destinations):
        """Test that adding a criterion never increases the result size."""
        steps = [
            DestinationFilters(),
            DestinationFilters(type="City"),
            DestinationFilters(type="City", country="France"),
            DestinationFilters(type="City", country="France", price_range=PriceRange.MEDIUM),
            DestinationFilters(type="City", country="France", price_range=PriceRange.MEDIUM, search="ly"),
        ]
        sizes = [len(filter_destinations(destinations, f)) for f in steps]
        assert sizes == sorted(sizes, reverse=True)
        assert sizes[-1] == 1

    def test_price_range_from_string(self, destinations):
        """Test that the price range accepts its string value."""
        filters = DestinationFilters(price_range="high")
        assert names(filter_destinations(destinations, filters)) == ["Santorini"]


def make_review(review_id, destination=None):
    return Review.model_validate({
        "id": review_id,
        "user_id": "u1",
        "destination_id": "d1",
        "rating": 4,
        "content": "Lovely",
        "created_at": datetime(2025, 6, 1).isoformat(),
        "destinations": destination,
    })


class TestFilterReviews:
    """Tests for filter_reviews."""

    def setup_method(self):
        """Set up test fixtures."""
        self.reviews = [
            make_review("r1", {"name": "Paris", "type": "City"}),
            make_review("r2", {"name": "Nice", "type": "Beach"}),
            make_review("r3", None),
        ]

    def test_all_returns_everything(self):
        """Test the wildcard keeps reviews without a destination."""
        assert len(filter_reviews(self.reviews, "all")) == 3

    def test_filter_by_type(self):
        """Test filtering by joined destination type."""
        result = filter_reviews(self.reviews, "Beach")
        assert [r.id for r in result] == ["r2"]

    def test_reviews_without_destination_dropped(self):
        """Test that unjoined reviews never match a specific type."""
        result = filter_reviews(self.reviews, "City")
        assert [r.id for r in result] == ["r1"]


class TestCountryOptions:
    """Tests for country_options."""

    def test_standard_options_first(self, destinations):
        """Test the fixed list comes first without duplicates."""
        assert country_options(destinations) == ["France", "Japan", "Greece", "Peru"]

    def test_extra_countries_appended(self, destinations):
        """Test countries outside the fixed list are offered too."""
        extra = Destination(id="x", name="Lisbon", country="Portugal", price=700, type="City")
        assert country_options(destinations + [extra])[-1] == "Portugal"
