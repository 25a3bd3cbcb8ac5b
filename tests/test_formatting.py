"""Tests for display helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from travel_booking.services.formatting import initials, star_bar, time_ago


NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


class TestTimeAgo:
    """Tests for time_ago."""

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(hours=3), "Today"),
            (timedelta(days=1, hours=2), "Yesterday"),
            (timedelta(days=3), "3 days ago"),
            (timedelta(days=6, hours=23), "6 days ago"),
            (timedelta(days=7), "1 weeks ago"),
            (timedelta(days=29), "4 weeks ago"),
            (timedelta(days=30), "1 months ago"),
            (timedelta(days=95), "3 months ago"),
        ],
    )
    def test_buckets(self, delta, expected):
        """Test each bucket boundary."""
        assert time_ago(NOW - delta, NOW) == expected

    def test_naive_timestamp_treated_as_utc(self):
        """Test naive timestamps compare against aware now."""
        created = datetime(2025, 6, 13, 12, 0)
        assert time_ago(created, NOW) == "2 days ago"


class TestInitials:
    """Tests for initials."""

    def test_two_words(self):
        """Test first letters of the first two words."""
        assert initials("maya lopez garcia") == "ML"

    def test_email(self):
        """Test single-token names."""
        assert initials("ana@example.com") == "A"

    def test_empty(self):
        """Test the fallback letter."""
        assert initials(None) == "U"
        assert initials("  ") == "U"


class TestStarBar:
    """Tests for star_bar."""

    def test_stars(self):
        """Test filled and empty stars."""
        assert star_bar(3) == "★★★☆☆"
