"""Booking price and duration arithmetic."""

import math
import re
from datetime import date, datetime

SECONDS_PER_DAY = 24 * 60 * 60

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def trip_days(start: date | datetime, end: date | datetime) -> int:
    """Return the number of days between two dates, rounding partial days up."""
    delta = _as_datetime(end) - _as_datetime(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def calculate_total_price(
    start: date | datetime | None,
    end: date | datetime | None,
    price_per_person: float,
    travelers: int,
) -> float:
    """
    Compute the total booking price.

    Args:
        start: First day of the trip
        end: Last day of the trip
        price_per_person: Destination price per person per day
        travelers: Number of travelers

    Returns:
        days x price x travelers, with non-positive day counts billed as one
        day. 0 when either date is missing.
    """
    if start is None or end is None:
        return 0.0
    days = trip_days(start, end)
    return price_per_person * travelers * (days if days > 0 else 1)


def clamp_travelers(value) -> int:
    """Parse a traveler count the way a number input does, never below 1."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 1
        count = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return 1
        count = int(match.group(1))
    else:
        return 1
    return max(1, count)


def format_price(amount: float) -> str:
    return f"${amount:.2f}"
