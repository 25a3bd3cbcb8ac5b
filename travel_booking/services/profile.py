"""Summaries of a user's bookings for the profile page."""

from datetime import date
from typing import Iterable

from pydantic import BaseModel, Field

from travel_booking.models import Booking, BookingStatus
from travel_booking.models.common import parse_rows


def upcoming_trips(bookings: Iterable[Booking], today: date) -> list[Booking]:
    """Confirmed bookings that have not started yet."""
    return [
        b for b in bookings
        if b.status == BookingStatus.CONFIRMED and b.start_date > today
    ]


def past_trips(bookings: Iterable[Booking], today: date) -> list[Booking]:
    """Confirmed bookings ending today or earlier."""
    return [
        b for b in bookings
        if b.status == BookingStatus.CONFIRMED and b.end_date <= today
    ]


def pending_bookings(bookings: Iterable[Booking]) -> list[Booking]:
    return [b for b in bookings if b.status == BookingStatus.PENDING]


def booking_length_days(start: date, end: date) -> int:
    """Length of a booking in whole days, regardless of date order."""
    return abs((end - start).days)


class ProfileStats(BaseModel):
    trips_completed: int = 0
    upcoming_trips: int = 0
    pending_bookings: int = 0
    destinations_booked: list[str] = Field(default_factory=list)

    @classmethod
    def from_bookings(cls, bookings: list[Booking], today: date) -> "ProfileStats":
        names: list[str] = []
        for booking in bookings:
            if booking.destinations and booking.destinations.name not in names:
                names.append(booking.destinations.name)
        return cls(
            trips_completed=len(past_trips(bookings, today)),
            upcoming_trips=len(upcoming_trips(bookings, today)),
            pending_bookings=len(pending_bookings(bookings)),
            destinations_booked=names,
        )


def load_bookings(store, user_id: str) -> list[Booking]:
    """Fetch a user's bookings, earliest start date first."""
    return parse_rows(Booking, store.list_bookings(user_id), "Failed to load profile data")
