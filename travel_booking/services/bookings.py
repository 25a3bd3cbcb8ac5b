"""Booking submission."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from travel_booking.errors import AuthenticationRequired, ValidationError
from travel_booking.models import Booking, BookingStatus, Destination, UserIdentity
from travel_booking.services.pricing import calculate_total_price, clamp_travelers

if TYPE_CHECKING:
    from travel_booking.storage import SupabaseStore


logger = logging.getLogger(__name__)


def validate_booking_dates(start_date: date | None, end_date: date | None) -> None:
    """Raise ValidationError unless both dates are set and end is after start."""
    if not start_date or not end_date:
        raise ValidationError("Please select both start and end dates")
    if start_date >= end_date:
        raise ValidationError("End date must be after start date")


class BookingService:
    """Creates bookings from the booking form."""

    def __init__(self, store: SupabaseStore):
        self.store = store

    def create_booking(
        self,
        user: UserIdentity | None,
        destination: Destination,
        start_date: date | None,
        end_date: date | None,
        travelers,
    ) -> Booking:
        """
        Validate the form and insert one pending booking.

        Args:
            user: Signed-in user, or None
            destination: Destination being booked
            start_date: Selected start date
            end_date: Selected end date
            travelers: Traveler count as entered (clamped to at least 1)

        Returns:
            The created booking

        Raises:
            AuthenticationRequired: If nobody is signed in
            ValidationError: If the dates are missing or out of order
            DataStoreError: If the insert fails
        """
        if user is None:
            raise AuthenticationRequired("Please sign in to book")

        validate_booking_dates(start_date, end_date)

        travelers = clamp_travelers(travelers)
        booking = Booking(
            destination_id=destination.id,
            user_id=user.id,
            start_date=start_date,
            end_date=end_date,
            travelers=travelers,
            total_price=calculate_total_price(start_date, end_date, destination.price, travelers),
            status=BookingStatus.PENDING,
        )

        row = self.store.insert_booking(booking.to_insert_payload())
        logger.info("Created booking for destination %s", destination.id)
        return Booking.model_validate(row)
