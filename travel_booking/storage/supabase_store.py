import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from travel_booking.errors import DataStoreError


logger = logging.getLogger(__name__)

DESTINATIONS_TABLE = "destinations"
BOOKINGS_TABLE = "bookings"
REVIEWS_TABLE = "reviews"
TRIP_PLANS_TABLE = "trip_plans"

BOOKING_COLUMNS = "*, destinations (name, image_url)"
REVIEW_COLUMNS = "*, profiles (display_name), destinations (name, type)"


def create_supabase_client(url: str, key: str) -> Client:
    """Create a backend client for one browser session."""
    return create_client(url, key)


class SupabaseStore:
    """Thin wrapper around the hosted tables.

    Each method issues exactly one request and returns plain rows. Any
    failure is logged and re-raised as DataStoreError with a message that
    can be shown to the user.
    """

    def __init__(self, client: Client):
        self.client = client

    def _execute(self, query, operation: str, user_message: str) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error("%s failed: %s", operation, e)
            raise DataStoreError(user_message, operation=operation) from e
        return response.data or []

    def list_destinations(self, limit: int | None = None) -> list[dict[str, Any]]:
        """
        Fetch destinations, trending first.

        Args:
            limit: Optional maximum number of rows

        Returns:
            List of destination rows
        """
        query = (
            self.client.table(DESTINATIONS_TABLE)
            .select("*")
            .order("trending", desc=True)
        )
        if limit is not None:
            query = query.limit(limit)
        return self._execute(query, "list_destinations", "Failed to load destinations")

    def list_bookings(self, user_id: str | None = None) -> list[dict[str, Any]]:
        """
        Fetch bookings with their destination name and image, earliest first.

        Args:
            user_id: Restrict to one user's bookings

        Returns:
            List of booking rows
        """
        query = self.client.table(BOOKINGS_TABLE).select(BOOKING_COLUMNS)
        if user_id:
            query = query.eq("user_id", user_id)
        query = query.order("start_date", desc=False)
        return self._execute(query, "list_bookings", "Failed to load profile data")

    def list_reviews(self) -> list[dict[str, Any]]:
        """Fetch reviews with author and destination, newest first."""
        query = (
            self.client.table(REVIEWS_TABLE)
            .select(REVIEW_COLUMNS)
            .order("created_at", desc=True)
        )
        return self._execute(query, "list_reviews", "Failed to load reviews")

    def list_trip_plans(self, user_id: str) -> list[dict[str, Any]]:
        """Fetch a user's saved trip plans, earliest first."""
        query = (
            self.client.table(TRIP_PLANS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("start_date", desc=False)
        )
        return self._execute(query, "list_trip_plans", "Failed to load trip plans")

    def _insert(self, table: str, payload: dict[str, Any], user_message: str) -> dict[str, Any]:
        operation = f"insert_{table}"
        rows = self._execute(self.client.table(table).insert(payload), operation, user_message)
        logger.info("Inserted row into %s", table)
        return rows[0] if rows else dict(payload)

    def insert_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._insert(BOOKINGS_TABLE, payload, "Failed to create booking")

    def insert_trip_plan(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._insert(TRIP_PLANS_TABLE, payload, "Failed to save trip plan")

    def insert_review(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._insert(REVIEWS_TABLE, payload, "Failed to post review")
